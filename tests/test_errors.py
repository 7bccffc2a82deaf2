"""Tests for formstate.errors — exception hierarchy and error messages."""

import pytest

from formstate.errors import (
    ConfigurationError,
    FormStateError,
    SubmitInProgressError,
    TypeCastError,
    UnknownFieldError,
    UnsupportedInputError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [ConfigurationError, SubmitInProgressError, TypeCastError, UnknownFieldError, UnsupportedInputError],
    )
    def test_is_formstate_error(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, FormStateError)

    def test_cast_error_is_type_error(self) -> None:
        assert issubclass(TypeCastError, TypeError)

    def test_unsupported_input_is_type_error(self) -> None:
        assert issubclass(UnsupportedInputError, TypeError)

    def test_unknown_field_is_key_error(self) -> None:
        assert issubclass(UnknownFieldError, KeyError)


class TestTypeCastError:
    def test_default_message(self) -> None:
        err = TypeCastError("abc", "number")
        assert str(err) == "Trying to cast 'abc' as a number"
        assert err.value == "abc"
        assert err.type_name == "number"
        assert err.code == "TYPE_CAST_ERROR"

    def test_custom_message(self) -> None:
        assert str(TypeCastError(None, "date", "No bound")) == "No bound"


class TestOtherErrors:
    def test_unknown_field_message(self) -> None:
        err = UnknownFieldError("email")
        assert err.name == "email"
        assert str(err) == "Field 'email' is not defined"

    def test_unsupported_input_message(self) -> None:
        err = UnsupportedInputError(42)
        assert err.value == 42
        assert "42" in str(err)
