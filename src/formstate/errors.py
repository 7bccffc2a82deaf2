"""formstate exception hierarchy.

Shared across types, fields, and forms so every module raises and
catches the same types.

Validation failures are *not* exceptions: rules return
``ValidationError`` values (see ``formstate.validation.errors``).
Everything here signals a programming or input-shape error that the
caller is expected to fix.
"""

from typing import Any


class FormStateError(Exception):
    """Base for all formstate-specific errors."""


class ConfigurationError(FormStateError):
    """Raised when a form or field is configured inconsistently.

    Typically raised at ``FormController`` construction, or when a
    submit entry point does not match the declared handler contract.
    """


class TypeCastError(FormStateError, TypeError):
    """Raw input cannot be coerced to a data type's canonical form.

    Raised synchronously by ``DataType.cast()`` and by every value
    setter that casts. Never caught inside the engine.
    """

    code = "TYPE_CAST_ERROR"

    def __init__(self, value: Any, type_name: str, message: str | None = None) -> None:
        self.value = value
        self.type_name = type_name
        super().__init__(message or f"Trying to cast {value!r} as a {type_name}")


class UnsupportedInputError(FormStateError, TypeError):
    """``FieldController.on_change()`` received something other than a
    tagged input variant (``RawValue``, ``CheckboxState``, ``TextInput``).
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unsupported on_change argument: {value!r}")


class UnknownFieldError(FormStateError, KeyError):
    """A field name was looked up that the form does not declare."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Field {self.name!r} is not defined"


class SubmitInProgressError(FormStateError):
    """``submit()`` was called while a previous submission is still running.

    Only raised under the ``"reject"`` resubmit policy (the default).
    """
