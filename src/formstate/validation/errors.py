"""Validation errors — returned as data, never raised.

A ``ValidationError`` carries a stable machine-readable ``code``, a
human-readable ``message`` and the rule parameters that produced it
(bounds, patterns, causes)::

    >>> max_number(10)
    ValidationError(code='INVALID_MAX_NUMBER',
                    message='The value must be less or equal than 10',
                    params={'max': 10})

Each error kind has a constructor function below. Every constructor
accepts an optional ``message`` that replaces the default text.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Literal


class ErrorCode(StrEnum):
    """Codes of the built-in validation errors."""

    NULL_VALUE = "IS_NOT_NULL"
    EMPTY_VALUE = "IS_NOT_EMPTY"
    INVALID_TYPE = "INVALID_TYPE"
    INVALID_MIN_NUMBER = "INVALID_MIN_NUMBER"
    INVALID_MAX_NUMBER = "INVALID_MAX_NUMBER"
    INVALID_MIN_LENGTH = "INVALID_MIN_LENGTH"
    INVALID_MAX_LENGTH = "INVALID_MAX_LENGTH"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_MIN_DATE = "INVALID_MIN_DATE"
    INVALID_MAX_DATE = "INVALID_MAX_DATE"
    INVALID_PATTERN = "INVALID_PATTERN"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_URL = "INVALID_URL"
    INVALID_UUID = "INVALID_UUID"
    PASSWORD_MATCH = "PASSWORD_MATCH"
    WEAK_PASSWORD = "WEAK_PASSWORD"


type PasswordWeakness = Literal["length", "uppercase", "lowercase", "digit", "special"]

_EMPTY_PARAMS: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ValidationError:
    """The outcome of a failed rule.

    ``code`` is an ``ErrorCode`` for built-in rules, or any string passed
    to ``DataType.check()``. ``params`` is read-only.
    """

    code: str
    message: str = ""
    params: Mapping[str, Any] = field(default=_EMPTY_PARAMS)

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", str(self.code))
        if not isinstance(self.params, MappingProxyType):
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __str__(self) -> str:
        return self.message


def _error(code: ErrorCode, message: str | None, default: str, **params: Any) -> ValidationError:
    return ValidationError(code=code, message=message or default, params=params)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def null_value(message: str | None = None) -> ValidationError:
    return _error(ErrorCode.NULL_VALUE, message, "Value cannot be null")


def empty_value(message: str | None = None) -> ValidationError:
    return _error(ErrorCode.EMPTY_VALUE, message, "Value is required")


def invalid_type(type_name: str, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_TYPE,
        message,
        f"Invalid value type. Expecting a {type_name}",
        type=type_name,
    )


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------


def min_number(bound: float, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_MIN_NUMBER,
        message,
        f"The value must be greater or equal than {bound}",
        min=bound,
    )


def max_number(bound: float, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_MAX_NUMBER,
        message,
        f"The value must be less or equal than {bound}",
        max=bound,
    )


def min_length(n: int, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_MIN_LENGTH,
        message,
        f"The value must have at least {n} characters",
        min=n,
    )


def max_length(n: int, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_MAX_LENGTH,
        message,
        f"The value must have at most {n} characters",
        max=n,
    )


def exact_length(n: int, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_LENGTH,
        message,
        f"The value must have exactly {n} characters",
        length=n,
    )


def min_date(bound: datetime, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_MIN_DATE,
        message,
        f"The date must be greater or equal than {bound.isoformat()}",
        min=bound,
    )


def max_date(bound: datetime, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_MAX_DATE,
        message,
        f"The date must be less or equal than {bound.isoformat()}",
        max=bound,
    )


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def invalid_pattern(pattern: str, message: str | None = None) -> ValidationError:
    return _error(
        ErrorCode.INVALID_PATTERN,
        message,
        f"The value must match the pattern {pattern}",
        pattern=pattern,
    )


def invalid_email(message: str | None = None) -> ValidationError:
    return _error(ErrorCode.INVALID_EMAIL, message, "Invalid email address")


def invalid_url(message: str | None = None) -> ValidationError:
    return _error(ErrorCode.INVALID_URL, message, "Invalid URL address")


def invalid_uuid(message: str | None = None) -> ValidationError:
    return _error(ErrorCode.INVALID_UUID, message, "Invalid UUID")


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------


def password_mismatch(message: str | None = None) -> ValidationError:
    return _error(ErrorCode.PASSWORD_MATCH, message, "Passwords do not match")


_WEAK_PASSWORD_MESSAGES: dict[str, str] = {
    "length": "Password must be at least 8 characters long",
    "uppercase": "Password must contain at least an upper case character",
    "lowercase": "Password must contain at least a lower case character",
    "digit": "Password must contain at least a digit",
    "special": "Password must contain at least a special character",
}


def weak_password(cause: PasswordWeakness, message: str | None = None) -> ValidationError:
    """Password failed the strength check; ``params["cause"]`` says why."""
    return _error(
        ErrorCode.WEAK_PASSWORD,
        message,
        _WEAK_PASSWORD_MESSAGES[cause],
        cause=cause,
    )
