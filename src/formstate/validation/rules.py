"""Built-in validation rules.

Each rule is a factory returning a validator with the signature::

    def check(value: T | None) -> ValidationError | None:
        '''Return an error, or None if valid.'''

Parameterized rules capture their parameters in a closure::

    def max_number(bound: float, message: str | None = None) -> Validator[float]:
        def check(value: float | None) -> ValidationError | None:
            if value is not None and value > bound:
                return errors.max_number(bound, message)
            return None
        return check

The fluent methods on ``DataType`` subclasses push these onto the
type's chain. Custom validators follow the same protocol.

Bounds and format rules let ``None`` through so that presence stays the
job of ``not_null``/``not_empty`` and of a field's ``required`` flag.
The length rules are the exception: a missing string has no length, so
``min_length``, ``max_length`` and ``length`` all fail on it.
"""

import re
from collections.abc import Callable, Sized
from datetime import datetime
from typing import Any

from formstate.validation import errors
from formstate.validation.chain import Validator
from formstate.validation.errors import PasswordWeakness, ValidationError

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def not_null(message: str | None = None) -> Validator[Any]:
    """Value must not be ``None``."""

    def check(value: Any) -> ValidationError | None:
        if value is None:
            return errors.null_value(message)
        return None

    return check


def not_empty(is_empty: Callable[[Any], bool], message: str | None = None) -> Validator[Any]:
    """Value must not be empty according to the owning type's *is_empty*."""

    def check(value: Any) -> ValidationError | None:
        if is_empty(value):
            return errors.empty_value(message)
        return None

    return check


def check(predicate: Callable[[Any], bool], code: str, message: str | None = None) -> Validator[Any]:
    """Value must satisfy *predicate*; fails with a custom *code*."""

    def run(value: Any) -> ValidationError | None:
        if predicate(value):
            return None
        return ValidationError(code=code, message=message or "")

    return run


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def min_number(bound: float, message: str | None = None) -> Validator[float]:
    """Number must be at least *bound*."""

    def check(value: float | None) -> ValidationError | None:
        if value is not None and value < bound:
            return errors.min_number(bound, message)
        return None

    return check


def max_number(bound: float, message: str | None = None) -> Validator[float]:
    """Number must be at most *bound*."""

    def check(value: float | None) -> ValidationError | None:
        if value is not None and value > bound:
            return errors.max_number(bound, message)
        return None

    return check


def integer(message: str | None = None) -> Validator[float]:
    """Number must have no fractional part."""

    def check(value: float | None) -> ValidationError | None:
        if value is None or isinstance(value, int):
            return None
        if not float(value).is_integer():
            return errors.invalid_type("integer", message)
        return None

    return check


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def min_date(bound: datetime, message: str | None = None) -> Validator[datetime]:
    """Date must not be before *bound*."""

    def check(value: datetime | None) -> ValidationError | None:
        if value is not None and value < bound:
            return errors.min_date(bound, message)
        return None

    return check


def max_date(bound: datetime, message: str | None = None) -> Validator[datetime]:
    """Date must not be after *bound*."""

    def check(value: datetime | None) -> ValidationError | None:
        if value is not None and value > bound:
            return errors.max_date(bound, message)
        return None

    return check


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int, message: str | None = None) -> Validator[Sized]:
    """Value must have at least *n* items/characters."""

    def check(value: Sized | None) -> ValidationError | None:
        if value is None or len(value) < n:
            return errors.min_length(n, message)
        return None

    return check


def max_length(n: int, message: str | None = None) -> Validator[Sized]:
    """Value must have at most *n* items/characters."""

    def check(value: Sized | None) -> ValidationError | None:
        if value is None or len(value) > n:
            return errors.max_length(n, message)
        return None

    return check


def length(n: int, message: str | None = None) -> Validator[Sized]:
    """Value must have exactly *n* items/characters."""

    def check(value: Sized | None) -> ValidationError | None:
        if value is None or len(value) != n:
            return errors.exact_length(n, message)
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# https://html.spec.whatwg.org/multipage/input.html#valid-e-mail-address
_EMAIL_RE = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)

# RFC 4122 versions 1-5, plus the nil UUID
_UUID_RE = re.compile(
    r"(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000)",
    re.IGNORECASE,
)

# Loose host[:port][/path] check; the scheme is optional
_URL_RE = re.compile(
    r"(https?://)?[\w-]+(\.[\w-]+)+\.?(:\d+)?(/[^/]+)*/?",
    re.IGNORECASE | re.ASCII,
)


def match(pattern: str | re.Pattern[str], message: str | None = None) -> Validator[str]:
    """String must contain a match for *pattern* (``re.search`` semantics)."""
    compiled = re.compile(pattern)

    def check(value: str | None) -> ValidationError | None:
        if value is None or compiled.search(value):
            return None
        return errors.invalid_pattern(compiled.pattern, message)

    return check


def email(message: str | None = None) -> Validator[str]:
    """String must be a valid email address (structure only)."""

    def check(value: str | None) -> ValidationError | None:
        if value is None or _EMAIL_RE.fullmatch(value):
            return None
        return errors.invalid_email(message)

    return check


def uuid(message: str | None = None) -> Validator[str]:
    """String must be a canonical hyphenated UUID."""

    def check(value: str | None) -> ValidationError | None:
        if value is None or _UUID_RE.fullmatch(value):
            return None
        return errors.invalid_uuid(message)

    return check


def url(message: str | None = None) -> Validator[str]:
    """String must look like an http(s) URL."""

    def check(value: str | None) -> ValidationError | None:
        if value is None or _URL_RE.fullmatch(value):
            return None
        return errors.invalid_url(message)

    return check


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

# Checked in this order; only the first failing cause is reported
_PASSWORD_CHECKS: tuple[tuple[PasswordWeakness, re.Pattern[str]], ...] = (
    ("uppercase", re.compile(r"[A-Z]")),
    ("lowercase", re.compile(r"[a-z]")),
    ("digit", re.compile(r"[0-9]")),
    ("special", re.compile(r"[^A-Za-z0-9]")),
)

PASSWORD_MIN_LENGTH = 8


def password_weakness(value: str) -> PasswordWeakness | None:
    """Return the highest-priority reason *value* is a weak password."""
    if len(value) < PASSWORD_MIN_LENGTH:
        return "length"
    for cause, pattern in _PASSWORD_CHECKS:
        if not pattern.search(value):
            return cause
    return None


def strong_password(message: str | None = None) -> Validator[str]:
    """String must be a strong password.

    Length first, then upper case, lower case, digit and special
    character. ``params["cause"]`` of the error names the failed check.
    """

    def check(value: str | None) -> ValidationError | None:
        if value is None:
            return None
        cause = password_weakness(value)
        if cause is not None:
            return errors.weak_password(cause, message)
        return None

    return check
