"""Validation — ordered rule chains and structured errors.

Rules are attached to data types through their fluent methods (see
``formstate.types``) and run in attachment order; the first failing
rule's ``ValidationError`` is the result::

    from formstate.types import NumberType

    age = NumberType().not_null().min(18)
    age.validate(age.cast("15"))
    # ValidationError(code='INVALID_MIN_NUMBER', ...)

The rule factories themselves live in ``formstate.validation.rules``.
"""

from formstate.validation.chain import Validation, Validator
from formstate.validation.errors import ErrorCode, PasswordWeakness, ValidationError

__all__ = [
    "ErrorCode",
    "PasswordWeakness",
    "Validation",
    "ValidationError",
    "Validator",
]
