"""DataType — casting, equality, emptiness and a fluent rule builder.

A data type owns the validation chain for every value it produces.
Concrete types implement ``cast()`` and add type-specific rules::

    age = NumberType().not_null().min(0).max(130).integer()
    age.cast("42")        # -> 42
    age.validate(-1)      # -> INVALID_MIN_NUMBER
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from formstate.validation import rules
from formstate.validation.chain import Validation, Validator
from formstate.validation.errors import ValidationError

if TYPE_CHECKING:
    from formstate.value import DataValue, OnChange, OnValidate


class DataType[T](ABC):
    """Base class for all data types.

    Subclasses must implement ``cast()``. ``equals()`` and
    ``is_empty()`` may be overridden when value equality or emptiness
    differ from the defaults (``==`` and ``is None``).
    """

    __slots__ = ("_validation",)

    #: Name used in cast error messages.
    name: str = "value"

    def __init__(self) -> None:
        self._validation: Validation[T] | None = None

    @abstractmethod
    def cast(self, value: Any) -> T | None:
        """Coerce *value* to the canonical form, or raise ``TypeCastError``.

        ``None`` always casts to ``None``.
        """

    def equals(self, value1: T | None, value2: T | None) -> bool:
        return value1 == value2

    def is_empty(self, value: T | None) -> bool:
        return value is None

    @property
    def validation(self) -> Validation[T]:
        """The type's chain, created on first access."""
        if self._validation is None:
            self._validation = Validation()
        return self._validation

    def validate(self, value: T | None) -> ValidationError | None:
        if self._validation is None:
            return None
        return self._validation.validate(value)

    def new_value(
        self,
        value: Any = None,
        on_change: "OnChange[T] | None" = None,
        on_validate: "OnValidate[T] | None" = None,
    ) -> "DataValue[T]":
        """Cast *value* and wrap it in a ``DataValue`` bound to this type."""
        from formstate.value import DataValue

        return DataValue(self, self.cast(value), on_change=on_change, on_validate=on_validate)

    # -- Fluent rules ---------------------------------------------------

    def push(self, validator: Validator[T]) -> Self:
        """Append a custom validator to the chain."""
        self.validation.push(validator)
        return self

    def not_null(self, message: str | None = None) -> Self:
        return self.push(rules.not_null(message))

    def not_empty(self, message: str | None = None) -> Self:
        return self.push(rules.not_empty(self.is_empty, message))

    def check(
        self,
        predicate: Callable[[T | None], bool],
        code: str,
        message: str | None = None,
    ) -> Self:
        """Fail with *code* when *predicate* returns false."""
        return self.push(rules.check(predicate, code, message))

    def __repr__(self) -> str:
        count = len(self._validation) if self._validation is not None else 0
        return f"{type(self).__name__}({count} rules)"
