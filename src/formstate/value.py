"""DataValue — a reactive container for one typed value.

Binds a ``DataType`` to a current value, remembers the value it was
created with, and keeps the error from the most recent ``validate()``.

Assigning ``value`` casts the input first. Nothing happens when the
cast value equals the current one; otherwise the error is cleared, the
value swapped, the value revalidated when ``auto_validate`` is on, and
finally ``on_change(raw_input, old_value)`` is called::

    dv = NumberType().max(10).new_value(3)
    dv.value = "15"
    dv.value       # -> 15
    dv.error.code  # -> "INVALID_MAX_NUMBER"
    dv.is_dirty    # -> True
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from formstate.validation.errors import ValidationError

if TYPE_CHECKING:
    from formstate.types.base import DataType

type OnChange[T] = Callable[[Any, T | None], None]
type OnValidate[T] = Callable[[T | None], ValidationError | None]


class DataValue[T]:
    """Current value, immutable initial value, and last validation error.

    Invariants:
        - ``value`` is ``None`` or the canonical cast form for ``type``.
        - ``error`` is the result of the last ``validate()``, and is reset
          to ``None`` whenever ``value`` changes.
    """

    __slots__ = ("_initial", "_on_change", "_on_validate", "_value", "auto_validate", "error", "type")

    def __init__(
        self,
        type: "DataType[T]",  # noqa: A002
        value: T | None = None,
        *,
        on_change: OnChange[T] | None = None,
        on_validate: OnValidate[T] | None = None,
        auto_validate: bool = True,
    ) -> None:
        self.type = type
        self._value = value
        self._initial = value
        self._on_change = on_change
        self._on_validate = on_validate
        self.auto_validate = auto_validate
        self.error: ValidationError | None = None

    @property
    def value(self) -> T | None:
        return self._value

    @value.setter
    def value(self, raw: Any) -> None:
        new_value = self.type.cast(raw)
        if self.type.equals(new_value, self._value):
            return
        self.error = None
        old_value = self._value
        self._value = new_value
        if self.auto_validate:
            self.validate()
        if self._on_change is not None:
            self._on_change(raw, old_value)

    @property
    def initial_value(self) -> T | None:
        """The value the container was created with."""
        return self._initial

    def validate(self) -> ValidationError | None:
        """Run the injected hook, then the type's chain; store the first error."""
        error = None
        if self._on_validate is not None:
            error = self._on_validate(self._value)
        if error is None:
            error = self.type.validate(self._value)
        self.error = error
        return error

    @property
    def is_empty(self) -> bool:
        return self.type.is_empty(self._value)

    @property
    def is_valid(self) -> bool:
        """True unless the last ``validate()`` produced an error."""
        return self.error is None

    @property
    def is_dirty(self) -> bool:
        return not self.type.equals(self._value, self._initial)

    @property
    def is_null(self) -> bool:
        return self._value is None

    def __repr__(self) -> str:
        return f"DataValue({self._value!r}, error={self.error!r})"
