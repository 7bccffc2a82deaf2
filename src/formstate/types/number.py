"""Number data type."""

import math
from typing import Any, Self

from formstate.errors import TypeCastError
from formstate.types.base import DataType
from formstate.validation import rules

type Number = int | float


class NumberType(DataType[Number]):
    """``int`` or ``float``.

    Strings are parsed as ``int`` first, then ``float``. Blank strings
    cast to ``None`` (an empty text input means "no value"). ``bool`` is
    rejected even though it subclasses ``int``.
    """

    __slots__ = ()
    name = "number"

    def cast(self, value: Any) -> Number | None:
        if value is None:
            return None
        if isinstance(value, bool):
            raise TypeCastError(value, self.name)
        if isinstance(value, int | float):
            return value
        if isinstance(value, str):
            return self._parse(value)
        raise TypeCastError(value, self.name)

    def _parse(self, text: str) -> Number | None:
        stripped = text.strip()
        if not stripped:
            return None
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            number = float(stripped)
        except ValueError:
            raise TypeCastError(text, self.name) from None
        if math.isnan(number):
            raise TypeCastError(text, self.name)
        return number

    def min(self, bound: Number, message: str | None = None) -> Self:
        return self.push(rules.min_number(bound, message))

    def max(self, bound: Number, message: str | None = None) -> Self:
        return self.push(rules.max_number(bound, message))

    def integer(self, message: str | None = None) -> Self:
        return self.push(rules.integer(message))
