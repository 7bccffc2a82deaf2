"""String data type."""

import math
import re
from typing import Any, Self

from formstate.errors import TypeCastError
from formstate.types.base import DataType
from formstate.validation import rules


class StringType(DataType[str]):
    """Text.

    Numbers are stringified so they read back through ``NumberType``:
    integral floats drop the ``.0`` (``1.0`` -> ``"1"``), and infinities
    and NaN become ``"Infinity"``, ``"-Infinity"`` and ``"NaN"``.
    Booleans become ``"true"``/``"false"`` so they round-trip through
    ``BooleanType``. Composite values are rejected. ``""`` counts as empty.
    """

    __slots__ = ()
    name = "string"

    def cast(self, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _format_float(value)
        raise TypeCastError(value, self.name)

    def is_empty(self, value: str | None) -> bool:
        return value is None or value == ""

    def min_length(self, n: int, message: str | None = None) -> Self:
        return self.push(rules.min_length(n, message))

    def max_length(self, n: int, message: str | None = None) -> Self:
        return self.push(rules.max_length(n, message))

    def length(self, n: int, message: str | None = None) -> Self:
        return self.push(rules.length(n, message))

    def match(self, pattern: str | re.Pattern[str], message: str | None = None) -> Self:
        return self.push(rules.match(pattern, message))

    def email(self, message: str | None = None) -> Self:
        return self.push(rules.email(message))

    def uuid(self, message: str | None = None) -> Self:
        return self.push(rules.uuid(message))

    def url(self, message: str | None = None) -> Self:
        return self.push(rules.url(message))

    def strong_password(self, message: str | None = None) -> Self:
        return self.push(rules.strong_password(message))


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
