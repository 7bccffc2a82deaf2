"""Boolean data type."""

from typing import Any

from formstate.errors import TypeCastError
from formstate.types.base import DataType


class BooleanType(DataType[bool]):
    """``True``/``False``.

    Numbers cast by truthiness (zero is ``False``). Strings must be
    exactly ``"true"`` or ``"false"``.
    """

    __slots__ = ()
    name = "boolean"

    def cast(self, value: Any) -> bool | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, int | float):
            return value != 0
        if value == "true":
            return True
        if value == "false":
            return False
        raise TypeCastError(value, self.name)
