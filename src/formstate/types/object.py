"""Object data type."""

from decimal import Decimal
from typing import Any

from formstate.errors import TypeCastError
from formstate.types.base import DataType

_SCALARS = (str, bytes, bytearray, int, float, complex, Decimal)


class ObjectType(DataType[object]):
    """Any composite value (mapping, dataclass instance, list...).

    Scalars are rejected.
    """

    __slots__ = ()
    name = "object"

    def cast(self, value: Any) -> object | None:
        if value is None:
            return None
        if isinstance(value, _SCALARS):
            raise TypeCastError(value, self.name)
        return value
