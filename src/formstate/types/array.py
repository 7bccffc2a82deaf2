"""Array data type."""

from collections.abc import Sequence
from typing import Any

from formstate.errors import TypeCastError
from formstate.types.base import DataType


class ArrayType[T](DataType[Sequence[T]]):
    """A list or tuple, passed through as-is.

    Strings and bytes are sequences too, but are rejected: a text input
    is never an array. An empty sequence counts as empty.
    """

    __slots__ = ()
    name = "array"

    def cast(self, value: Any) -> Sequence[T] | None:
        if value is None:
            return None
        if isinstance(value, list | tuple):
            return value
        raise TypeCastError(value, self.name)

    def is_empty(self, value: Sequence[T] | None) -> bool:
        return value is None or len(value) == 0
