"""Data types — per-kind casting plus fluent validation rules.

Usage::

    from formstate.types import NumberType, StringType

    age = NumberType().min(18)
    email = StringType().not_empty().email()
"""

from formstate.types.array import ArrayType
from formstate.types.base import DataType
from formstate.types.boolean import BooleanType
from formstate.types.date import DateType
from formstate.types.number import Number, NumberType
from formstate.types.object import ObjectType
from formstate.types.string import StringType

__all__ = [
    "ArrayType",
    "BooleanType",
    "DataType",
    "DateType",
    "Number",
    "NumberType",
    "ObjectType",
    "StringType",
]
