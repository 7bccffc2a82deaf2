"""Tagged input variants for ``FieldController.on_change()``.

The rendering layer decides what kind of input it is forwarding and
wraps it accordingly; the engine never sniffs the shape of an event::

    field.on_change(RawValue(42))                 # a value of the field's type
    field.on_change(CheckboxState(checked=True))  # checkbox-like control
    field.on_change(TextInput("42"))              # text-like control

Free-threading safety:
    - Every variant is a frozen dataclass (immutable, safe to share)
"""

from dataclasses import dataclass
from typing import Any

from formstate.errors import UnsupportedInputError


@dataclass(frozen=True, slots=True)
class RawValue:
    """A value handed over as-is; it is cast by the field's type."""

    value: Any


@dataclass(frozen=True, slots=True)
class CheckboxState:
    """State of a checkbox-like control; only ``checked`` is used."""

    checked: bool


@dataclass(frozen=True, slots=True)
class TextInput:
    """State of a text-like control; only its string ``value`` is used."""

    value: str


type FieldInput = RawValue | CheckboxState | TextInput


def input_value(field_input: FieldInput) -> Any:
    """Extract the raw value carried by *field_input*.

    Raises:
        UnsupportedInputError: *field_input* is not one of the variants.
    """
    match field_input:
        case RawValue(value=value):
            return value
        case CheckboxState(checked=checked):
            return checked
        case TextInput(value=value):
            return value
        case _:
            raise UnsupportedInputError(field_input)
