"""FieldController — per-field reactive state machine.

Wraps a ``DataValue`` with a name, required-ness, a validate trigger
and a list of watchers. Owned by exactly one ``FormController``; the
back-reference is only used to report changes upward and to read
sibling fields.

Validate triggers:

- ``CHANGE``: every value change validates, then notifies.
- ``BLUR``: changes do not validate; ``on_blur()`` does, and notifies
  with ``VALIDATION`` only when the error code flips.
- ``SUBMIT``: the field is validated by the form's full pass only.

Change propagation for one mutation is always inner to outer: the
field's own watchers first, then ``form.on_field_change(field)``.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from formstate._internal.watchers import Watchers
from formstate.errors import ConfigurationError
from formstate.inputs import FieldInput, input_value
from formstate.validation import errors
from formstate.validation.errors import ValidationError

if TYPE_CHECKING:
    from formstate.form import FormController
    from formstate.types.base import DataType
    from formstate.value import DataValue

logger = logging.getLogger("formstate.field")


class ValidateTrigger(StrEnum):
    """When a field validates itself."""

    CHANGE = "change"
    BLUR = "blur"
    SUBMIT = "submit"

    @classmethod
    def parse(cls, value: "ValidateTrigger | str") -> "ValidateTrigger":
        """Accept a member or its string value; reject anything else."""
        try:
            return cls(value)
        except ValueError:
            options = ", ".join(member.value for member in cls)
            msg = f"Unknown validate trigger {value!r}. Expected one of: {options}"
            raise ConfigurationError(msg) from None


class ChangeType(StrEnum):
    """Why a field notified its watchers."""

    CHANGE = "change"  # the value changed
    VALIDATION = "validation"  # the error status changed on blur
    REFRESH = "refresh"  # redisplay requested, nothing changed


@dataclass(frozen=True, slots=True)
class FieldChange:
    """What a field watcher receives alongside the field."""

    value: Any
    old_value: Any
    change_type: ChangeType


type FieldWatcher = Callable[["FieldController[Any]", FieldChange], None]
type FieldValidator = Callable[["FieldController[Any]"], ValidationError | None]


class FieldController[T]:
    """State of one form field.

    Attributes:
        name: Field name, unique within its form.
        type: The data type casting and validating the value.
        form: The owning form.
        data: The underlying ``DataValue``.
        validate_on: The trigger in effect for this field.
    """

    __slots__ = ("_required", "_validate", "_watchers", "data", "form", "name", "type", "validate_on")

    def __init__(
        self,
        form: "FormController",
        name: str,
        type: "DataType[T]",  # noqa: A002
        value: Any = None,
        *,
        required: bool | str = False,
        validate: FieldValidator | None = None,
        validate_on: ValidateTrigger | str = ValidateTrigger.SUBMIT,
    ) -> None:
        self.form = form
        self.name = name
        self.type = type
        self.validate_on = ValidateTrigger.parse(validate_on)
        self._required = required
        self._validate = validate
        self._watchers: Watchers[[FieldController[Any], FieldChange]] = Watchers()
        self.data: DataValue[T] = type.new_value(
            value,
            on_change=self._on_value_change,
            on_validate=self._on_validate,
        )
        self.data.auto_validate = self.validate_on is ValidateTrigger.CHANGE

    # -- Required ---------------------------------------------------------

    @property
    def required(self) -> bool | str:
        """``False``, ``True``, or the message to use when the field is empty.

        Mutable at runtime so surrounding logic can make a field
        conditionally required.
        """
        return self._required

    @required.setter
    def required(self, required: bool | str) -> None:
        self._required = required

    @property
    def is_required(self) -> bool:
        return bool(self._required)

    # -- Value ------------------------------------------------------------

    @property
    def value(self) -> T | None:
        return self.data.value

    @value.setter
    def value(self, value: Any) -> None:
        self.data.value = value

    @property
    def error(self) -> ValidationError | None:
        return self.data.error

    @property
    def is_dirty(self) -> bool:
        return self.data.is_dirty

    @property
    def is_valid(self) -> bool:
        return self.data.is_valid

    @property
    def is_empty(self) -> bool:
        return self.data.is_empty

    # -- Adapter contract -------------------------------------------------

    def on_change(self, field_input: FieldInput) -> None:
        """The user changed the value.

        Raises:
            UnsupportedInputError: *field_input* is not a tagged input.
            TypeCastError: The carried value does not cast to ``type``.
        """
        self.value = input_value(field_input)

    def on_blur(self) -> None:
        """The user left the field. Validates only under the ``BLUR`` trigger."""
        if self.validate_on is not ValidateTrigger.BLUR:
            return
        old_code = self.data.error.code if self.data.error is not None else None
        new_error = self.validate()
        new_code = new_error.code if new_error is not None else None
        if old_code != new_code:
            logger.debug("Field %r error changed on blur: %s -> %s", self.name, old_code, new_code)
            self._notify(ChangeType.VALIDATION, self.value)

    def watch(self, watcher: FieldWatcher) -> Callable[[], None]:
        """Register *watcher*; return a function that unregisters it."""
        return self._watchers.add(watcher)

    # -- Validation -------------------------------------------------------

    def validate(self) -> ValidationError | None:
        """Validate now, whatever the trigger. Stores and returns the error."""
        return self.data.validate()

    def refresh(self) -> None:
        """Ask watchers to redisplay the field; nothing changes."""
        self._notify(ChangeType.REFRESH, self.value)

    # -- Siblings ---------------------------------------------------------

    def get_field(self, name: str) -> "FieldController[Any]":
        """Return the controller of another field of the same form."""
        return self.form.get_field_controller(name)

    def get_field_value(self, name: str) -> Any:
        return self.get_field(name).value

    # -- Internals --------------------------------------------------------

    def _on_validate(self, value: T | None) -> ValidationError | None:
        if self._required and self.type.is_empty(value):
            message = self._required if isinstance(self._required, str) else None
            return errors.empty_value(message)
        if self._validate is not None:
            return self._validate(self)
        return None

    def _on_value_change(self, raw: Any, old_value: T | None) -> None:
        self._notify(ChangeType.CHANGE, old_value)
        self.form.on_field_change(self)

    def _notify(self, change_type: ChangeType, old_value: Any) -> None:
        self._watchers.notify(self, FieldChange(self.value, old_value, change_type))

    def __repr__(self) -> str:
        return f"FieldController({self.name!r}, value={self.value!r}, error={self.error!r})"


def same_as(other: str, message: str | None = None) -> FieldValidator:
    """Per-field validator: the value must equal field *other*'s value.

    Typical use is a password confirmation::

        "confirm": FieldDescriptor(StringType(), validate=same_as("password"))
    """

    def check(field: FieldController[Any]) -> ValidationError | None:
        if field.type.equals(field.value, field.get_field_value(other)):
            return None
        return errors.password_mismatch(message)

    return check
