"""FormController — owns a closed set of fields and the submit lifecycle.

Usage::

    form = FormController(
        {
            "age": FieldDescriptor(NumberType().min(18)),
            "email": FieldDescriptor(StringType().email(), required=True),
        },
        on_submit=AsyncSubmit(save),
        data={"age": 30},
    )
    form.watch(lambda form, change: rerender())

    form.get_field_controller("email").on_change(TextInput("me@example.com"))
    outcome = await form.submit_async()

Fields are created once, at construction, and never added or removed.
``is_dirty()``, ``is_valid()``, ``errors`` and ``data`` are read-only
views recomputed on every access.

Submission:

1. ``validate()`` runs on every field; failing fields are refreshed.
   If any failed, the submission stops here with no notification.
2. ``is_submitting`` becomes True and watchers get ``SUBMITTING``.
3. The submit handler runs. An exception it raises is captured.
4. ``is_submitting`` becomes False and watchers get ``SUBMITTED``,
   with ``error`` set to the captured exception, if any.

Field values are never rolled back after a failed submission.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from anyio.abc import TaskGroup

from formstate._internal.watchers import Watchers
from formstate.config import FormConfig
from formstate.errors import ConfigurationError, SubmitInProgressError, UnknownFieldError
from formstate.field import FieldController, FieldValidator, ValidateTrigger
from formstate.submit import (
    AsyncSubmit,
    SubmitOutcome,
    Submitter,
    SubmitStatus,
    SyncSubmit,
    as_submitter,
)
from formstate.types.base import DataType
from formstate.validation.errors import ValidationError

logger = logging.getLogger("formstate.form")

_NO_META: Mapping[str, Any] = MappingProxyType({})


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Declaration of one form field.

    Attributes:
        type: Data type, with its rules already attached.
        serialize: Applied to the value when building ``form.data``.
            The value is used as-is when omitted.
        validate: Custom per-field validator, run after the required
            check and before the type's rules.
        validate_on: Trigger for this field; defaults to the form's.
        required: ``True``, or the message to show when empty.
        meta: Presentation data (label, placeholder, options...). Passed
            through untouched.
    """

    type: DataType[Any]
    serialize: Callable[[Any], Any] | None = None
    validate: FieldValidator | None = None
    validate_on: ValidateTrigger | str | None = None
    required: bool | str = False
    meta: Mapping[str, Any] = field(default=_NO_META)


@dataclass(frozen=True, slots=True)
class FormField:
    """A constructed field: its controller plus declaration pass-throughs."""

    controller: FieldController[Any]
    serialize: Callable[[Any], Any] | None = None
    meta: Mapping[str, Any] = field(default=_NO_META)


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


class FormChangeType(StrEnum):
    FIELD = "field"
    SUBMIT = "submit"


class FormChangeStatus(StrEnum):
    CHANGED = "changed"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


@dataclass(frozen=True, slots=True)
class FormChange:
    """What a form watcher receives alongside the form.

    ``field`` is set for ``FIELD`` changes. ``error`` is set on a
    ``SUBMITTED`` notification when the handler raised; success and
    failure are told apart by its presence.
    """

    type: FormChangeType
    status: FormChangeStatus
    field: FieldController[Any] | None = None
    error: Exception | None = None


type FormWatcher = Callable[["FormController", FormChange], None]
type ErrorTranslator = Callable[[ValidationError], str]


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class FormController:
    """Orchestrates the fields of one form session."""

    def __init__(
        self,
        fields: Mapping[str, FieldDescriptor],
        on_submit: Submitter | Callable[["FormController"], object],
        *,
        data: Mapping[str, Any] | None = None,
        translate_error: ErrorTranslator | None = None,
        validate_on: ValidateTrigger | str | None = None,
        config: FormConfig | None = None,
    ) -> None:
        self.config = config or FormConfig()
        self.is_submitting = False
        self.translate_error: ErrorTranslator = translate_error or self._translate_error
        self._submitter = as_submitter(on_submit)
        self._watchers: Watchers[[FormController, FormChange]] = Watchers()

        default_trigger = ValidateTrigger.parse(validate_on or self.config.validate_on)
        seed = data or {}
        self._fields: dict[str, FormField] = {}
        for name, descriptor in fields.items():
            controller = FieldController(
                self,
                name,
                descriptor.type,
                seed.get(name),
                required=descriptor.required,
                validate=descriptor.validate,
                validate_on=descriptor.validate_on or default_trigger,
            )
            self._fields[name] = FormField(controller, descriptor.serialize, descriptor.meta)

    # -- Fields -----------------------------------------------------------

    @property
    def fields(self) -> Mapping[str, FormField]:
        """Read-only view of the fields, in declaration order."""
        return MappingProxyType(self._fields)

    def get_field(self, name: str) -> FormField:
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def get_field_controller(self, name: str) -> FieldController[Any]:
        return self.get_field(name).controller

    def _controllers(self) -> Iterator[FieldController[Any]]:
        for form_field in self._fields.values():
            yield form_field.controller

    # -- Watchers ---------------------------------------------------------

    def watch(self, watcher: FormWatcher) -> Callable[[], None]:
        """Register *watcher*; return a function that unregisters it."""
        return self._watchers.add(watcher)

    def on_field_change(self, field: FieldController[Any]) -> None:
        """Called by a field after its own watchers have been notified."""
        self._watchers.notify(self, FormChange(FormChangeType.FIELD, FormChangeStatus.CHANGED, field))

    def _fire_submit(self, status: FormChangeStatus, error: Exception | None = None) -> None:
        self._watchers.notify(self, FormChange(FormChangeType.SUBMIT, status, error=error))

    # -- Views ------------------------------------------------------------

    def is_dirty(self) -> bool:
        return any(controller.is_dirty for controller in self._controllers())

    def is_valid(self) -> bool:
        return all(controller.is_valid for controller in self._controllers())

    @property
    def errors(self) -> list[ValidationError]:
        """Current field errors, in field declaration order."""
        return [c.error for c in self._controllers() if c.error is not None]

    @property
    def data(self) -> dict[str, Any]:
        """Submission payload: name -> serialized (or raw) value."""
        payload: dict[str, Any] = {}
        for name, form_field in self._fields.items():
            value = form_field.controller.value
            payload[name] = form_field.serialize(value) if form_field.serialize else value
        return payload

    def _translate_error(self, error: ValidationError) -> str:
        return error.message or error.code or self.config.fallback_error_message

    # -- Validation -------------------------------------------------------

    def validate(self) -> bool:
        """Validate every field, whatever its trigger.

        Failing fields are refreshed so their watchers display the error
        even when the field's own trigger has not fired.
        """
        is_valid = True
        for controller in self._controllers():
            if controller.validate() is not None:
                is_valid = False
                controller.refresh()
        return is_valid

    # -- Submission -------------------------------------------------------

    def submit(self) -> SubmitOutcome:
        """Validate and run a synchronous submit handler.

        Raises:
            ConfigurationError: The form was given an ``AsyncSubmit``.
            SubmitInProgressError: A submission is already running and
                the resubmit policy is ``"reject"``.
        """
        if not isinstance(self._submitter, SyncSubmit):
            msg = "submit() needs a synchronous handler; use submit_async() or submit_soon()"
            raise ConfigurationError(msg)
        blocked = self._begin_submit()
        if blocked is not None:
            return blocked
        error = None
        try:
            self._submitter.handler(self)
        except Exception as exc:
            error = self._handler_failed(exc)
        finally:
            self.is_submitting = False
        return self._finish_submit(error)

    async def submit_async(self) -> SubmitOutcome:
        """Validate and run the submit handler, awaiting it if asynchronous.

        Other tasks may keep changing fields while the handler is
        pending. If the handler is cancelled, ``is_submitting`` is reset
        and the cancellation propagates without a ``SUBMITTED``
        notification.

        Raises:
            SubmitInProgressError: A submission is already running and
                the resubmit policy is ``"reject"``.
        """
        blocked = self._begin_submit()
        if blocked is not None:
            return blocked
        return await self._run_submit()

    def submit_soon(self, task_group: TaskGroup) -> SubmitOutcome | None:
        """Validate now, then run the handler in *task_group* and return.

        Returns the outcome when the submission stopped before the
        handler (``INVALID`` or ``IGNORED``); returns ``None`` once the
        handler is scheduled. The final outcome is reported through the
        ``SUBMITTED`` notification.
        """
        blocked = self._begin_submit()
        if blocked is not None:
            return blocked
        task_group.start_soon(self._run_submit, name="formstate.submit")
        return None

    def _begin_submit(self) -> SubmitOutcome | None:
        if self.is_submitting:
            if self.config.resubmit == "ignore":
                logger.debug("Submit ignored: a submission is already running")
                return SubmitOutcome(SubmitStatus.IGNORED)
            raise SubmitInProgressError("A submission is already running")
        if not self.validate():
            logger.debug("Submit stopped: %d field(s) invalid", len(self.errors))
            return SubmitOutcome(SubmitStatus.INVALID)
        self.is_submitting = True
        try:
            self._fire_submit(FormChangeStatus.SUBMITTING)
        except BaseException:
            # Watcher failed; the handler never runs
            self.is_submitting = False
            raise
        return None

    async def _run_submit(self) -> SubmitOutcome:
        error = None
        try:
            match self._submitter:
                case AsyncSubmit(handler=handler):
                    await handler(self)
                case SyncSubmit(handler=handler):
                    handler(self)
        except Exception as exc:
            error = self._handler_failed(exc)
        finally:
            self.is_submitting = False
        return self._finish_submit(error)

    def _handler_failed(self, exc: Exception) -> Exception:
        logger.warning("Submit handler failed: %s", exc, exc_info=True)
        return exc

    def _finish_submit(self, error: Exception | None) -> SubmitOutcome:
        self._fire_submit(FormChangeStatus.SUBMITTED, error)
        if error is not None:
            return SubmitOutcome(SubmitStatus.FAILED, error)
        logger.debug("Submit completed")
        return SubmitOutcome(SubmitStatus.SUBMITTED)

    def __repr__(self) -> str:
        return f"FormController(fields={list(self._fields)!r}, submitting={self.is_submitting})"
