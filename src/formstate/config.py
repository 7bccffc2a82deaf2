"""Form configuration.

FormConfig is a frozen dataclass: fields are fixed after creation and checked
in ``__post_init__``.
"""

from dataclasses import dataclass
from typing import Literal

from formstate.errors import ConfigurationError
from formstate.field import ValidateTrigger

type ResubmitPolicy = Literal["reject", "ignore"]


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Form-level defaults. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(validate_on=ValidateTrigger.BLUR, resubmit="ignore")
    """

    # Trigger used by fields that do not declare their own
    validate_on: ValidateTrigger = ValidateTrigger.SUBMIT

    # Shown by the default error translator when an error has no message or code
    fallback_error_message: str = "validation error"

    # What submit() does while a submission is already running:
    # "reject" raises SubmitInProgressError, "ignore" returns an IGNORED outcome
    resubmit: ResubmitPolicy = "reject"

    def __post_init__(self) -> None:
        if self.resubmit not in ("reject", "ignore"):
            msg = f"resubmit must be 'reject' or 'ignore', got {self.resubmit!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "validate_on", ValidateTrigger.parse(self.validate_on))
