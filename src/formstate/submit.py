"""Submit handler contracts and outcomes.

A form's submit handler is either synchronous or asynchronous, and says
so up front; the engine never inspects a return value to find out::

    FormController(fields, on_submit=SyncSubmit(save))          # def save(form)
    FormController(fields, on_submit=AsyncSubmit(save_remote))  # async def save_remote(form)

A bare callable is taken as ``SyncSubmit``; a bare ``async def`` is
rejected, since its coroutine would never be awaited.

Every submission produces a ``SubmitOutcome``. It is truthy only when
the handler ran and did not raise::

    outcome = await form.submit_async()
    if not outcome:
        show(outcome.error or form.errors)
"""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from formstate.errors import ConfigurationError

if TYPE_CHECKING:
    from formstate.form import FormController


@dataclass(frozen=True, slots=True)
class SyncSubmit:
    """A handler whose outcome is known when it returns."""

    handler: "Callable[[FormController], object]"


@dataclass(frozen=True, slots=True)
class AsyncSubmit:
    """A handler returning an awaitable; the outcome is known once it settles."""

    handler: "Callable[[FormController], Awaitable[object]]"


type Submitter = SyncSubmit | AsyncSubmit


def as_submitter(on_submit: "Submitter | Callable[[FormController], object]") -> Submitter:
    """Normalize *on_submit*; bare callables become ``SyncSubmit``.

    Raises:
        ConfigurationError: *on_submit* is a coroutine function not
            wrapped in ``AsyncSubmit``.
    """
    if isinstance(on_submit, SyncSubmit | AsyncSubmit):
        return on_submit
    if inspect.iscoroutinefunction(on_submit):
        msg = f"{on_submit!r} is a coroutine function; wrap it in AsyncSubmit"
        raise ConfigurationError(msg)
    return SyncSubmit(on_submit)


class SubmitStatus(StrEnum):
    INVALID = "invalid"  # validation failed, handler not called
    SUBMITTED = "submitted"  # handler completed
    FAILED = "failed"  # handler raised
    IGNORED = "ignored"  # a submission was already running ("ignore" policy)


@dataclass(frozen=True, slots=True)
class SubmitOutcome:
    """Result of one call to a submit entry point."""

    status: SubmitStatus
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status is SubmitStatus.SUBMITTED

    def __bool__(self) -> bool:
        return self.ok
