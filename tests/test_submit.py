"""Tests for the submit lifecycle — sync, async, failures and re-entrancy."""

import logging
from typing import Any

import anyio
import pytest

from formstate.config import FormConfig
from formstate.errors import ConfigurationError, SubmitInProgressError
from formstate.form import FieldDescriptor, FormChange, FormChangeStatus, FormChangeType, FormController
from formstate.submit import AsyncSubmit, SubmitOutcome, SubmitStatus, SyncSubmit
from formstate.types import NumberType, StringType
from formstate.validation import ErrorCode


class DomainError(Exception):
    """Raised by submit handlers in these tests."""


FIELDS = {
    "age": FieldDescriptor(NumberType().min(18)),
    "email": FieldDescriptor(StringType().email()),
}
VALID = {"age": 30, "email": "a@example.com"}


def submit_events(form: FormController) -> list[tuple[FormChangeStatus, bool, Exception | None]]:
    """Record (status, is_submitting, error) for every submit notification."""
    events: list[tuple[FormChangeStatus, bool, Exception | None]] = []

    def watcher(f: FormController, change: FormChange) -> None:
        if change.type is FormChangeType.SUBMIT:
            events.append((change.status, f.is_submitting, change.error))

    form.watch(watcher)
    return events


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


class TestSubmitOutcome:
    def test_truthy_only_when_submitted(self) -> None:
        assert SubmitOutcome(SubmitStatus.SUBMITTED)
        assert not SubmitOutcome(SubmitStatus.INVALID)
        assert not SubmitOutcome(SubmitStatus.FAILED, DomainError())
        assert not SubmitOutcome(SubmitStatus.IGNORED)


# ---------------------------------------------------------------------------
# Synchronous handlers
# ---------------------------------------------------------------------------


class TestSyncSubmit:
    def test_success(self) -> None:
        seen: list[dict[str, Any]] = []
        form = FormController(FIELDS, on_submit=lambda f: seen.append(f.data), data=VALID)
        events = submit_events(form)

        outcome = form.submit()

        assert outcome
        assert outcome.status is SubmitStatus.SUBMITTED
        assert seen == [VALID]
        assert events == [
            (FormChangeStatus.SUBMITTING, True, None),
            (FormChangeStatus.SUBMITTED, False, None),
        ]
        assert form.is_submitting is False

    def test_handler_sees_submitting_flag(self) -> None:
        flags: list[bool] = []
        form = FormController(FIELDS, on_submit=SyncSubmit(lambda f: flags.append(f.is_submitting)), data=VALID)
        form.submit()
        assert flags == [True]

    def test_invalid_form_does_not_call_handler(self) -> None:
        calls: list[FormController] = []
        form = FormController(FIELDS, on_submit=calls.append, data={"age": 15, "email": "bad"})
        events = submit_events(form)

        outcome = form.submit()

        assert outcome.status is SubmitStatus.INVALID
        assert calls == []
        assert events == []
        assert form.get_field_controller("age").error.code == ErrorCode.INVALID_MIN_NUMBER  # type: ignore[union-attr]
        assert form.get_field_controller("email").error.code == ErrorCode.INVALID_EMAIL  # type: ignore[union-attr]

    def test_failure_is_reported_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        error = DomainError("backend said no")

        def handler(form: FormController) -> None:
            raise error

        form = FormController(FIELDS, on_submit=handler, data=VALID)
        form.get_field_controller("age").value = 40
        events = submit_events(form)

        with caplog.at_level(logging.WARNING, logger="formstate.form"):
            outcome = form.submit()

        assert outcome.status is SubmitStatus.FAILED
        assert outcome.error is error
        assert events[-1] == (FormChangeStatus.SUBMITTED, False, error)
        assert "backend said no" in caplog.text
        # No rollback
        assert form.get_field_controller("age").value == 40
        assert form.is_dirty() is True

    def test_sync_submit_rejects_async_handler(self) -> None:
        async def handler(form: FormController) -> None:
            pass

        form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data=VALID)
        with pytest.raises(ConfigurationError, match="submit_async"):
            form.submit()

    def test_bare_coroutine_function_rejected(self) -> None:
        async def handler(form: FormController) -> None:
            pass

        with pytest.raises(ConfigurationError, match="AsyncSubmit"):
            FormController(FIELDS, on_submit=handler, data=VALID)

    def test_failing_submitting_watcher_resets_flag(self) -> None:
        calls: list[FormController] = []
        form = FormController(FIELDS, on_submit=calls.append, data=VALID)

        def rerender(f: FormController, change: FormChange) -> None:
            if change.status is FormChangeStatus.SUBMITTING:
                raise RuntimeError("render failed")

        unwatch = form.watch(rerender)
        with pytest.raises(RuntimeError, match="render failed"):
            form.submit()

        assert form.is_submitting is False
        assert calls == []

        unwatch()
        assert form.submit()
        assert calls == [form]

    def test_resubmit_from_handler_is_rejected(self) -> None:
        caught: list[Exception] = []

        def handler(form: FormController) -> None:
            try:
                form.submit()
            except SubmitInProgressError as exc:
                caught.append(exc)

        form = FormController(FIELDS, on_submit=handler, data=VALID)

        assert form.submit()
        assert len(caught) == 1

    def test_resubmit_from_handler_is_ignored(self) -> None:
        nested: list[SubmitOutcome] = []
        form = FormController(
            FIELDS,
            on_submit=lambda f: nested.append(f.submit()),
            data=VALID,
            config=FormConfig(resubmit="ignore"),
        )
        events = submit_events(form)

        assert form.submit()
        assert nested == [SubmitOutcome(SubmitStatus.IGNORED)]
        assert [status for status, _, _ in events] == [FormChangeStatus.SUBMITTING, FormChangeStatus.SUBMITTED]


# ---------------------------------------------------------------------------
# Asynchronous handlers
# ---------------------------------------------------------------------------


@pytest.mark.anyio
async def test_async_success() -> None:
    async def handler(form: FormController) -> None:
        await anyio.sleep(0)

    form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data=VALID)
    events = submit_events(form)

    outcome = await form.submit_async()

    assert outcome.status is SubmitStatus.SUBMITTED
    assert events == [
        (FormChangeStatus.SUBMITTING, True, None),
        (FormChangeStatus.SUBMITTED, False, None),
    ]


@pytest.mark.anyio
async def test_async_rejection_is_reported() -> None:
    error = DomainError("duplicate email")

    async def handler(form: FormController) -> None:
        await anyio.sleep(0)
        raise error

    form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data=VALID)
    events = submit_events(form)

    outcome = await form.submit_async()

    assert outcome.status is SubmitStatus.FAILED
    assert outcome.error is error
    assert events == [
        (FormChangeStatus.SUBMITTING, True, None),
        (FormChangeStatus.SUBMITTED, False, error),
    ]
    assert form.is_submitting is False


@pytest.mark.anyio
async def test_submit_async_accepts_sync_handler() -> None:
    calls: list[FormController] = []
    form = FormController(FIELDS, on_submit=calls.append, data=VALID)

    outcome = await form.submit_async()

    assert outcome
    assert calls == [form]


@pytest.mark.anyio
async def test_async_invalid() -> None:
    called = False

    async def handler(form: FormController) -> None:
        nonlocal called
        called = True

    form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data={"age": 15, "email": "bad"})
    events = submit_events(form)

    outcome = await form.submit_async()

    assert outcome.status is SubmitStatus.INVALID
    assert called is False
    assert events == []
    assert len(form.errors) == 2


@pytest.mark.anyio
async def test_submit_soon_keeps_form_interactive() -> None:
    release = anyio.Event()

    async def handler(form: FormController) -> None:
        await release.wait()

    form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data=VALID)
    changes: list[FormChange] = []
    form.watch(lambda f, change: changes.append(change))

    async with anyio.create_task_group() as tg:
        assert form.submit_soon(tg) is None
        assert form.is_submitting is True

        await anyio.sleep(0)
        form.get_field_controller("age").value = 31
        assert form.is_submitting is True

        release.set()

    assert form.is_submitting is False
    assert [(c.type, c.status) for c in changes] == [
        (FormChangeType.SUBMIT, FormChangeStatus.SUBMITTING),
        (FormChangeType.FIELD, FormChangeStatus.CHANGED),
        (FormChangeType.SUBMIT, FormChangeStatus.SUBMITTED),
    ]
    assert changes[-1].error is None


@pytest.mark.anyio
async def test_submit_soon_invalid_returns_outcome() -> None:
    async def handler(form: FormController) -> None:
        pass

    form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data={"age": 1})
    async with anyio.create_task_group() as tg:
        outcome = form.submit_soon(tg)

    assert outcome is not None
    assert outcome.status is SubmitStatus.INVALID


@pytest.mark.anyio
async def test_concurrent_submit_rejected() -> None:
    release = anyio.Event()

    async def handler(form: FormController) -> None:
        await release.wait()

    form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data=VALID)
    events = submit_events(form)

    async with anyio.create_task_group() as tg:
        form.submit_soon(tg)
        with pytest.raises(SubmitInProgressError):
            await form.submit_async()
        release.set()

    assert [status for status, _, _ in events] == [FormChangeStatus.SUBMITTING, FormChangeStatus.SUBMITTED]


@pytest.mark.anyio
async def test_concurrent_submit_ignored() -> None:
    release = anyio.Event()

    async def handler(form: FormController) -> None:
        await release.wait()

    form = FormController(
        FIELDS,
        on_submit=AsyncSubmit(handler),
        data=VALID,
        config=FormConfig(resubmit="ignore"),
    )

    async with anyio.create_task_group() as tg:
        form.submit_soon(tg)
        outcome = await form.submit_async()
        release.set()

    assert outcome.status is SubmitStatus.IGNORED


@pytest.mark.anyio
async def test_cancelled_handler_resets_flag() -> None:
    async def handler(form: FormController) -> None:
        await anyio.sleep_forever()

    form = FormController(FIELDS, on_submit=AsyncSubmit(handler), data=VALID)
    events = submit_events(form)

    async with anyio.create_task_group() as tg:
        form.submit_soon(tg)
        await anyio.sleep(0)
        tg.cancel_scope.cancel()

    assert form.is_submitting is False
    assert [status for status, _, _ in events] == [FormChangeStatus.SUBMITTING]
