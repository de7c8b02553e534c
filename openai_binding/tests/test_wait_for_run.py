"""Run polling helper."""

from __future__ import annotations

import threading

import pytest

from openai_binding import (
    APIError,
    CancellationToken,
    CancelledError,
    ErrorCode,
    InvalidArgumentError,
    RunTerminalError,
    wait_for_run,
)
from openai_binding.models.runs import Run


class FakeRuns:
    """Returns the scripted statuses on successive ``get_run`` calls."""

    def __init__(self, statuses, last_error=None):
        self._statuses = list(statuses)
        self._last_error = last_error
        self.calls = []

    def get_run(self, thread_id, run_id):
        self.calls.append((thread_id, run_id))
        status = self._statuses[min(len(self.calls), len(self._statuses)) - 1]
        last_error = self._last_error if status == "failed" else None
        return Run(id=run_id, thread_id=thread_id, status=status, last_error=last_error)


def test_returns_completed_run_after_three_checks():
    runs = FakeRuns(["queued", "in_progress", "completed"])
    run = wait_for_run(runs, "thread_1", "run_1", interval=0)
    assert run.status == "completed"  # nosec B101
    assert runs.calls == [("thread_1", "run_1")] * 3  # nosec B101


def test_failed_run_embeds_last_error():
    detail = {"code": "server_error", "message": "model overloaded"}
    runs = FakeRuns(["in_progress", "failed"], last_error=detail)
    with pytest.raises(RunTerminalError) as info:
        wait_for_run(runs, "t", "run_9", interval=0)
    err = info.value
    assert err.status == "failed"  # nosec B101
    assert err.last_error == detail  # nosec B101
    assert err.code is ErrorCode.RUN_TERMINAL  # nosec B101
    assert "model overloaded" in str(err)  # nosec B101
    assert len(runs.calls) == 2  # nosec B101


@pytest.mark.parametrize("status", ["cancelled", "expired"])
def test_other_terminal_statuses_raise(status):
    runs = FakeRuns([status])
    with pytest.raises(RunTerminalError, match=status):
        wait_for_run(runs, "t", "r", interval=0)
    assert len(runs.calls) == 1  # nosec B101


def test_non_terminal_statuses_keep_polling():
    runs = FakeRuns(["queued", "requires_action", "cancelling", "in_progress", "completed"])
    wait_for_run(runs, "t", "r", interval=0)
    assert len(runs.calls) == 5  # nosec B101


def test_cancelled_token_stops_before_first_check():
    token = CancellationToken()
    token.cancel("shutdown")
    runs = FakeRuns(["completed"])
    with pytest.raises(CancelledError, match="shutdown"):
        wait_for_run(runs, "t", "r", interval=0, token=token)
    assert runs.calls == []  # nosec B101


def test_cancel_from_another_thread_interrupts_wait():
    token = CancellationToken()
    runs = FakeRuns(["in_progress"])
    timer = threading.Timer(0.05, token.cancel)
    timer.start()
    try:
        with pytest.raises(CancelledError):
            wait_for_run(runs, "t", "r", interval=30, token=token)
    finally:
        timer.cancel()
    assert runs.calls == []  # nosec B101


def test_token_deadline_bounds_the_wait():
    runs = FakeRuns(["in_progress"])
    with pytest.raises(CancelledError, match="deadline exceeded"):
        wait_for_run(runs, "t", "r", interval=0, token=CancellationToken(timeout=0.05))


def test_get_run_errors_propagate():
    class Failing:
        def get_run(self, thread_id, run_id):
            raise APIError(code=ErrorCode.NOT_FOUND, message="unexpected status code: 404")

    with pytest.raises(APIError) as info:
        wait_for_run(Failing(), "t", "r", interval=0)
    assert info.value.code is ErrorCode.NOT_FOUND  # nosec B101


def test_negative_interval_rejected():
    with pytest.raises(InvalidArgumentError):
        wait_for_run(FakeRuns(["completed"]), "t", "r", interval=-1)
