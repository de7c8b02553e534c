"""Blocking wait for an assistant run to reach a terminal status.

:func:`wait_for_run` sleeps ``interval`` seconds, checks the run once, and
repeats. The sleep goes through :meth:`CancellationToken.wait`, so a cancel
from another thread (or the token's deadline) wakes the loop immediately.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import InvalidArgumentError, RunTerminalError
from .base.logging import LogContext, get_logger, log_event
from .config.defaults import DEFAULT_RUN_POLL_INTERVAL_SECONDS
from .models.runs import (
    RUN_STATUS_CANCELLED,
    RUN_STATUS_COMPLETED,
    RUN_STATUS_EXPIRED,
    RUN_STATUS_FAILED,
    Run,
)

_logger = get_logger("openai_binding.polling")


class RunGetter(Protocol):
    """Anything with ``get_run`` (``Client`` or a test double)."""

    def get_run(self, thread_id: str, run_id: str) -> Run: ...


def wait_for_run(
    client: RunGetter,
    thread_id: str,
    run_id: str,
    interval: float = DEFAULT_RUN_POLL_INTERVAL_SECONDS,
    *,
    token: Optional[CancellationToken] = None,
) -> Run:
    """Poll ``run_id`` every ``interval`` seconds until it ends.

    The first check happens after one interval. Exactly one ``get_run``
    call is issued per tick.

    Returns:
        The ``completed`` run.

    Raises:
        RunTerminalError: when the run is ``failed`` (message embeds
            ``last_error``), ``cancelled`` or ``expired``.
        CancelledError: when ``token`` is cancelled or its deadline passes.
        InvalidArgumentError: for a negative ``interval``.
        APIError: any error raised by ``get_run``, unchanged.
    """
    if interval < 0:
        raise InvalidArgumentError("interval must be >= 0")
    token = token or CancellationToken()
    ctx = LogContext(endpoint=f"/threads/{thread_id}/runs/{run_id}")
    polls = 0
    while True:
        if token.wait(interval):
            log_event(_logger, "run.cancelled", ctx, polls=polls, reason=token.reason)
            raise CancelledError(token.reason or "operation cancelled")
        run = client.get_run(thread_id, run_id)
        polls += 1
        log_event(_logger, "run.poll", ctx, level=logging.DEBUG, status=run.status, polls=polls)
        if run.status == RUN_STATUS_COMPLETED:
            return run
        if run.status in (RUN_STATUS_FAILED, RUN_STATUS_CANCELLED, RUN_STATUS_EXPIRED):
            log_event(_logger, "run.terminal", ctx, status=run.status, polls=polls)
            raise RunTerminalError(run_id, run.status, run.last_error)


__all__ = ["wait_for_run", "RunGetter"]
