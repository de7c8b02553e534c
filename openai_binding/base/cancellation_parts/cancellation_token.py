"""Cancellation token shared between a caller and a blocking operation.

The event-stream decoder checks the token before reading each line and
``wait_for_run`` sleeps on it between polls, so ``cancel()`` from any thread
stops either at its next boundary.
"""

from __future__ import annotations

import time
from threading import Event, Lock
from typing import List, Optional

from .cancelled_error import CancelledError
from .state import State

DEADLINE_REASON = "deadline exceeded"
DEFAULT_REASON = "operation cancelled"


class CancellationToken:
    """Thread-safe, one-way cancellation flag.

    Parameters:
        parent: Token whose cancellation also cancels this one.
        timeout: Seconds until the token counts as cancelled with reason
            ``"deadline exceeded"``. Checked whenever the token is queried;
            there is no timer thread.

    Once cancelled a token stays cancelled and keeps its first reason.
    """

    def __init__(
        self,
        *,
        parent: Optional["CancellationToken"] = None,
        timeout: Optional[float] = None,
    ) -> None:
        deadline = None if timeout is None else time.monotonic() + max(0.0, timeout)
        self._state = State(deadline=deadline)
        self._lock = Lock()
        self._fired = Event()
        self._children: List["CancellationToken"] = []
        if parent is not None:
            parent.link_child(self)

    def _remaining(self) -> Optional[float]:
        if self._state.deadline is None:
            return None
        return max(0.0, self._state.deadline - time.monotonic())

    @property
    def cancelled(self) -> bool:
        if not self._fired.is_set() and self._remaining() == 0.0:
            self.cancel(DEADLINE_REASON)
        return self._fired.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._state.reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Cancel this token and every linked child. Later calls are no-ops."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = tuple(self._children)
        self._fired.set()
        for token in children:
            token.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Cascade this token's cancellation to ``token`` and return it.

        A child linked to an already cancelled parent is cancelled at once.
        """
        with self._lock:
            self._children.append(token)
            fired, reason = self._state.cancelled, self._state.reason
        if fired:
            token.cancel(reason)
        return token

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise :class:`CancelledError` carrying the reason when cancelled."""
        if self.cancelled:
            raise CancelledError(self._state.reason or DEFAULT_REASON)

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; wake early on cancel or deadline.

        Returns whether the token is cancelled on return.
        """
        timeout = max(0.0, seconds)
        remaining = self._remaining()
        if remaining is not None:
            timeout = min(timeout, remaining)
        self._fired.wait(timeout)
        return self.cancelled

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


__all__ = ["CancellationToken"]
