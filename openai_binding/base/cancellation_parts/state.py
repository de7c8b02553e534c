"""Mutable state behind a ``CancellationToken``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Cancellation flag, reason and optional ``time.monotonic()`` deadline.

    Guarded by the owning token's lock for writes.
    """

    cancelled: bool = False
    reason: Optional[str] = None
    deadline: Optional[float] = None


__all__ = ["State"]
