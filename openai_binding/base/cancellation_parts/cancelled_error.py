"""Error raised when a cancellation token stops an operation."""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised by the stream decoder and ``wait_for_run`` on cancellation.

    The message is the token's reason (``"deadline exceeded"`` for expired
    deadlines, ``"operation cancelled"`` when none was given). It is not an
    ``APIError``: a caller-initiated stop is not a failure of the API.
    """


__all__ = ["CancelledError"]
