"""Failure of the underlying byte stream while decoding events."""
from __future__ import annotations

from typing import Optional

from .api_error import APIError
from .error_code import ErrorCode


class StreamReadError(APIError):
    """Raised when reading the next line of an event stream fails."""

    def __init__(self, message: str, raw: Optional[BaseException] = None) -> None:
        super().__init__(code=ErrorCode.TRANSPORT, message=message, raw=raw)


__all__ = ["StreamReadError"]
