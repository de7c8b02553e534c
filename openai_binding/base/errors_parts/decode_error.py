"""Decode failure raised when wire JSON cannot be turned into typed values."""
from __future__ import annotations

from typing import Optional

from .api_error import APIError
from .error_code import ErrorCode


class DecodeError(APIError):
    """Raised when a payload (or a JSON-in-a-string field) fails to parse."""

    def __init__(self, message: str, raw: Optional[BaseException] = None) -> None:
        super().__init__(code=ErrorCode.DECODE, message=message, raw=raw)


__all__ = ["DecodeError"]
