"""Caller-supplied argument rejected before any I/O happens."""
from __future__ import annotations

from .api_error import APIError
from .error_code import ErrorCode


class InvalidArgumentError(APIError):
    """Raised when a value is invalid at construction or call time."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message=message)


__all__ = ["InvalidArgumentError"]
