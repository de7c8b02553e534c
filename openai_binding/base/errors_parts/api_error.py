"""
Structured API error exception type.

Every failure raised by the binding (HTTP status errors, transport failures,
decode problems, helper-state violations) is an :class:`APIError` carrying a
normalized :class:`ErrorCode`, so callers can branch on ``exc.code`` without
string matching.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class APIError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        status_code: HTTP status of the failed response, when one exists.
        body: Raw response body text of the failed response, when one exists.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["APIError"]
