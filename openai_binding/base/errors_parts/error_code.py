"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration carried by every :class:`APIError`. Values
are lowercase snake_case and are considered a stable public contract for
logging and for callers branching on failure categories.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    TRANSPORT = "transport"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    DECODE = "decode"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_STATE = "invalid_state"
    RUN_TERMINAL = "run_terminal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
