"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `openai_binding.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .api_error import APIError
from .decode_error import DecodeError
from .type_mismatch_error import TypeMismatchError
from .invalid_argument_error import InvalidArgumentError
from .invalid_state_error import InvalidStateError
from .stream_read_error import StreamReadError
from .run_terminal_error import RunTerminalError
from .classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "APIError",
    "DecodeError",
    "TypeMismatchError",
    "InvalidArgumentError",
    "InvalidStateError",
    "StreamReadError",
    "RunTerminalError",
    "classify_exception",
    "classify_status",
]
