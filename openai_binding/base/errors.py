"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``openai_binding.base.errors_parts`` to keep a single stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.api_error import APIError
from .errors_parts.decode_error import DecodeError
from .errors_parts.type_mismatch_error import TypeMismatchError
from .errors_parts.invalid_argument_error import InvalidArgumentError
from .errors_parts.invalid_state_error import InvalidStateError
from .errors_parts.stream_read_error import StreamReadError
from .errors_parts.run_terminal_error import RunTerminalError
from .errors_parts.classification import classify_exception, classify_status

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
