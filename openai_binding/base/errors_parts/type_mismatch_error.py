"""Typed-accessor failure for function-call arguments."""
from __future__ import annotations

from .api_error import APIError
from .error_code import ErrorCode


class TypeMismatchError(APIError):
    """Raised when a stored argument value does not have the requested type.

    Attributes:
        name: Argument name that was looked up.
        actual: Type name of the stored value (``"missing"`` when absent).
        expected: Type name the caller asked for.
    """

    def __init__(self, name: str, actual: str, expected: str) -> None:
        super().__init__(
            code=ErrorCode.TYPE_MISMATCH,
            message=f"argument {name!r} is {actual}, expected {expected}",
        )
        self.name = name
        self.actual = actual
        self.expected = expected


__all__ = ["TypeMismatchError"]
