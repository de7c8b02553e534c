"""Helper predicate called on a value that cannot answer it."""
from __future__ import annotations

from .api_error import APIError
from .error_code import ErrorCode


class InvalidStateError(APIError):
    """Raised by response helpers such as ``first_choice`` on unusable state.

    The message is part of the contract: callers distinguish
    ``"no choices returned"`` from ``"delta is for role, not content"``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_STATE, message=message)


__all__ = ["InvalidStateError"]
