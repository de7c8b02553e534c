"""Assistant run that reached a terminal status other than ``completed``."""
from __future__ import annotations

from typing import Any, Dict, Optional

from .api_error import APIError
from .error_code import ErrorCode


class RunTerminalError(APIError):
    """Raised by ``wait_for_run`` when a run fails, is cancelled or expires.

    Attributes:
        run_id: Identifier of the run that ended.
        status: Terminal status observed (``failed``, ``cancelled``, ``expired``).
        last_error: Failure detail reported by the server, if any.
    """

    def __init__(
        self,
        run_id: str,
        status: str,
        last_error: Optional[Dict[str, Any]] = None,
    ) -> None:
        if status == "failed":
            message = f"run {run_id!r} failed: {last_error}"
        else:
            message = f"run {run_id!r} {status}"
        super().__init__(code=ErrorCode.RUN_TERMINAL, message=message)
        self.run_id = run_id
        self.status = status
        self.last_error = last_error


__all__ = ["RunTerminalError"]
