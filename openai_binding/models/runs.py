"""Assistant runs and run steps."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import APIModel, ListObject
from .threads import InitialThreadMessage

RUN_STATUS_QUEUED = "queued"
RUN_STATUS_IN_PROGRESS = "in_progress"
RUN_STATUS_REQUIRES_ACTION = "requires_action"
RUN_STATUS_CANCELLING = "cancelling"
RUN_STATUS_CANCELLED = "cancelled"
RUN_STATUS_FAILED = "failed"
RUN_STATUS_COMPLETED = "completed"
RUN_STATUS_EXPIRED = "expired"

TERMINAL_RUN_STATUSES = frozenset(
    (RUN_STATUS_COMPLETED, RUN_STATUS_FAILED, RUN_STATUS_CANCELLED, RUN_STATUS_EXPIRED)
)


class Run(APIModel):
    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    assistant_id: str = ""
    status: str = ""
    required_action: Optional[Dict[str, Any]] = None
    last_error: Optional[Dict[str, Any]] = None
    expires_at: Optional[int] = None
    started_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    model: str = ""
    instructions: Optional[str] = None
    tools: List[Dict[str, Any]] = Field(default_factory=list)
    file_ids: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_RUN_STATUSES


class CreateRunRequest(APIModel):
    assistant_id: str
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateRunRequest(APIModel):
    metadata: Optional[Dict[str, Any]] = None


class ListRunsResponse(ListObject):
    data: List[Run] = Field(default_factory=list)


class ToolOutput(APIModel):
    tool_call_id: Optional[str] = None
    output: Optional[str] = None


class SubmitToolOutputsRequest(APIModel):
    tool_outputs: List[ToolOutput]


class InitialThread(APIModel):
    messages: Optional[List[InitialThreadMessage]] = None
    metadata: Optional[Dict[str, Any]] = None


class CreateThreadAndRunRequest(APIModel):
    assistant_id: str
    thread: Optional[InitialThread] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None


class RunStep(APIModel):
    id: str = ""
    object: str = ""
    created_at: int = 0
    assistant_id: str = ""
    thread_id: str = ""
    run_id: str = ""
    type: str = ""
    status: str = ""
    step_details: Dict[str, Any] = Field(default_factory=dict)
    last_error: Optional[Dict[str, Any]] = None
    expired_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None


class ListRunStepsResponse(ListObject):
    data: List[RunStep] = Field(default_factory=list)


__all__ = [
    "Run",
    "RunStep",
    "CreateRunRequest",
    "UpdateRunRequest",
    "ListRunsResponse",
    "ToolOutput",
    "SubmitToolOutputsRequest",
    "InitialThread",
    "CreateThreadAndRunRequest",
    "ListRunStepsResponse",
    "TERMINAL_RUN_STATUSES",
    "RUN_STATUS_QUEUED",
    "RUN_STATUS_IN_PROGRESS",
    "RUN_STATUS_REQUIRES_ACTION",
    "RUN_STATUS_CANCELLING",
    "RUN_STATUS_CANCELLED",
    "RUN_STATUS_FAILED",
    "RUN_STATUS_COMPLETED",
    "RUN_STATUS_EXPIRED",
]
