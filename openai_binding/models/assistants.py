"""Assistants and the files attached to them."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import APIModel, ListObject

Tool = Dict[str, Any]


class Assistant(APIModel):
    id: str = ""
    object: str = ""
    created_at: int = 0
    name: Optional[str] = None
    description: Optional[str] = None
    model: str = ""
    instructions: Optional[str] = None
    tools: List[Tool] = Field(default_factory=list)
    file_ids: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class CreateAssistantRequest(APIModel):
    model: str
    instructions: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    tools: Optional[List[Tool]] = None
    file_ids: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateAssistantRequest(APIModel):
    model: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    file_ids: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class ListAssistantsResponse(ListObject):
    data: List[Assistant] = Field(default_factory=list)


class AssistantFile(APIModel):
    id: str = ""
    object: str = ""
    created_at: int = 0
    assistant_id: str = ""


class ListAssistantFilesResponse(ListObject):
    data: List[AssistantFile] = Field(default_factory=list)


__all__ = [
    "Assistant",
    "CreateAssistantRequest",
    "UpdateAssistantRequest",
    "ListAssistantsResponse",
    "AssistantFile",
    "ListAssistantFilesResponse",
    "Tool",
]
