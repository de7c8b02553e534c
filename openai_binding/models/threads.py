"""Threads, thread messages and message files."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import APIModel, ListObject


class ThreadMessageContent(APIModel):
    """One content part of a thread message (``text`` or ``image_file``)."""

    model_config = {"extra": "allow"}

    type: str = ""
    text: Optional[Dict[str, Any]] = None
    image_file: Optional[Dict[str, Any]] = None

    def text_value(self) -> str:
        """Return ``text.value`` or ``""`` for non-text parts."""
        if not isinstance(self.text, dict):
            return ""
        value = self.text.get("value")
        return "" if value is None else str(value)


class ThreadMessage(APIModel):
    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    role: str = ""
    content: List[ThreadMessageContent] = Field(default_factory=list)
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    file_ids: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def text(self) -> str:
        """Concatenated text of all text parts."""
        return "".join(part.text_value() for part in self.content)


class InitialThreadMessage(APIModel):
    """Message used to seed a new thread."""

    role: str
    content: str
    file_ids: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class Thread(APIModel):
    id: str = ""
    object: str = ""
    created_at: int = 0
    metadata: Dict[str, Any] = Field(default_factory=dict)


class CreateThreadRequest(APIModel):
    messages: Optional[List[InitialThreadMessage]] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateThreadRequest(APIModel):
    metadata: Optional[Dict[str, Any]] = None


class CreateMessageRequest(APIModel):
    role: str
    content: str
    file_ids: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateMessageRequest(APIModel):
    metadata: Optional[Dict[str, Any]] = None


class ListMessagesResponse(ListObject):
    data: List[ThreadMessage] = Field(default_factory=list)


class MessageFile(APIModel):
    id: str = ""
    object: str = ""
    created_at: int = 0
    message_id: str = ""


class ListMessageFilesResponse(ListObject):
    data: List[MessageFile] = Field(default_factory=list)


__all__ = [
    "Thread",
    "ThreadMessage",
    "ThreadMessageContent",
    "InitialThreadMessage",
    "CreateThreadRequest",
    "UpdateThreadRequest",
    "CreateMessageRequest",
    "UpdateMessageRequest",
    "ListMessagesResponse",
    "MessageFile",
    "ListMessageFilesResponse",
]
