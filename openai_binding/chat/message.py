"""Chat message model and role constants."""

from __future__ import annotations

from typing import Optional

from ..models.base import APIModel
from .function_call import FunctionCall

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"
ROLE_FUNCTION = "function"


class ChatMessage(APIModel):
    """One message of a chat conversation.

    ``name`` identifies the author (required by the API for ``function``
    messages). ``function_call`` is set on assistant messages that request a
    function invocation; its arguments are already decoded.
    """

    role: str
    content: Optional[str] = None
    name: Optional[str] = None
    function_call: Optional[FunctionCall] = None


__all__ = [
    "ChatMessage",
    "ROLE_SYSTEM",
    "ROLE_USER",
    "ROLE_ASSISTANT",
    "ROLE_FUNCTION",
]
