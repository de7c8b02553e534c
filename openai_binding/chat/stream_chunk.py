"""Streamed chat delta (one decoded server-sent event)."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..base.errors import InvalidStateError
from ..models.base import APIModel

NO_CHOICES = "no choices returned"
ROLE_DELTA = "delta is for role, not content"
EMPTY_DELTA = "delta carries no content"


class FunctionCallDelta(APIModel):
    """Raw fragments of a function call being streamed.

    ``arguments`` arrives in pieces; concatenate them and decode with
    ``FunctionCall.from_wire`` once the stream finishes.
    """

    name: Optional[str] = None
    arguments: Optional[str] = None


class ChatDelta(APIModel):
    role: Optional[str] = None
    content: Optional[str] = None
    function_call: Optional[FunctionCallDelta] = None


class StreamChoice(APIModel):
    delta: ChatDelta = Field(default_factory=ChatDelta)
    index: int = 0
    finish_reason: Optional[str] = None


class ChatMessageStreamChunk(APIModel):
    """Incremental update of a streaming chat completion."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[StreamChoice] = Field(default_factory=list)

    def content_delta(self) -> bool:
        """Whether the first choice carries a (possibly empty) text fragment."""
        return bool(self.choices) and self.choices[0].delta.content is not None

    def first_choice(self) -> str:
        """Return the text fragment of the first choice.

        Raises:
            InvalidStateError: ``"no choices returned"`` when there are no
                choices, ``"delta is for role, not content"`` when the delta
                carries a role marker (even alongside content),
                ``"delta carries no content"`` otherwise.
        """
        if not self.choices:
            raise InvalidStateError(NO_CHOICES)
        delta = self.choices[0].delta
        if delta.role is not None:
            raise InvalidStateError(ROLE_DELTA)
        if delta.content is not None:
            return delta.content
        raise InvalidStateError(EMPTY_DELTA)


__all__ = [
    "ChatMessageStreamChunk",
    "StreamChoice",
    "ChatDelta",
    "FunctionCallDelta",
    "NO_CHOICES",
    "ROLE_DELTA",
    "EMPTY_DELTA",
]
