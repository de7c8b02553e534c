"""Chat completion response model."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Optional

import httpx
from pydantic import Field, PrivateAttr

from ..base.cancellation import CancellationToken
from ..base.errors import InvalidStateError
from ..models.base import APIModel, Usage
from .message import ChatMessage
from .stream_chunk import ChatMessageStreamChunk, NO_CHOICES

if TYPE_CHECKING:
    from ..streaming.chat_stream import ChunkHandler
    from ..streaming.sse import StreamIterator

NO_STREAM = "no stream"


class ChatChoice(APIModel):
    message: ChatMessage
    finish_reason: Optional[str] = None
    index: int = 0


class CreateChatResponse(APIModel):
    """Result of ``POST /chat/completions``.

    For streaming requests the decoded fields stay empty and the open body is
    attached; consume it exactly once through :meth:`read_stream` or
    :meth:`iter_stream`.
    """

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    usage: Optional[Usage] = None
    choices: List[ChatChoice] = Field(default_factory=list)

    _stream: Optional[httpx.Response] = PrivateAttr(default=None)

    @classmethod
    def streaming(cls, stream: httpx.Response) -> "CreateChatResponse":
        response = cls()
        response._stream = stream
        return response

    @property
    def stream(self) -> Optional[httpx.Response]:
        return self._stream

    def _take_stream(self) -> httpx.Response:
        if self._stream is None:
            raise InvalidStateError(NO_STREAM)
        stream, self._stream = self._stream, None
        return stream

    def read_stream(self, handler: ChunkHandler, token: Optional[CancellationToken] = None) -> int:
        """Decode the attached stream, calling ``handler`` per chunk.

        Returns the number of chunks delivered. See
        :func:`openai_binding.streaming.read_chat_stream`.
        """
        # local import: the streaming package depends on chat types
        from ..streaming.chat_stream import read_chat_stream

        return read_chat_stream(self._take_stream(), handler, token)

    def iter_stream(self, token: Optional[CancellationToken] = None) -> StreamIterator[ChatMessageStreamChunk]:
        """Pull-based alternative to :meth:`read_stream`.

        The returned iterator owns the body; close it (or use it as a context
        manager) when stopping early.
        """
        from ..streaming.chat_stream import iter_chat_stream

        return iter_chat_stream(self._take_stream(), token)

    def close(self) -> None:
        """Release an unread stream."""
        if self._stream is not None:
            self._take_stream().close()

    def first_choice(self) -> ChatMessage:
        if not self.choices:
            raise InvalidStateError(NO_CHOICES)
        return self.choices[0].message

    def random_choice(self) -> ChatMessage:
        if not self.choices:
            raise InvalidStateError(NO_CHOICES)
        return random.choice(self.choices).message  # nosec B311 - not security sensitive


__all__ = ["CreateChatResponse", "ChatChoice"]
