"""Chat completions (plain and streaming)."""

from __future__ import annotations

from ..chat.request import CreateChatRequest
from ..chat.response import CreateChatResponse
from .transport import TransportMixin


class ChatMixin(TransportMixin):
    def create_chat(self, request: CreateChatRequest) -> CreateChatResponse:
        """Create a chat completion (``POST /chat/completions``).

        When ``request.stream`` is set the body is not read: the returned
        response carries the open stream and must be consumed with
        ``read_stream``/``iter_stream`` (or released with ``close``).
        """
        payload = request.to_payload()
        if request.stream:
            response = self._send(
                "POST",
                "/chat/completions",
                json=payload,
                stream=True,
                model=request.model,
            )
            return CreateChatResponse.streaming(response)
        return self._request(
            "POST",
            "/chat/completions",
            CreateChatResponse,
            json=payload,
            model=request.model,
        )


__all__ = ["ChatMixin"]
