"""Threads, thread messages and message files (beta endpoints)."""

from __future__ import annotations

from typing import Optional

from ..models.base import DeletedObject, ListParams
from ..models.threads import (
    CreateMessageRequest,
    CreateThreadRequest,
    ListMessageFilesResponse,
    ListMessagesResponse,
    MessageFile,
    Thread,
    ThreadMessage,
    UpdateMessageRequest,
    UpdateThreadRequest,
)
from .transport import TransportMixin


class ThreadsMixin(TransportMixin):
    def create_thread(self, request: Optional[CreateThreadRequest] = None) -> Thread:
        payload = request.to_payload() if request is not None else {}
        return self._request("POST", "/threads", Thread, json=payload, beta=True)

    def get_thread(self, thread_id: str) -> Thread:
        return self._request("GET", f"/threads/{thread_id}", Thread, beta=True)

    def update_thread(self, thread_id: str, request: UpdateThreadRequest) -> Thread:
        return self._request(
            "POST",
            f"/threads/{thread_id}",
            Thread,
            json=request.to_payload(),
            beta=True,
        )

    def delete_thread(self, thread_id: str) -> DeletedObject:
        return self._request("DELETE", f"/threads/{thread_id}", DeletedObject, beta=True)

    def create_message(self, thread_id: str, request: CreateMessageRequest) -> ThreadMessage:
        return self._request(
            "POST",
            f"/threads/{thread_id}/messages",
            ThreadMessage,
            json=request.to_payload(),
            beta=True,
        )

    def get_message(self, thread_id: str, message_id: str) -> ThreadMessage:
        return self._request("GET", f"/threads/{thread_id}/messages/{message_id}", ThreadMessage, beta=True)

    def update_message(self, thread_id: str, message_id: str, request: UpdateMessageRequest) -> ThreadMessage:
        return self._request(
            "POST",
            f"/threads/{thread_id}/messages/{message_id}",
            ThreadMessage,
            json=request.to_payload(),
            beta=True,
        )

    def list_messages(self, thread_id: str, params: Optional[ListParams] = None) -> ListMessagesResponse:
        return self._request(
            "GET",
            f"/threads/{thread_id}/messages",
            ListMessagesResponse,
            params=self._list_query(params),
            beta=True,
        )

    def get_message_file(self, thread_id: str, message_id: str, file_id: str) -> MessageFile:
        return self._request(
            "GET",
            f"/threads/{thread_id}/messages/{message_id}/files/{file_id}",
            MessageFile,
            beta=True,
        )

    def list_message_files(
        self, thread_id: str, message_id: str, params: Optional[ListParams] = None
    ) -> ListMessageFilesResponse:
        return self._request(
            "GET",
            f"/threads/{thread_id}/messages/{message_id}/files",
            ListMessageFilesResponse,
            params=self._list_query(params),
            beta=True,
        )


__all__ = ["ThreadsMixin"]
