"""Assistants and assistant files (beta endpoints)."""

from __future__ import annotations

from typing import Optional

from ..models.assistants import (
    Assistant,
    AssistantFile,
    CreateAssistantRequest,
    ListAssistantFilesResponse,
    ListAssistantsResponse,
    UpdateAssistantRequest,
)
from ..models.base import DeletedObject, ListParams
from .transport import TransportMixin


class AssistantsMixin(TransportMixin):
    def create_assistant(self, request: CreateAssistantRequest) -> Assistant:
        return self._request(
            "POST",
            "/assistants",
            Assistant,
            json=request.to_payload(),
            beta=True,
            model=request.model,
        )

    def get_assistant(self, assistant_id: str) -> Assistant:
        return self._request("GET", f"/assistants/{assistant_id}", Assistant, beta=True)

    def update_assistant(self, assistant_id: str, request: UpdateAssistantRequest) -> Assistant:
        return self._request(
            "POST",
            f"/assistants/{assistant_id}",
            Assistant,
            json=request.to_payload(),
            beta=True,
        )

    def delete_assistant(self, assistant_id: str) -> DeletedObject:
        return self._request("DELETE", f"/assistants/{assistant_id}", DeletedObject, beta=True)

    def list_assistants(self, params: Optional[ListParams] = None) -> ListAssistantsResponse:
        return self._request("GET", "/assistants", ListAssistantsResponse, params=self._list_query(params), beta=True)

    def create_assistant_file(self, assistant_id: str, file_id: str) -> AssistantFile:
        return self._request(
            "POST",
            f"/assistants/{assistant_id}/files",
            AssistantFile,
            json={"file_id": file_id},
            beta=True,
        )

    def get_assistant_file(self, assistant_id: str, file_id: str) -> AssistantFile:
        return self._request("GET", f"/assistants/{assistant_id}/files/{file_id}", AssistantFile, beta=True)

    def delete_assistant_file(self, assistant_id: str, file_id: str) -> DeletedObject:
        return self._request("DELETE", f"/assistants/{assistant_id}/files/{file_id}", DeletedObject, beta=True)

    def list_assistant_files(
        self, assistant_id: str, params: Optional[ListParams] = None
    ) -> ListAssistantFilesResponse:
        return self._request(
            "GET",
            f"/assistants/{assistant_id}/files",
            ListAssistantFilesResponse,
            params=self._list_query(params),
            beta=True,
        )


__all__ = ["AssistantsMixin"]
