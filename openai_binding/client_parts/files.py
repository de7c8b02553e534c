"""File upload, listing, metadata, content download and deletion."""

from __future__ import annotations

from typing import Optional

import httpx

from ..models.base import DeletedObject
from ..models.files import FileObject, ListFilesRequest, ListFilesResponse, UploadFileRequest
from .transport import TransportMixin


class FilesMixin(TransportMixin):
    def list_files(self, request: Optional[ListFilesRequest] = None) -> ListFilesResponse:
        params = request.to_payload() if request is not None else None
        return self._request("GET", "/files", ListFilesResponse, params=params or None)

    def upload_file(self, request: UploadFileRequest) -> FileObject:
        """Upload ``request.body`` as multipart form data (``POST /files``)."""
        return self._request(
            "POST",
            "/files",
            FileObject,
            files={"file": (request.name, request.body)},
            data={"purpose": request.purpose},
        )

    def delete_file(self, file_id: str) -> DeletedObject:
        return self._request("DELETE", f"/files/{file_id}", DeletedObject)

    def get_file_info(self, file_id: str) -> FileObject:
        return self._request("GET", f"/files/{file_id}", FileObject)

    def get_file_content(self, file_id: str) -> httpx.Response:
        """Return the open response streaming the file content.

        The caller must close it once the body has been read.
        """
        return self._send("GET", f"/files/{file_id}/content", stream=True)


__all__ = ["FilesMixin"]
