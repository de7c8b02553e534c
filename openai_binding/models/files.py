"""Uploaded files."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field

from .base import APIModel


class FileObject(APIModel):
    id: str = ""
    object: str = ""
    bytes: int = 0
    created_at: int = 0
    filename: str = ""
    purpose: str = ""


class ListFilesRequest(APIModel):
    purpose: Optional[str] = None


class ListFilesResponse(APIModel):
    object: str = "list"
    data: List[FileObject] = Field(default_factory=list)


class UploadFileRequest(APIModel):
    """Multipart upload for ``POST /files``.

    ``body`` is raw content or a readable binary file object; ``name`` is the
    filename reported to the server.
    """

    name: str
    purpose: str
    body: Any = Field(exclude=True)


__all__ = ["FileObject", "ListFilesRequest", "ListFilesResponse", "UploadFileRequest"]
