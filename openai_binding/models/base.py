"""Shared pydantic base for request and response models.

Requests serialize with :meth:`APIModel.to_payload`, which omits unset
(``None``) fields so optional parameters never reach the wire as ``null``.
Responses ignore unknown fields so new server attributes do not break
decoding.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class APIModel(BaseModel):
    """Base model for all wire types."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", protected_namespaces=())

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready request body (aliases applied, ``None`` dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ListParams(APIModel):
    """Cursor pagination parameters shared by the assistants-style list endpoints."""

    limit: Optional[int] = None
    order: Optional[str] = None
    after: Optional[str] = None
    before: Optional[str] = None

    def to_query(self) -> Dict[str, Any]:
        return self.to_payload()


class Usage(APIModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class DeletedObject(APIModel):
    """Acknowledgement returned by DELETE endpoints."""

    id: str = ""
    object: str = ""
    deleted: bool = False


class ListObject(APIModel):
    object: str = "list"
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


__all__ = ["APIModel", "ListParams", "Usage", "DeletedObject", "ListObject"]
