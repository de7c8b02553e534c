"""Images, embeddings and moderation."""

from __future__ import annotations

from ..models.embeddings import (
    CreateEmbeddingRequest,
    CreateEmbeddingResponse,
    CreateModerationRequest,
    CreateModerationResponse,
)
from ..models.images import CreateImageRequest, CreateImageResponse
from .transport import TransportMixin


class MediaMixin(TransportMixin):
    def create_image(self, request: CreateImageRequest) -> CreateImageResponse:
        return self._request(
            "POST",
            "/images/generations",
            CreateImageResponse,
            json=request.to_payload(),
            model=request.model,
        )

    def create_embedding(self, request: CreateEmbeddingRequest) -> CreateEmbeddingResponse:
        return self._request(
            "POST",
            "/embeddings",
            CreateEmbeddingResponse,
            json=request.to_payload(),
            model=request.model,
        )

    def create_moderation(self, request: CreateModerationRequest) -> CreateModerationResponse:
        return self._request(
            "POST",
            "/moderations",
            CreateModerationResponse,
            json=request.to_payload(),
            model=request.model,
        )


__all__ = ["MediaMixin"]
