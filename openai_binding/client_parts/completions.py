"""Legacy completions, edits and model listing."""

from __future__ import annotations

from ..models.completions import (
    CreateCompletionRequest,
    CreateCompletionResponse,
    CreateEditRequest,
    CreateEditResponse,
    Models,
)
from .transport import TransportMixin


class CompletionsMixin(TransportMixin):
    def create_completion(self, request: CreateCompletionRequest) -> CreateCompletionResponse:
        return self._request(
            "POST",
            "/completions",
            CreateCompletionResponse,
            json=request.to_payload(),
            model=request.model,
        )

    def create_edit(self, request: CreateEditRequest) -> CreateEditResponse:
        return self._request(
            "POST",
            "/edits",
            CreateEditResponse,
            json=request.to_payload(),
            model=request.model,
        )

    def list_models(self) -> Models:
        """List the models available to the API key (``GET /models``)."""
        return self._request("GET", "/models", Models)


__all__ = ["CompletionsMixin"]
