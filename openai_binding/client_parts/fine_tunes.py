"""Fine-tune jobs."""

from __future__ import annotations

from ..models.base import DeletedObject
from ..models.fine_tunes import (
    CreateFineTuneRequest,
    FineTune,
    ListFineTuneEventsResponse,
    ListFineTunesResponse,
)
from .transport import TransportMixin


class FineTunesMixin(TransportMixin):
    def create_fine_tune(self, request: CreateFineTuneRequest) -> FineTune:
        return self._request(
            "POST",
            "/fine-tunes",
            FineTune,
            json=request.to_payload(),
            model=request.model,
        )

    def list_fine_tunes(self) -> ListFineTunesResponse:
        return self._request("GET", "/fine-tunes", ListFineTunesResponse)

    def get_fine_tune(self, fine_tune_id: str) -> FineTune:
        return self._request("GET", f"/fine-tunes/{fine_tune_id}", FineTune)

    def cancel_fine_tune(self, fine_tune_id: str) -> FineTune:
        return self._request("POST", f"/fine-tunes/{fine_tune_id}/cancel", FineTune)

    def list_fine_tune_events(self, fine_tune_id: str, *, stream: bool = False) -> ListFineTuneEventsResponse:
        """List the events of a job.

        With ``stream=True`` the server keeps the connection open and pushes
        events as server-sent events; read them with
        ``ListFineTuneEventsResponse.iter_events``.
        """
        path = f"/fine-tunes/{fine_tune_id}/events"
        if not stream:
            return self._request("GET", path, ListFineTuneEventsResponse)
        response = self._send("GET", path, params={"stream": "true"}, stream=True)
        return ListFineTuneEventsResponse.streaming(response)

    def delete_fine_tune_model(self, model: str) -> DeletedObject:
        return self._request("DELETE", f"/models/{model}", DeletedObject, model=model)


__all__ = ["FineTunesMixin"]
