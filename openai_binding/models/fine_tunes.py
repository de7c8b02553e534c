"""Fine-tune jobs and their event log."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional

import httpx
from pydantic import Field, PrivateAttr, ValidationError

from ..base.cancellation import CancellationToken
from ..base.errors import InvalidStateError
from ..streaming.sse import StreamIterator, iter_sse_data
from .base import APIModel, DeletedObject
from .files import FileObject


class CreateFineTuneRequest(APIModel):
    training_file: str
    validation_file: Optional[str] = None
    model: Optional[str] = None
    n_epochs: Optional[int] = None
    batch_size: Optional[int] = None
    learning_rate_multiplier: Optional[float] = None
    prompt_loss_weight: Optional[float] = None
    compute_classification_metrics: Optional[bool] = None
    classification_n_classes: Optional[int] = None
    classification_positive_class: Optional[str] = None
    classification_betas: Optional[List[float]] = None
    suffix: Optional[str] = None


class FineTuneEvent(APIModel):
    object: str = ""
    created_at: int = 0
    level: str = ""
    message: str = ""


class FineTune(APIModel):
    id: str = ""
    object: str = ""
    model: str = ""
    created_at: int = 0
    events: List[FineTuneEvent] = Field(default_factory=list)
    fine_tuned_model: Optional[str] = None
    hyperparams: Dict[str, Any] = Field(default_factory=dict)
    organization_id: str = ""
    result_files: List[FileObject] = Field(default_factory=list)
    status: str = ""
    validation_files: List[FileObject] = Field(default_factory=list)
    training_files: List[FileObject] = Field(default_factory=list)
    updated_at: int = 0


class ListFineTunesResponse(APIModel):
    object: str = "list"
    data: List[FineTune] = Field(default_factory=list)


class ListFineTuneEventsResponse(APIModel):
    """Event log of a fine-tune job.

    When requested with ``stream=True`` ``data`` stays empty and the events are
    read incrementally with :meth:`iter_events`.
    """

    object: str = "list"
    data: List[FineTuneEvent] = Field(default_factory=list)

    _stream: Optional[httpx.Response] = PrivateAttr(default=None)

    @classmethod
    def streaming(cls, stream: httpx.Response) -> "ListFineTuneEventsResponse":
        response = cls()
        response._stream = stream
        return response

    def iter_events(self, token: Optional[CancellationToken] = None) -> StreamIterator[FineTuneEvent]:
        """Yield events from the attached stream; malformed events are skipped.

        The returned iterator owns the body and releases it when closed or
        collected, even if it was never advanced.
        """
        if self._stream is None:
            raise InvalidStateError("no stream")
        stream, self._stream = self._stream, None
        return StreamIterator(stream, lambda body: _decode_events(body, token))

    def close(self) -> None:
        if self._stream is not None:
            stream, self._stream = self._stream, None
            stream.close()


def _decode_events(stream: httpx.Response, token: Optional[CancellationToken]) -> Iterator[FineTuneEvent]:
    for payload in iter_sse_data(stream, token):
        try:
            yield FineTuneEvent.model_validate(json.loads(payload))
        except (ValueError, ValidationError):
            continue


DeleteFineTuneModelResponse = DeletedObject


__all__ = [
    "CreateFineTuneRequest",
    "FineTune",
    "FineTuneEvent",
    "ListFineTunesResponse",
    "ListFineTuneEventsResponse",
    "DeleteFineTuneModelResponse",
]
