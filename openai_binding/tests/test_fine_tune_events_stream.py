"""Fine-tune event listing, plain and streamed."""

from __future__ import annotations

import gc

import httpx
import pytest

from openai_binding import APIError, ErrorCode, InvalidStateError
from openai_binding.models import ListFineTuneEventsResponse

EVENTS_STREAM = (
    'data: {"object": "fine-tune-event", "created_at": 1, "level": "info", "message": "Job enqueued"}\n\n'
    "data: garbage\n\n"
    'data: {"object": "fine-tune-event", "created_at": 2, "level": "info", "message": "Job started"}\n\n'
    "data: [DONE]\n\n"
)


def test_plain_event_list(make_client, recorder):
    client = make_client(recorder.reply(200, json={"object": "list", "data": [{"message": "Job enqueued"}]}))
    events = client.list_fine_tune_events("ft-1")
    assert [e.message for e in events.data] == ["Job enqueued"]  # nosec B101
    assert "stream" not in recorder.last.url.params  # nosec B101


def test_streamed_events_skip_malformed(make_client, recorder):
    client = make_client(recorder.reply(200, content=EVENTS_STREAM.encode()))
    events = client.list_fine_tune_events("ft-1", stream=True)
    assert recorder.last.url.params["stream"] == "true"  # nosec B101
    assert recorder.last.url.path == "/v1/fine-tunes/ft-1/events"  # nosec B101
    assert [e.message for e in events.iter_events()] == ["Job enqueued", "Job started"]  # nosec B101
    with pytest.raises(InvalidStateError):
        events.iter_events()


def test_unread_stream_can_be_closed(make_client, recorder):
    client = make_client(recorder.reply(200, content=EVENTS_STREAM.encode()))
    events = client.list_fine_tune_events("ft-1", stream=True)
    events.close()
    events.close()
    with pytest.raises(InvalidStateError):
        events.iter_events()


def test_error_status_raises_before_streaming(make_client, recorder):
    client = make_client(recorder.reply(404, text="no such job"))
    with pytest.raises(APIError) as info:
        client.list_fine_tune_events("ft-missing", stream=True)
    assert info.value.code is ErrorCode.NOT_FOUND  # nosec B101
    assert info.value.status_code == httpx.codes.NOT_FOUND  # nosec B101


def test_dropped_event_iterator_releases_body(line_stream):
    stream = line_stream(EVENTS_STREAM.splitlines())
    events = ListFineTuneEventsResponse.streaming(stream).iter_events()
    del events
    gc.collect()
    assert stream.closed  # nosec B101
    assert stream.reads == 0  # nosec B101
