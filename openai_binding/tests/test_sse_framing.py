"""Server-sent-event line framing."""

from __future__ import annotations

import httpx
import pytest

from openai_binding import CancellationToken, CancelledError, StreamReadError
from openai_binding.streaming.sse import iter_sse_data, parse_data_line


@pytest.mark.parametrize(
    "line, expected",
    [
        ("data: {}", "{}"),
        ("data:{}", "{}"),
        ("data:  two", " two"),
        ("data: a: b", "a: b"),
        ("data:", ""),
        ("", None),
        (": keep-alive", None),
        ("event: ping", None),
        ("id: 4", None),
        ("retry: 100", None),
        ("no separator", None),
    ],
)
def test_parse_data_line(line, expected):
    assert parse_data_line(line) == expected  # nosec B101


def test_iter_stops_at_done_and_closes(line_stream):
    stream = line_stream(["data: 1", "", "data: [DONE]", "data: never"])
    assert list(iter_sse_data(stream)) == ["1"]  # nosec B101
    assert stream.closed  # nosec B101
    assert stream.reads == 3  # nosec B101


def test_done_without_space_also_terminates(line_stream):
    stream = line_stream(["data:[DONE]", "data: late"])
    assert list(iter_sse_data(stream)) == []  # nosec B101


def test_eof_without_done_is_success(line_stream):
    stream = line_stream([": hello", "data: a", "event: x", "data: b"])
    assert list(iter_sse_data(stream)) == ["a", "b"]  # nosec B101
    assert stream.closed  # nosec B101


def test_read_failure_becomes_stream_read_error(line_stream):
    stream = line_stream(["data: a"], error=httpx.ReadError("connection reset"))
    gen = iter_sse_data(stream)
    assert next(gen) == "a"  # nosec B101
    with pytest.raises(StreamReadError) as info:
        next(gen)
    assert isinstance(info.value.raw, httpx.ReadError)  # nosec B101
    assert stream.closed  # nosec B101


def test_cancelled_token_stops_before_next_read(line_stream):
    token = CancellationToken()
    stream = line_stream(["data: a", "data: b"])
    gen = iter_sse_data(stream, token)
    assert next(gen) == "a"  # nosec B101
    token.cancel("user stop")
    with pytest.raises(CancelledError):
        next(gen)
    assert stream.reads == 1  # nosec B101
    assert stream.closed  # nosec B101


def test_consumer_close_releases_stream(line_stream):
    stream = line_stream(["data: a", "data: b"])
    gen = iter_sse_data(stream)
    next(gen)
    gen.close()
    assert stream.closed  # nosec B101
