"""Chat completion stream decoder.

Builds on :func:`iter_sse_data`: each ``data`` payload is decoded into a
:class:`ChatMessageStreamChunk`. Payloads that are not valid JSON or do not
validate are dropped (server noise is tolerated); everything the caller does
with a chunk is not, so handler exceptions end the stream and propagate
unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from pydantic import ValidationError

from ..base.cancellation import CancellationToken, CancelledError
from ..base.logging import get_logger, log_event
from ..chat.stream_chunk import ChatMessageStreamChunk
from .sse import LineStream, StreamIterator, iter_sse_data

ChunkHandler = Callable[[ChatMessageStreamChunk], None]

_logger = get_logger("openai_binding.streaming")
_ERROR_PREVIEW = 300


def iter_chat_stream(
    stream: LineStream,
    token: Optional[CancellationToken] = None,
) -> StreamIterator[ChatMessageStreamChunk]:
    """Lazily decode ``stream`` into chat chunks, in wire order.

    The stream is closed when the iterator is exhausted, fails, is closed by
    the consumer or is garbage collected, started or not. Malformed payloads
    are skipped.
    """
    return StreamIterator(stream, lambda body: _decode_chunks(body, token))


def _decode_chunks(stream: LineStream, token: Optional[CancellationToken]) -> Iterator[ChatMessageStreamChunk]:
    for payload in iter_sse_data(stream, token):
        try:
            chunk = ChatMessageStreamChunk.model_validate_json(payload)
        except ValidationError as exc:
            log_event(
                _logger,
                "stream.skip",
                level=logging.DEBUG,
                error=str(exc)[:_ERROR_PREVIEW],
                payload_bytes=len(payload),
            )
            continue
        yield chunk


def read_chat_stream(
    stream: LineStream,
    handler: ChunkHandler,
    token: Optional[CancellationToken] = None,
) -> int:
    """Decode ``stream`` and call ``handler`` once per chunk.

    Parameters:
        stream: Streaming response body; always closed on return.
        handler: Callback invoked synchronously for each chunk. Any exception
            it raises stops decoding and is re-raised as is.
        token: Optional cancellation token checked at each line boundary.

    Returns:
        Number of chunks delivered to ``handler``.

    Raises:
        CancelledError: when ``token`` fires between lines.
        StreamReadError: when the underlying stream fails.
    """
    delivered = 0
    log_event(_logger, "stream.start", level=logging.DEBUG)
    try:
        with iter_chat_stream(stream, token) as chunks:
            for chunk in chunks:
                handler(chunk)
                delivered += 1
    except CancelledError:
        log_event(_logger, "stream.cancelled", chunks=delivered)
        raise
    log_event(_logger, "stream.done", level=logging.DEBUG, chunks=delivered)
    return delivered


__all__ = ["iter_chat_stream", "read_chat_stream", "ChunkHandler"]
