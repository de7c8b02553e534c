"""Server-sent-event framing.

:func:`iter_sse_data` turns a line-oriented byte stream into the sequence of
``data`` payloads it carries. It owns the stream: the stream is closed on
every exit path, including early ``close()`` of the generator by a consumer
that stops iterating.

Framing rules
-------------
- empty lines (event separators) and ``:`` comment lines are skipped
- a line is split on its first ``:``; lines without one are skipped
- only the ``data`` field is kept; ``event``, ``id``, ``retry`` are skipped
- one leading space of the value is removed
- ``[DONE]`` ends the stream successfully
"""

from __future__ import annotations

import contextlib
from typing import Callable, Generic, Iterator, Optional, Protocol, TypeVar

import httpx

from ..base.cancellation import CancellationToken
from ..base.errors import StreamReadError

DONE = "[DONE]"
DATA_FIELD = "data"

T = TypeVar("T")


class LineStream(Protocol):
    """What the decoder needs from a response body (``httpx.Response`` fits)."""

    def iter_lines(self) -> Iterator[str]: ...

    def close(self) -> None: ...


def parse_data_line(line: str) -> Optional[str]:
    """Return the ``data`` value carried by ``line`` or ``None`` to skip it."""
    if not line or line.startswith(":"):
        return None
    field, sep, value = line.partition(":")
    if not sep or field != DATA_FIELD:
        return None
    if value.startswith(" "):
        value = value[1:]
    return value


def iter_sse_data(stream: LineStream, token: Optional[CancellationToken] = None) -> Iterator[str]:
    """Yield every ``data`` payload of ``stream`` until ``[DONE]`` or EOF.

    Parameters:
        stream: Response body to read; closed when iteration ends.
        token: Optional cancellation token, checked before each line read.

    Raises:
        CancelledError: when ``token`` is cancelled at a line boundary.
        StreamReadError: when reading the next line fails.
    """
    try:
        lines = stream.iter_lines()
        while True:
            if token is not None:
                token.raise_if_cancelled()
            try:
                line = next(lines)
            except StopIteration:
                return
            except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
                raise StreamReadError(f"stream read failed: {exc}", raw=exc) from exc
            value = parse_data_line(line)
            if value is None:
                continue
            if value == DONE:
                return
            yield value
    finally:
        stream.close()


class StreamIterator(Generic[T]):
    """Lazy iterator that owns ``stream`` from construction.

    ``decode`` is only called on the first ``next()``. Until then the body is
    held here, so :meth:`close`, leaving a ``with`` block or garbage collection
    still release it when iteration never starts.
    """

    def __init__(self, stream: LineStream, decode: Callable[[LineStream], Iterator[T]]) -> None:
        self._stream: Optional[LineStream] = stream
        self._decode = decode
        self._items: Optional[Iterator[T]] = None

    def __iter__(self) -> "StreamIterator[T]":
        return self

    def __next__(self) -> T:
        if self._items is None:
            if self._stream is None:
                raise StopIteration
            stream, self._stream = self._stream, None
            self._items = self._decode(stream)
        return next(self._items)

    def close(self) -> None:
        if self._items is not None:
            close = getattr(self._items, "close", None)
            if close is not None:
                close()
        elif self._stream is not None:
            stream, self._stream = self._stream, None
            stream.close()

    def __enter__(self) -> "StreamIterator[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        # finalizers must not raise
        with contextlib.suppress(Exception):
            self.close()


__all__ = ["iter_sse_data", "parse_data_line", "LineStream", "StreamIterator", "DONE"]
