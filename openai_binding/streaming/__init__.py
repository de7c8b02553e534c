"""Event-stream decoding: SSE framing and chat chunk decoding."""

from .sse import iter_sse_data, parse_data_line, StreamIterator, DONE
from .chat_stream import iter_chat_stream, read_chat_stream, ChunkHandler

__all__ = [
    "iter_sse_data",
    "parse_data_line",
    "StreamIterator",
    "DONE",
    "iter_chat_stream",
    "read_chat_stream",
    "ChunkHandler",
]
