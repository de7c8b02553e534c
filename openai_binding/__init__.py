"""Typed client binding for the OpenAI HTTP API.

Quick start::

    from openai_binding import Client, CreateChatRequest, ChatMessage

    client = Client()  # reads OPENAI_API_KEY
    resp = client.create_chat(
        CreateChatRequest(model="gpt-3.5-turbo", messages=[ChatMessage(role="user", content="Hi")])
    )
    print(resp.first_choice().content)
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import (
    APIError,
    DecodeError,
    ErrorCode,
    InvalidArgumentError,
    InvalidStateError,
    RunTerminalError,
    StreamReadError,
    TypeMismatchError,
)
from .chat import (
    FUNCTION_CALL_AUTO,
    FUNCTION_CALL_NONE,
    ChatMessage,
    ChatMessageStreamChunk,
    CreateChatRequest,
    CreateChatResponse,
    Function,
    FunctionCall,
    FunctionCallName,
    JSONSchema,
    function_call_argument_value,
    function_call_name,
)
from .client import Client, new_client
from .polling import wait_for_run
from .streaming import iter_chat_stream, read_chat_stream

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "CancelledError",
    "APIError",
    "DecodeError",
    "ErrorCode",
    "InvalidArgumentError",
    "InvalidStateError",
    "RunTerminalError",
    "StreamReadError",
    "TypeMismatchError",
    "FUNCTION_CALL_AUTO",
    "FUNCTION_CALL_NONE",
    "ChatMessage",
    "ChatMessageStreamChunk",
    "CreateChatRequest",
    "CreateChatResponse",
    "Function",
    "FunctionCall",
    "FunctionCallName",
    "JSONSchema",
    "function_call_argument_value",
    "function_call_name",
    "Client",
    "new_client",
    "wait_for_run",
    "iter_chat_stream",
    "read_chat_stream",
]
