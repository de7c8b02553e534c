"""Chat completion types: control values, function calls, requests, responses."""

from .control import (
    FUNCTION_CALL_AUTO,
    FUNCTION_CALL_NONE,
    FunctionCallAuto,
    FunctionCallControl,
    FunctionCallName,
    FunctionCallNone,
    decode_function_call_control,
    encode_function_call_control,
    function_call_name,
)
from .function_call import (
    FunctionCall,
    FunctionCallArguments,
    decode_arguments,
    encode_arguments,
    function_call_argument_value,
)
from .schema import Function, JSONSchema
from .message import ChatMessage, ROLE_ASSISTANT, ROLE_FUNCTION, ROLE_SYSTEM, ROLE_USER
from .stream_chunk import ChatDelta, ChatMessageStreamChunk, FunctionCallDelta, StreamChoice
from .request import CreateChatRequest
from .response import ChatChoice, CreateChatResponse

__all__ = [
    "FUNCTION_CALL_AUTO",
    "FUNCTION_CALL_NONE",
    "FunctionCallAuto",
    "FunctionCallControl",
    "FunctionCallName",
    "FunctionCallNone",
    "decode_function_call_control",
    "encode_function_call_control",
    "function_call_name",
    "FunctionCall",
    "FunctionCallArguments",
    "decode_arguments",
    "encode_arguments",
    "function_call_argument_value",
    "Function",
    "JSONSchema",
    "ChatMessage",
    "ROLE_ASSISTANT",
    "ROLE_FUNCTION",
    "ROLE_SYSTEM",
    "ROLE_USER",
    "ChatDelta",
    "ChatMessageStreamChunk",
    "FunctionCallDelta",
    "StreamChoice",
    "CreateChatRequest",
    "ChatChoice",
    "CreateChatResponse",
]
