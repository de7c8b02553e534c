"""Chat completion request model."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import field_serializer, field_validator

from ..models.base import APIModel
from .control import decode_function_call_control, encode_function_call_control, is_function_call_control
from .message import ChatMessage
from .schema import Function


class CreateChatRequest(APIModel):
    """Parameters of ``POST /chat/completions``.

    ``function_call`` takes a control value (``FUNCTION_CALL_NONE``,
    ``FUNCTION_CALL_AUTO`` or ``function_call_name(...)``) or one of its wire
    shapes. It is omitted from the body when unset. With ``stream=True`` the
    response body is kept open for the event-stream decoder.
    """

    model: str
    messages: List[ChatMessage]
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop: Optional[List[str]] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = None
    functions: Optional[List[Function]] = None
    function_call: Optional[Any] = None

    @field_validator("function_call", mode="before")
    @classmethod
    def _coerce_control(cls, value: Any) -> Any:
        if value is None or is_function_call_control(value):
            return value
        return decode_function_call_control(value)

    @field_serializer("function_call")
    def _serialize_control(self, value: Any) -> Any:
        if value is None:
            return None
        return encode_function_call_control(value)


__all__ = ["CreateChatRequest"]
