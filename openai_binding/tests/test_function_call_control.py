"""Function-call control values: wire shapes, parsing and request embedding."""

from __future__ import annotations

import json

import pytest

from openai_binding import (
    FUNCTION_CALL_AUTO,
    FUNCTION_CALL_NONE,
    ChatMessage,
    CreateChatRequest,
    DecodeError,
    InvalidArgumentError,
    function_call_name,
)
from openai_binding.chat.control import (
    FunctionCallName,
    decode_function_call_control,
    encode_function_call_control,
)


def _request(**kwargs) -> CreateChatRequest:
    return CreateChatRequest(
        model="gpt-3.5-turbo",
        messages=[ChatMessage(role="user", content="hi")],
        **kwargs,
    )


def test_encode_variants():
    assert encode_function_call_control(FUNCTION_CALL_NONE) == "none"  # nosec B101
    assert encode_function_call_control(FUNCTION_CALL_AUTO) == "auto"  # nosec B101
    assert encode_function_call_control(function_call_name("get_weather")) == {"name": "get_weather"}  # nosec B101


def test_encode_rejects_foreign_values():
    with pytest.raises(InvalidArgumentError):
        encode_function_call_control("auto")  # type: ignore[arg-type]


@pytest.mark.parametrize("name", ["", "   "])
def test_named_variant_requires_name(name):
    with pytest.raises(InvalidArgumentError):
        function_call_name(name)


def test_decode_accepts_the_three_shapes():
    assert decode_function_call_control("none") is FUNCTION_CALL_NONE  # nosec B101
    assert decode_function_call_control("auto") is FUNCTION_CALL_AUTO  # nosec B101
    assert decode_function_call_control({"name": "f"}) == FunctionCallName("f")  # nosec B101


@pytest.mark.parametrize("raw", ["required", 42, None, [], {}, {"name": ""}, {"name": 3}])
def test_decode_rejects_other_json_values(raw):
    with pytest.raises(DecodeError):
        decode_function_call_control(raw)


def test_variants_compare_by_value():
    assert function_call_name("f") == function_call_name("f")  # nosec B101
    assert function_call_name("f") != function_call_name("g")  # nosec B101
    assert len({FUNCTION_CALL_NONE, FUNCTION_CALL_AUTO, function_call_name("f")}) == 3  # nosec B101


def test_request_omits_function_call_when_unset():
    payload = _request().to_payload()
    assert "function_call" not in payload  # nosec B101
    assert "functions" not in payload  # nosec B101


@pytest.mark.parametrize(
    "control, expected",
    [
        (FUNCTION_CALL_NONE, "none"),
        (FUNCTION_CALL_AUTO, "auto"),
        (function_call_name("lookup"), {"name": "lookup"}),
    ],
)
def test_request_serializes_control(control, expected):
    payload = _request(function_call=control).to_payload()
    assert payload["function_call"] == expected  # nosec B101
    assert json.loads(json.dumps(payload))["function_call"] == expected  # nosec B101


def test_request_parses_wire_shape():
    req = CreateChatRequest.model_validate(
        {
            "model": "gpt-4",
            "messages": [{"role": "user", "content": "hi"}],
            "function_call": {"name": "lookup"},
        }
    )
    assert req.function_call == FunctionCallName("lookup")  # nosec B101


def test_request_rejects_unknown_wire_shape():
    with pytest.raises(DecodeError):
        _request(function_call="sometimes")
