"""Request bodies: omitted optionals, schema aliases and nested models."""

from __future__ import annotations

from openai_binding import ChatMessage, CreateChatRequest, Function, JSONSchema
from openai_binding.models import (
    CreateAssistantRequest,
    CreateModerationRequest,
    CreateModerationResponse,
    CreateThreadAndRunRequest,
    InitialThread,
    InitialThreadMessage,
    SubmitToolOutputsRequest,
    ToolOutput,
)


def test_function_schema_uses_wire_names():
    fn = Function(
        name="get_weather",
        description="Look up the weather",
        parameters=JSONSchema(
            type="object",
            properties={
                "city": JSONSchema(type="string"),
                "days": JSONSchema(type="integer", minimum=1, maximum=7),
                "tags": JSONSchema(type="array", items=JSONSchema(type="string"), min_items=1),
            },
            required=["city"],
            additional_properties=JSONSchema(type="string"),
        ),
    )
    payload = fn.to_payload()
    params = payload["parameters"]
    assert params["required"] == ["city"]  # nosec B101
    assert params["additionalProperties"] == {"type": "string"}  # nosec B101
    assert params["properties"]["tags"]["minItems"] == 1  # nosec B101
    assert params["properties"]["days"] == {"type": "integer", "minimum": 1.0, "maximum": 7.0}  # nosec B101
    assert params["properties"]["city"] == {"type": "string"}  # nosec B101


def test_schema_accepts_wire_names():
    schema = JSONSchema.model_validate({"$ref": "#/defs/x", "anyOf": [{"type": "null"}]})
    assert schema.ref == "#/defs/x"  # nosec B101
    assert schema.any_of[0].type == "null"  # nosec B101


def test_chat_request_minimal_body():
    req = CreateChatRequest(model="gpt-4", messages=[ChatMessage(role="user", content="hi")])
    assert req.to_payload() == {"model": "gpt-4", "messages": [{"role": "user", "content": "hi"}]}  # nosec B101


def test_chat_request_with_functions():
    req = CreateChatRequest(
        model="gpt-4",
        messages=[ChatMessage(role="function", name="get_weather", content='{"temp": 21}')],
        functions=[Function(name="get_weather")],
        temperature=0.2,
    )
    payload = req.to_payload()
    assert payload["functions"] == [{"name": "get_weather"}]  # nosec B101
    assert payload["messages"][0]["name"] == "get_weather"  # nosec B101
    assert payload["temperature"] == 0.2  # nosec B101


def test_assistant_and_run_requests():
    assistant = CreateAssistantRequest(model="gpt-4", tools=[{"type": "code_interpreter"}])
    assert assistant.to_payload() == {"model": "gpt-4", "tools": [{"type": "code_interpreter"}]}  # nosec B101
    run = CreateThreadAndRunRequest(
        assistant_id="asst_1",
        thread=InitialThread(messages=[InitialThreadMessage(role="user", content="hello")]),
    )
    assert run.to_payload() == {  # nosec B101
        "assistant_id": "asst_1",
        "thread": {"messages": [{"role": "user", "content": "hello"}]},
    }
    outputs = SubmitToolOutputsRequest(tool_outputs=[ToolOutput(tool_call_id="call_1", output="42")])
    assert outputs.to_payload() == {"tool_outputs": [{"tool_call_id": "call_1", "output": "42"}]}  # nosec B101


def test_moderation_categories_use_wire_names():
    assert CreateModerationRequest(input=["text"]).to_payload() == {"input": ["text"]}  # nosec B101
    resp = CreateModerationResponse.model_validate(
        {
            "id": "modr-1",
            "model": "text-moderation-005",
            "results": [
                {
                    "flagged": True,
                    "categories": {"hate/threatening": True, "self-harm": False},
                    "category_scores": {"hate/threatening": 0.9, "self-harm": 0.01},
                }
            ],
        }
    )
    result = resp.results[0]
    assert result.flagged  # nosec B101
    dumped = result.to_payload()
    assert dumped["categories"]["hate/threatening"] is True  # nosec B101
