"""Client request shaping and response handling over a mocked transport."""

from __future__ import annotations

import json

import httpx
import pytest

from openai_binding import (
    APIError,
    ChatMessage,
    CreateChatRequest,
    DecodeError,
    ErrorCode,
    InvalidArgumentError,
    InvalidStateError,
    function_call_name,
)
from openai_binding.models import (
    CreateAudioTranscriptionRequest,
    CreateCompletionRequest,
    CreateFineTuneRequest,
    CreateMessageRequest,
    ListFilesRequest,
    ListParams,
    UploadFileRequest,
)

CHAT_BODY = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1,
    "model": "gpt-3.5-turbo",
    "choices": [
        {
            "index": 0,
            "finish_reason": "function_call",
            "message": {
                "role": "assistant",
                "content": None,
                "function_call": {"name": "lookup", "arguments": '{"q": "tea"}'},
            },
        }
    ],
}

STREAM_BODY = (
    'data: {"id":"c","choices":[{"delta":{"role":"assistant"},"index":0}]}\n\n'
    'data: {"id":"c","choices":[{"delta":{"content":"Hel"},"index":0}]}\n\n'
    'data: {"id":"c","choices":[{"delta":{"content":"lo"},"index":0}]}\n\n'
    "data: [DONE]\n\n"
)


def _chat_request(**kwargs) -> CreateChatRequest:
    return CreateChatRequest(
        model="gpt-3.5-turbo",
        messages=[ChatMessage(role="user", content="hi")],
        **kwargs,
    )


def test_authorization_and_organization_headers(make_client, recorder):
    client = make_client(recorder.reply(200, json={"object": "list", "data": []}), organization="org-1")
    client.list_models()
    req = recorder.last
    assert req.method == "GET"  # nosec B101
    assert str(req.url) == "https://api.openai.com/v1/models"  # nosec B101
    assert req.headers["Authorization"] == "Bearer sk-live-123"  # nosec B101
    assert req.headers["OpenAI-Organization"] == "org-1"  # nosec B101
    assert "OpenAI-Beta" not in req.headers  # nosec B101


def test_beta_header_only_on_assistant_endpoints(make_client, recorder):
    client = make_client(recorder.reply(200, json={"id": "msg_1", "thread_id": "t1"}))
    client.get_message("t1", "msg_1")
    assert recorder.last.headers["OpenAI-Beta"] == "assistants=v1"  # nosec B101
    assert recorder.last.url.path == "/v1/threads/t1/messages/msg_1"  # nosec B101


def test_custom_base_url(make_client, recorder):
    client = make_client(recorder.reply(200, json={}), base_url="http://localhost:8080/v1/")
    client.create_completion(CreateCompletionRequest(model="m", prompt=["p"]))
    assert str(recorder.last.url) == "http://localhost:8080/v1/completions"  # nosec B101


def test_chat_request_body_and_decoded_function_call(make_client, recorder):
    client = make_client(recorder.reply(200, json=CHAT_BODY))
    resp = client.create_chat(_chat_request(function_call=function_call_name("lookup")))
    body = json.loads(recorder.last.content)
    assert body["function_call"] == {"name": "lookup"}  # nosec B101
    assert "temperature" not in body  # nosec B101
    call = resp.first_choice().function_call
    assert call is not None and call.argument("q", str) == "tea"  # nosec B101


def test_streaming_chat(make_client, recorder):
    client = make_client(recorder.reply(200, content=STREAM_BODY.encode()))
    resp = client.create_chat(_chat_request(stream=True))
    assert json.loads(recorder.last.content)["stream"] is True  # nosec B101
    assert resp.choices == []  # nosec B101
    parts = []
    count = resp.read_stream(lambda chunk: parts.append(chunk.choices[0].delta.content or ""))
    assert count == 3  # nosec B101
    assert "".join(parts) == "Hello"  # nosec B101
    assert resp.stream is None  # nosec B101


def test_streaming_chat_iterates_once(make_client, recorder):
    client = make_client(recorder.reply(200, content=STREAM_BODY.encode()))
    resp = client.create_chat(_chat_request(stream=True))
    text = "".join(c.first_choice() for c in resp.iter_stream() if c.content_delta())
    assert text == "Hello"  # nosec B101
    with pytest.raises(InvalidStateError, match="no stream"):
        resp.iter_stream()


def test_streaming_chat_error_status_is_not_a_stream(make_client, recorder):
    client = make_client(recorder.reply(429, text='{"error": "slow down"}'))
    with pytest.raises(APIError) as info:
        client.create_chat(_chat_request(stream=True))
    assert info.value.code is ErrorCode.RATE_LIMIT  # nosec B101


@pytest.mark.parametrize(
    "status, code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (500, ErrorCode.SERVER_ERROR),
        (503, ErrorCode.UNAVAILABLE),
        (201, ErrorCode.UNKNOWN),
    ],
)
def test_non_200_status_becomes_api_error(make_client, recorder, status, code):
    client = make_client(recorder.reply(status, text="problem body"))
    with pytest.raises(APIError) as info:
        client.get_file_info("file-1")
    err = info.value
    assert err.code is code  # nosec B101
    assert err.status_code == status  # nosec B101
    assert err.body == "problem body"  # nosec B101
    reason = httpx.codes.get_reason_phrase(status)
    assert str(err) == f"unexpected status code: {status}: {reason}: problem body"  # nosec B101


def test_timeout_is_mapped(make_client):
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    client = make_client(handler)
    with pytest.raises(APIError) as info:
        client.list_files()
    assert info.value.code is ErrorCode.TIMEOUT  # nosec B101
    assert isinstance(info.value.raw, httpx.ReadTimeout)  # nosec B101


def test_connect_failure_is_transport_error(make_client):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(APIError) as info:
        make_client(handler).list_files()
    assert info.value.code is ErrorCode.TRANSPORT  # nosec B101


def test_undecodable_body_is_decode_error(make_client, recorder):
    client = make_client(recorder.reply(200, text="<html>"))
    with pytest.raises(DecodeError):
        client.get_fine_tune("ft-1")


def test_fine_tune_endpoints(make_client, recorder):
    client = make_client(recorder.reply(200, json={"id": "ft-1", "status": "pending"}))
    job = client.create_fine_tune(CreateFineTuneRequest(training_file="file-1", n_epochs=2))
    assert job.status == "pending"  # nosec B101
    assert recorder.last.method == "POST"  # nosec B101
    assert recorder.last.url.path == "/v1/fine-tunes"  # nosec B101
    assert json.loads(recorder.last.content) == {"training_file": "file-1", "n_epochs": 2}  # nosec B101
    client.cancel_fine_tune("ft-1")
    assert (recorder.last.method, recorder.last.url.path) == ("POST", "/v1/fine-tunes/ft-1/cancel")  # nosec B101


def test_delete_fine_tune_model(make_client, recorder):
    client = make_client(recorder.reply(200, json={"id": "ft:m", "object": "model", "deleted": True}))
    assert client.delete_fine_tune_model("ft:m").deleted  # nosec B101
    assert recorder.last.method == "DELETE"  # nosec B101


def test_upload_file_is_multipart(make_client, recorder):
    client = make_client(recorder.reply(200, json={"id": "file-1", "filename": "train.jsonl"}))
    uploaded = client.upload_file(UploadFileRequest(name="train.jsonl", purpose="fine-tune", body=b'{"a": 1}\n'))
    assert uploaded.id == "file-1"  # nosec B101
    req = recorder.last
    assert req.headers["Content-Type"].startswith("multipart/form-data")  # nosec B101
    assert b'name="purpose"' in req.content  # nosec B101
    assert b'filename="train.jsonl"' in req.content  # nosec B101
    assert b"fine-tune" in req.content  # nosec B101


def test_list_files_purpose_filter(make_client, recorder):
    client = make_client(recorder.reply(200, json={"data": [{"id": "file-1"}]}))
    files = client.list_files(ListFilesRequest(purpose="assistants"))
    assert recorder.last.url.params["purpose"] == "assistants"  # nosec B101
    assert [f.id for f in files.data] == ["file-1"]  # nosec B101


def test_file_content_is_returned_open(make_client, recorder):
    client = make_client(recorder.reply(200, content=b"raw-bytes"))
    response = client.get_file_content("file-1")
    try:
        assert response.read() == b"raw-bytes"  # nosec B101
    finally:
        response.close()
    assert recorder.last.url.path == "/v1/files/file-1/content"  # nosec B101


def test_list_params_become_query(make_client, recorder):
    client = make_client(recorder.reply(200, json={"data": [], "has_more": False}))
    client.list_messages("t1", ListParams(limit=5, order="asc"))
    params = recorder.last.url.params
    assert params["limit"] == "5" and params["order"] == "asc"  # nosec B101
    assert "after" not in params  # nosec B101


def test_create_message_body(make_client, recorder):
    client = make_client(
        recorder.reply(
            200,
            json={"id": "msg_1", "role": "user", "content": [{"type": "text", "text": {"value": "hi", "annotations": []}}]},
        )
    )
    msg = client.create_message("t1", CreateMessageRequest(role="user", content="hi"))
    assert msg.text() == "hi"  # nosec B101
    assert json.loads(recorder.last.content) == {"role": "user", "content": "hi"}  # nosec B101


def test_get_run_path(make_client, recorder):
    client = make_client(recorder.reply(200, json={"id": "run_1", "status": "queued"}))
    assert client.get_run("t1", "run_1").status == "queued"  # nosec B101
    assert recorder.last.url.path == "/v1/threads/t1/runs/run_1"  # nosec B101


def test_transcription_text_format(make_client, recorder):
    client = make_client(recorder.reply(200, text="hello there"))
    req = CreateAudioTranscriptionRequest(file=b"RIFF....", filename="a.wav", model="whisper-1", response_format="text")
    resp = client.create_audio_transcription(req)
    assert resp.text == "hello there"  # nosec B101
    assert b'name="response_format"' in recorder.last.content  # nosec B101


def test_transcription_json_format(make_client, recorder):
    client = make_client(recorder.reply(200, json={"text": "hi", "language": "en", "duration": 1.5}))
    req = CreateAudioTranscriptionRequest(file=b"RIFF", filename="a.wav", model="whisper-1", response_format="verbose_json")
    resp = client.create_audio_transcription(req)
    assert (resp.text, resp.language, resp.duration) == ("hi", "en", 1.5)  # nosec B101


def test_transcription_unknown_format_fails_before_io(make_client, recorder):
    client = make_client(recorder)
    req = CreateAudioTranscriptionRequest(file=b"RIFF", filename="a.wav", model="whisper-1", response_format="xml")
    with pytest.raises(InvalidArgumentError):
        client.create_audio_transcription(req)
    assert recorder.requests == []  # nosec B101
