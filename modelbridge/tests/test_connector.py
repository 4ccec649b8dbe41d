"""End-to-end dispatch through ``send_to_model`` against fake transports."""

from __future__ import annotations

import asyncio
import json
from typing import List

import httpx
import pytest

from modelbridge import (
    CancellationToken,
    ChatMessage,
    ChatModelRequest,
    ErrorCode,
    MissingCredentialError,
    ProviderError,
    ProviderHttpError,
    StreamCancelledError,
    UnsupportedProviderError,
    send_to_model,
)
from modelbridge.tests.helpers import (
    RecordingTransport,
    ndjson,
    openai_chunk,
    sse,
    streaming_response,
)

HELLO = [ChatMessage(role="user", content="hi")]


def _request(provider: str, **kw) -> ChatModelRequest:
    kw.setdefault("model", "m")
    kw.setdefault("messages", HELLO)
    return ChatModelRequest(provider=provider, **kw)


@pytest.mark.parametrize("provider", ["openrouter", "openai", "anthropic", "groq", "grok"])
@pytest.mark.parametrize("api_key", [None, "", "   "])
async def test_hosted_provider_without_key_makes_no_call(provider, api_key):
    transport = RecordingTransport(lambda request: httpx.Response(200, json={}))
    with pytest.raises(MissingCredentialError) as excinfo:
        await send_to_model(_request(provider, api_key=api_key, stream=True), transport=transport)
    assert transport.requests == []  # nosec B101
    assert excinfo.value.code is ErrorCode.AUTH  # nosec B101
    assert excinfo.value.credential_key == f"{provider}_api_key"  # nosec B101


async def test_unknown_provider_is_rejected():
    with pytest.raises(UnsupportedProviderError):
        await send_to_model(_request("nope"))


async def test_openrouter_stream_end_to_end():
    body = sse(openai_chunk("He"), openai_chunk("llo"), "[DONE]")
    transport = RecordingTransport(lambda request: streaming_response([body[:25], body[25:]]))
    seen: List[str] = []

    response = await send_to_model(
        _request("openrouter", model="openai/gpt-4o", api_key="sk-or", stream=True, request_id="r1"),
        on_delta=seen.append,
        transport=transport,
    )

    assert seen == ["He", "llo"]  # nosec B101
    assert response.content == "Hello"  # nosec B101
    assert response.request_id == "r1"  # nosec B101
    assert len(response.raw) == 2  # nosec B101
    (sent,) = transport.requests
    assert str(sent.url) == "https://openrouter.ai/api/v1/chat/completions"  # nosec B101
    assert sent.headers["Authorization"] == "Bearer sk-or"  # nosec B101
    assert json.loads(sent.content) == {  # nosec B101
        "model": "openai/gpt-4o",
        "messages": [{"role": "user", "content": "hi"}],
        "stream": True,
    }


async def test_openrouter_attribution_headers_from_env(monkeypatch):
    monkeypatch.setenv("OPENROUTER_HTTP_REFERER", "https://chat.example.org")
    monkeypatch.setenv("OPENROUTER_APP_TITLE", "Chat")
    transport = RecordingTransport(lambda r: httpx.Response(200, json={"choices": []}))
    await send_to_model(_request("openrouter", api_key="k"), transport=transport)
    (sent,) = transport.requests
    assert sent.headers["HTTP-Referer"] == "https://chat.example.org"  # nosec B101
    assert sent.headers["X-Title"] == "Chat"  # nosec B101


async def test_non_stream_reads_single_document():
    doc = {"choices": [{"message": {"role": "assistant", "content": "done"}}]}
    transport = RecordingTransport(lambda r: httpx.Response(200, json=doc))
    response = await send_to_model(_request("lmstudio"), transport=transport)
    assert response.content == "done"  # nosec B101
    assert response.raw == doc  # nosec B101
    (sent,) = transport.requests
    assert str(sent.url) == "http://localhost:1234/v1/chat/completions"  # nosec B101
    assert "Authorization" not in sent.headers  # nosec B101


@pytest.mark.parametrize(
    "doc",
    [
        {},
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": {"content": None}}]},
        {"choices": None},
        {"choices": [None]},
        {"choices": [{"message": None}]},
        {"choices": "n/a"},
        {"choices": [{"message": {"content": 12}}], "usage": None},
        [],
        None,
        "ok",
    ],
)
async def test_non_stream_absent_fields_yield_empty_text(doc):
    # content= so a top-level null is sent as the literal JSON document
    transport = RecordingTransport(lambda r: httpx.Response(200, content=json.dumps(doc).encode()))
    response = await send_to_model(_request("openai", api_key="k"), transport=transport)
    assert response.content == ""  # nosec B101


async def test_ollama_stream_uses_ndjson():
    body = ndjson({"message": {"content": "a"}}, {"message": {"content": "b"}}, {"done": True})
    transport = RecordingTransport(lambda r: streaming_response([body]))
    seen: List[str] = []
    response = await send_to_model(
        _request("ollama", model="llama3", stream=True), on_delta=seen.append, transport=transport
    )
    assert seen == ["a", "b"] and response.content == "ab"  # nosec B101
    assert str(transport.requests[0].url) == "http://localhost:11434/api/chat"  # nosec B101


async def test_base_url_env_override(monkeypatch):
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://10.0.0.5:11434")
    transport = RecordingTransport(lambda r: httpx.Response(200, json={"message": {"content": "x"}}))
    await send_to_model(_request("ollama"), transport=transport)
    assert str(transport.requests[0].url) == "http://10.0.0.5:11434/api/chat"  # nosec B101


@pytest.mark.parametrize("status,code", [(401, ErrorCode.AUTH), (429, ErrorCode.RATE_LIMIT), (500, ErrorCode.SERVER_ERROR)])
async def test_http_error_status_is_surfaced(status, code):
    transport = RecordingTransport(lambda r: httpx.Response(status, text="upstream said no"))
    with pytest.raises(ProviderHttpError) as excinfo:
        await send_to_model(_request("openai", api_key="k", stream=True), transport=transport)
    err = excinfo.value
    assert err.status == status and err.code is code  # nosec B101
    assert err.body == "upstream said no"  # nosec B101
    assert len(transport.requests) == 1  # nosec B101


async def test_connect_failure_is_classified():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(ProviderError) as excinfo:
        await send_to_model(_request("lmstudio", stream=True), transport=httpx.MockTransport(refuse))
    assert excinfo.value.code is ErrorCode.UNAVAILABLE  # nosec B101


async def test_invalid_json_document_is_a_validation_error():
    transport = httpx.MockTransport(lambda r: httpx.Response(200, text="<html>"))
    with pytest.raises(ProviderError) as excinfo:
        await send_to_model(_request("llamacpp"), transport=transport)
    assert excinfo.value.code is ErrorCode.VALIDATION  # nosec B101


async def test_cancel_from_sink_returns_partial_text():
    token = CancellationToken()
    body = sse(openai_chunk("He"), openai_chunk("llo"), "[DONE]")
    transport = RecordingTransport(lambda r: streaming_response([body]))

    def sink(delta: str) -> None:
        token.cancel("stop pressed")

    with pytest.raises(StreamCancelledError) as excinfo:
        await send_to_model(
            _request("openrouter", api_key="k", stream=True, request_id="r9"),
            on_delta=sink,
            cancellation=token,
            transport=transport,
        )
    assert excinfo.value.partial_text == "He"  # nosec B101
    assert excinfo.value.request_id == "r9"  # nosec B101
    # the task is usable afterwards: no stray cancellation is pending
    await asyncio.sleep(0)


async def test_cancel_interrupts_a_stalled_read():
    token = CancellationToken()

    async def body():
        yield sse(openai_chunk("par"))
        await asyncio.sleep(30)
        yield sse(openai_chunk("never"))

    transport = httpx.MockTransport(lambda r: httpx.Response(200, content=body()))

    def sink(delta: str) -> None:
        asyncio.get_running_loop().call_later(0.01, token.cancel, "stop")

    with pytest.raises(StreamCancelledError) as excinfo:
        await asyncio.wait_for(
            send_to_model(
                _request("openai", api_key="k", stream=True),
                on_delta=sink,
                cancellation=token,
                transport=transport,
            ),
            timeout=5,
        )
    assert excinfo.value.partial_text == "par"  # nosec B101
    await asyncio.sleep(0.02)


async def test_already_cancelled_token_makes_no_call():
    token = CancellationToken()
    token.cancel("early")
    transport = RecordingTransport(lambda r: httpx.Response(200, json={}))
    with pytest.raises(StreamCancelledError):
        await send_to_model(_request("ollama", stream=True), cancellation=token, transport=transport)
    assert transport.requests == []  # nosec B101


async def test_external_task_cancellation_propagates():
    async def body():
        yield ndjson({"message": {"content": "a"}})
        await asyncio.sleep(30)

    transport = httpx.MockTransport(lambda r: httpx.Response(200, content=body()))
    task = asyncio.create_task(send_to_model(_request("ollama", stream=True), transport=transport))
    await asyncio.sleep(0.05)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
