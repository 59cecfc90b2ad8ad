"""Tests for OpenAIAdapter against a mocked HTTP transport (no network)."""

import json

import httpx
import pytest

from ad_gateway.domain.entities import ChatMessage, Role
from ad_gateway.domain.exceptions import (
    InternalGatewayError,
    InvalidCredentialError,
    RateLimitedError,
    UpstreamError,
)
from ad_gateway.infrastructure.openai_adapter import OpenAIAdapter

MESSAGES = [
    ChatMessage(role=Role.SYSTEM, content="Du är en säljare."),
    ChatMessage(role=Role.USER, content="Märke: Volvo"),
]


def _completion(content: str | None) -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1_700_000_000,
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def _adapter(handler) -> OpenAIAdapter:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenAIAdapter(
        api_key="sk-test",
        base_url="https://llm.test/v1",
        http_client=http_client,
    )


@pytest.mark.asyncio
async def test_success_returns_first_choice_and_sends_fixed_parameters():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_completion("Till salu: Volvo XC60"))

    text = await _adapter(handler).complete(MESSAGES)

    assert text == "Till salu: Volvo XC60"
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["model"] == "gpt-4o-mini"
    assert body["max_tokens"] == 1000
    assert body["temperature"] == 0.7
    assert body["messages"] == [
        {"role": "system", "content": "Du är en säljare."},
        {"role": "user", "content": "Märke: Volvo"},
    ]


@pytest.mark.asyncio
async def test_null_content_is_empty_string():
    adapter = _adapter(lambda request: httpx.Response(200, json=_completion(None)))
    assert await adapter.complete(MESSAGES) == ""


@pytest.mark.asyncio
async def test_no_choices_is_empty_string():
    payload = _completion("x")
    payload["choices"] = []
    adapter = _adapter(lambda request: httpx.Response(200, json=payload))
    assert await adapter.complete(MESSAGES) == ""


@pytest.mark.asyncio
async def test_choice_without_message_is_empty_string():
    payload = {"choices": [{"index": 0}]}
    adapter = _adapter(lambda request: httpx.Response(200, json=payload))
    assert await adapter.complete(MESSAGES) == ""


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (401, InvalidCredentialError),
        (429, RateLimitedError),
        (400, UpstreamError),
        (403, UpstreamError),
        (500, UpstreamError),
        (503, UpstreamError),
    ],
)
async def test_status_codes_map_to_domain_errors(status, expected):
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(status, json={"error": {"message": "nope", "type": "x"}})

    with pytest.raises(expected):
        await _adapter(handler).complete(MESSAGES)
    assert calls == 1


@pytest.mark.asyncio
async def test_connection_failure_is_internal_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(InternalGatewayError, match="Kunde inte nå AI-tjänsten"):
        await _adapter(handler).complete(MESSAGES)


@pytest.mark.asyncio
async def test_timeout_is_internal_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(InternalGatewayError, match="Tidsgränsen"):
        await _adapter(handler).complete(MESSAGES)


@pytest.mark.asyncio
async def test_malformed_body_is_internal_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, content=b"<html>oops</html>", headers={"content-type": "application/json"}
        )

    with pytest.raises(InternalGatewayError):
        await _adapter(handler).complete(MESSAGES)
