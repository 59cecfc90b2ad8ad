"""Unit tests for ChatGateway."""

import pytest

from ad_gateway import texts
from ad_gateway.domain.entities import ChatMessage, ErrorKind, Role
from ad_gateway.domain.exceptions import (
    InternalGatewayError,
    InvalidCredentialError,
    RateLimitedError,
    UpstreamError,
)
from ad_gateway.services.car_research import ChatGateway

HISTORY = [
    ChatMessage(role=Role.USER, content="Vilken bil drar minst?"),
    ChatMessage(role=Role.ASSISTANT, content="Det beror på storleken."),
    ChatMessage(role=Role.USER, content="En kombi."),
]


@pytest.mark.asyncio
async def test_history_forwarded_verbatim(factory, fake_client):
    gateway = ChatGateway(client_factory=factory, api_key="sk-server")

    result = await gateway.chat(HISTORY)

    assert result.ok
    assert result.text == fake_client.reply
    assert factory.keys == ["sk-server"]
    assert fake_client.calls == [HISTORY]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (InvalidCredentialError(), ErrorKind.UPSTREAM_ERROR),
        (RateLimitedError(), ErrorKind.UPSTREAM_ERROR),
        (UpstreamError(), ErrorKind.UPSTREAM_ERROR),
        (InternalGatewayError("Connection error."), ErrorKind.INTERNAL_ERROR),
        (ValueError("bad"), ErrorKind.INTERNAL_ERROR),
    ],
)
async def test_failures_use_fallback_message(factory, fake_client, error, kind):
    fake_client.error = error
    gateway = ChatGateway(client_factory=factory, api_key="sk-server")

    result = await gateway.chat(HISTORY)

    assert result.failure.kind is kind
    assert result.failure.message == "Tyvärr uppstod ett fel. Försök igen."


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", [None, ""])
async def test_missing_server_key(factory, fake_client, api_key):
    gateway = ChatGateway(client_factory=factory, api_key=api_key)

    result = await gateway.chat(HISTORY)

    assert result.failure.kind is ErrorKind.MISSING_CREDENTIAL
    assert result.failure.message == texts.CHAT_FALLBACK
    assert fake_client.calls == []
