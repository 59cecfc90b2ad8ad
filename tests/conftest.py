"""Shared fixtures: a recording fake completion client and an HTTP test client."""

from __future__ import annotations

from typing import Sequence

import pytest
from fastapi.testclient import TestClient

from ad_gateway.domain.entities import CarDetails, ChatMessage
from ad_gateway.infrastructure.config import Settings, get_settings
from ad_gateway.interface.app import create_app
from ad_gateway.interface.dependencies import get_client_factory


class FakeCompletionClient:
    """Stands in for the OpenAI adapter; records every call it receives."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[list[ChatMessage]] = []

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply


class RecordingFactory:
    """Client factory that remembers which API keys it was asked for."""

    def __init__(self, client: FakeCompletionClient) -> None:
        self.client = client
        self.keys: list[str] = []

    def __call__(self, api_key: str) -> FakeCompletionClient:
        self.keys.append(api_key)
        return self.client


@pytest.fixture
def fake_client() -> FakeCompletionClient:
    return FakeCompletionClient(reply="🚗 Snygg Volvo till salu!")


@pytest.fixture
def factory(fake_client: FakeCompletionClient) -> RecordingFactory:
    return RecordingFactory(fake_client)


@pytest.fixture
def volvo() -> CarDetails:
    return CarDetails(
        brand="Volvo",
        model="XC60",
        year="2020",
        mileage="45000",
        price="299000",
        equipment="Navigation",
        condition="Mycket bra",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, openai_api_key="sk-server")  # type: ignore[call-arg]


@pytest.fixture
def client(factory: RecordingFactory, settings: Settings):
    app = create_app()
    app.dependency_overrides[get_client_factory] = lambda: factory
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
