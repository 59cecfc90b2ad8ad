"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx
from fastapi import Depends

from ad_gateway.domain.ports.completion_client import CompletionClient, CompletionClientFactory
from ad_gateway.infrastructure.config import Settings, get_settings
from ad_gateway.infrastructure.openai_adapter import OpenAIAdapter
from ad_gateway.services.car_research import ChatGateway
from ad_gateway.services.generate_ad import CompletionGateway

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds)
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_client_factory(
    settings: Settings = Depends(get_settings),
) -> CompletionClientFactory:
    """Return a factory building per-key OpenAI adapters on the shared HTTP client."""
    assert _http_client is not None, "startup() was not called"
    http_client = _http_client

    def factory(api_key: str) -> CompletionClient:
        return OpenAIAdapter(
            api_key=api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            timeout=settings.request_timeout_seconds,
            http_client=http_client,
        )

    return factory


def get_completion_gateway(
    client_factory: CompletionClientFactory = Depends(get_client_factory),
) -> CompletionGateway:
    return CompletionGateway(client_factory=client_factory)


def get_chat_gateway(
    client_factory: CompletionClientFactory = Depends(get_client_factory),
    settings: Settings = Depends(get_settings),
) -> ChatGateway:
    api_key = settings.openai_api_key.get_secret_value() if settings.openai_api_key else None
    return ChatGateway(client_factory=client_factory, api_key=api_key)
