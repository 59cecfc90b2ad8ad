"""Car-research use case — the chat gateway behind ``POST /car-research``.

The caller replays the whole conversation on every call.  Upstream failures
are not told apart here: invalid key, rate limit and server errors all
surface as :attr:`ErrorKind.UPSTREAM_ERROR`.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ad_gateway import texts
from ad_gateway.domain.entities import ChatMessage, CompletionResult, ErrorKind
from ad_gateway.domain.exceptions import (
    GatewayError,
    InvalidCredentialError,
    MissingCredentialError,
    RateLimitedError,
)
from ad_gateway.domain.ports.completion_client import CompletionClientFactory

logger = logging.getLogger(__name__)

_COLLAPSED_TO_UPSTREAM = (InvalidCredentialError, RateLimitedError)


class ChatGateway:
    """Forwards a conversation to the completion provider."""

    def __init__(self, client_factory: CompletionClientFactory, api_key: str | None) -> None:
        self._client_factory = client_factory
        self._api_key = api_key or ""

    async def chat(self, history: Sequence[ChatMessage]) -> CompletionResult:
        """Return the assistant reply to *history*; never raises."""
        try:
            if not self._api_key:
                raise MissingCredentialError()
            client = self._client_factory(self._api_key)
            text = await client.complete(list(history))
        except _COLLAPSED_TO_UPSTREAM as exc:
            logger.warning("Car research failed (%s): %s", exc.kind.value, exc.message)
            return CompletionResult.failed(ErrorKind.UPSTREAM_ERROR, texts.CHAT_FALLBACK)
        except GatewayError as exc:
            logger.warning("Car research failed (%s): %s", exc.kind.value, exc.message)
            return CompletionResult.failed(exc.kind, texts.CHAT_FALLBACK)
        except Exception:
            logger.exception("Error in car-research")
            return CompletionResult.failed(ErrorKind.INTERNAL_ERROR, texts.CHAT_FALLBACK)

        return CompletionResult.success(text)
