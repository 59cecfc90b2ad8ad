"""OpenAI adapter — implements the CompletionClient port."""

from __future__ import annotations

import logging
from typing import Sequence

import httpx
from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
    AuthenticationError,
    RateLimitError,
)

from ad_gateway.domain.entities import ChatMessage
from ad_gateway.domain.exceptions import (
    InternalGatewayError,
    InvalidCredentialError,
    RateLimitedError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class OpenAIAdapter:
    """Concrete ``CompletionClient`` backed by the OpenAI chat-completions API.

    One instance is bound to one API key.  Retries are disabled: a failed
    call is reported to the caller, who decides whether to resubmit.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        *,
        base_url: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        """Send the messages and return the first completion's text ("" if none)."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[m.to_dict() for m in messages],  # type: ignore[misc]
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
            message = response.choices[0].message if response.choices else None
            return (message.content if message else None) or ""

        except AuthenticationError as exc:
            logger.error("OpenAI API error: %s %s", exc.status_code, exc.message)
            raise InvalidCredentialError() from exc

        except RateLimitError as exc:
            logger.error("OpenAI API error: %s %s", exc.status_code, exc.message)
            raise RateLimitedError() from exc

        except APIStatusError as exc:
            logger.error("OpenAI API error: %s %s", exc.status_code, exc.message)
            raise UpstreamError() from exc

        except APITimeoutError as exc:
            raise InternalGatewayError(f"Tidsgränsen för AI-tjänsten överskreds: {exc}") from exc

        except APIConnectionError as exc:
            raise InternalGatewayError(f"Kunde inte nå AI-tjänsten: {exc}") from exc

        except Exception as exc:
            raise InternalGatewayError(str(exc)) from exc
