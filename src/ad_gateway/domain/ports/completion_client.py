"""Port: completion client — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from ad_gateway.domain.entities import ChatMessage


class CompletionClient(Protocol):
    """Abstract contract for a chat-completion provider."""

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        """Send the message list and return the first completion's text.

        Raises a :class:`~ad_gateway.domain.exceptions.GatewayError` subclass
        on failure.
        """
        ...


# Builds a client bound to one caller's API key.
CompletionClientFactory = Callable[[str], CompletionClient]
