"""Generate-ad use case — the completion gateway behind ``POST /generate-ad``.

Validates the credential, renders the prompt, performs exactly one outbound
completion call and folds every outcome into a :class:`CompletionResult`.
The gateway keeps nothing between calls: key and template live only for the
duration of :meth:`CompletionGateway.generate_ad`.
"""

from __future__ import annotations

import logging

from ad_gateway import texts
from ad_gateway.domain.entities import CompletionResult, ErrorKind, GenerationRequest
from ad_gateway.domain.exceptions import GatewayError, MissingCredentialError
from ad_gateway.domain.ports.completion_client import CompletionClientFactory
from ad_gateway.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)


class CompletionGateway:
    """Turns a :class:`GenerationRequest` into generated ad copy.

    Parameters
    ----------
    client_factory:
        Builds a completion client bound to the caller's API key.
    default_system_prompt:
        Instruction template used when the request carries none.
    """

    def __init__(
        self,
        client_factory: CompletionClientFactory,
        default_system_prompt: str = texts.DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client_factory = client_factory
        self._default_system_prompt = default_system_prompt

    async def generate_ad(self, request: GenerationRequest) -> CompletionResult:
        """Generate an ad; never raises."""
        try:
            text = await self._generate(request)
        except GatewayError as exc:
            logger.warning("Ad generation failed (%s): %s", exc.kind.value, exc.message)
            return CompletionResult.failed(exc.kind, exc.message)
        except Exception as exc:
            logger.exception("Error in generate-ad")
            return CompletionResult.failed(
                ErrorKind.INTERNAL_ERROR, str(exc) or texts.UNKNOWN_ERROR
            )

        logger.info("Ad generated successfully")
        return CompletionResult.success(text)

    async def _generate(self, request: GenerationRequest) -> str:
        logger.info("Generating ad for: %s %s", request.car.brand, request.car.model)

        if not request.credential:
            raise MissingCredentialError()

        system_prompt = request.system_prompt
        if not system_prompt:
            system_prompt = self._default_system_prompt
        prompt = build_prompt(system_prompt, request.car)

        client = self._client_factory(request.credential)
        return await client.complete(prompt.as_messages())
