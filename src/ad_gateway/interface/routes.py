"""API routes — thin controllers that delegate to the gateways."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ad_gateway import texts
from ad_gateway.interface.dependencies import get_chat_gateway, get_completion_gateway
from ad_gateway.interface.error_handlers import error_json, failure_response
from ad_gateway.interface.schemas import (
    CarResearchRequest,
    CarResearchResponse,
    DefaultPromptResponse,
    ErrorResponse,
    GenerateAdRequest,
    GenerateAdResponse,
)
from ad_gateway.services.car_research import ChatGateway
from ad_gateway.services.generate_ad import CompletionGateway

router = APIRouter()


@router.post(
    "/generate-ad",
    response_model=GenerateAdResponse,
    responses={
        400: {"model": ErrorResponse, "description": "API key missing"},
        401: {"model": ErrorResponse, "description": "API key rejected by the provider"},
        429: {"model": ErrorResponse, "description": "Provider rate limit"},
        500: {"model": ErrorResponse, "description": "Provider or internal error"},
    },
)
async def generate_ad(
    body: GenerateAdRequest,
    gateway: CompletionGateway = Depends(get_completion_gateway),
) -> GenerateAdResponse | JSONResponse:
    """Generate Swedish ad copy for a car."""
    result = await gateway.generate_ad(body.to_domain())
    if result.failure is not None:
        return failure_response(result.failure)
    return GenerateAdResponse(generated_ad=result.text)


@router.get("/generate-ad/default-prompt", response_model=DefaultPromptResponse)
async def default_prompt() -> DefaultPromptResponse:
    """Return the instruction template used when a request supplies none."""
    return DefaultPromptResponse(system_prompt=texts.DEFAULT_SYSTEM_PROMPT)


@router.post(
    "/car-research",
    response_model=CarResearchResponse,
    responses={500: {"model": ErrorResponse, "description": "Any failure"}},
)
async def car_research(
    body: CarResearchRequest,
    gateway: ChatGateway = Depends(get_chat_gateway),
) -> CarResearchResponse | JSONResponse:
    """Answer the latest turn of a research conversation."""
    result = await gateway.chat(body.to_domain())
    if result.failure is not None:
        return error_json(500, result.failure.message)
    return CarResearchResponse(response=result.text)
