"""Pydantic request / response DTOs for the API boundary.

Field names on the wire are camelCase to match the front-end; the models
use snake_case with aliases.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ad_gateway.domain.entities import CarDetails, ChatMessage, GenerationRequest, Role


def _as_text(v: Any) -> Any:
    """Treat ``null`` as empty and accept bare numbers (``"year": 2020``)."""
    if v is None:
        return ""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class FormData(BaseModel):
    """Vehicle fields of the ad form; everything but brand/model is optional."""

    model_config = ConfigDict(extra="ignore")

    brand: str = ""
    model: str = ""
    year: str = ""
    mileage: str = ""
    price: str = ""
    equipment: str = ""
    condition: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _normalise(cls, v: Any) -> Any:
        return _as_text(v)

    def to_domain(self) -> CarDetails:
        return CarDetails(**self.model_dump())


class GenerateAdRequest(BaseModel):
    """Request body for ``POST /generate-ad``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    form_data: FormData = Field(alias="formData")
    api_key: str = Field(default="", alias="apiKey", repr=False)
    system_prompt: str = Field(default="", alias="systemPrompt")

    @field_validator("api_key", "system_prompt", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_domain(self) -> GenerationRequest:
        return GenerationRequest(
            car=self.form_data.to_domain(),
            credential=self.api_key,
            system_prompt=self.system_prompt,
        )


class GenerateAdResponse(BaseModel):
    """Successful response from ``POST /generate-ad``."""

    model_config = ConfigDict(populate_by_name=True)

    generated_ad: str = Field(alias="generatedAd")


class DefaultPromptResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    system_prompt: str = Field(alias="systemPrompt")


class MessageIn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

    def to_domain(self) -> ChatMessage:
        return ChatMessage(role=Role(self.role), content=self.content)


class CarResearchRequest(BaseModel):
    """Request body for ``POST /car-research``: the full conversation so far."""

    messages: list[MessageIn]

    def to_domain(self) -> list[ChatMessage]:
        return [m.to_domain() for m in self.messages]


class CarResearchResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    """Error envelope returned on all failure paths."""

    error: str
