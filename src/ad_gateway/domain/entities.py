"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorKind(str, Enum):
    """Stable failure categories surfaced to callers."""

    MISSING_CREDENTIAL = "MissingCredential"
    INVALID_CREDENTIAL = "InvalidCredential"
    RATE_LIMITED = "RateLimited"
    UPSTREAM_ERROR = "UpstreamError"
    INTERNAL_ERROR = "InternalError"


class Role(str, Enum):
    """Speaker of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True, slots=True)
class CarDetails:
    """Vehicle fields entered in the ad form. Absent values are ``""``."""

    brand: str = ""
    model: str = ""
    year: str = ""
    mileage: str = ""
    price: str = ""
    equipment: str = ""
    condition: str = ""


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """Everything needed to produce one ad."""

    car: CarDetails
    credential: str = field(default="", repr=False)
    system_prompt: str = ""


@dataclass(frozen=True, slots=True)
class ChatMessage:
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True, slots=True)
class RenderedPrompt:
    """System template plus the narrative rendered from :class:`CarDetails`."""

    system: str
    user: str

    def as_messages(self) -> list[ChatMessage]:
        return [
            ChatMessage(role=Role.SYSTEM, content=self.system),
            ChatMessage(role=Role.USER, content=self.user),
        ]


@dataclass(frozen=True, slots=True)
class CompletionFailure:
    kind: ErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class CompletionResult:
    """Outcome of one gateway call: generated text or a failure descriptor."""

    text: str = ""
    failure: CompletionFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> CompletionResult:
        return cls(text=text)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> CompletionResult:
        return cls(failure=CompletionFailure(kind=kind, message=message))
