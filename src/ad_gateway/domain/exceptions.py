"""Domain exception hierarchy.

Each exception carries the :class:`ErrorKind` it reports.  The adapter raises
these; the gateway services catch them and return a failed
:class:`~ad_gateway.domain.entities.CompletionResult`.
"""

from __future__ import annotations

from ad_gateway import texts
from ad_gateway.domain.entities import ErrorKind


class GatewayError(Exception):
    """Base exception for the entire application."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR
    default_message: str = texts.UNKNOWN_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


# ── Input validation ────────────────────────────────────────────────────────


class MissingCredentialError(GatewayError):
    """No API key was supplied; nothing was sent upstream."""

    kind = ErrorKind.MISSING_CREDENTIAL
    default_message = texts.MISSING_API_KEY


# ── Completion provider errors ──────────────────────────────────────────────


class InvalidCredentialError(GatewayError):
    """The provider rejected the API key (401)."""

    kind = ErrorKind.INVALID_CREDENTIAL
    default_message = texts.INVALID_API_KEY


class RateLimitedError(GatewayError):
    """The provider throttled the request (429)."""

    kind = ErrorKind.RATE_LIMITED
    default_message = texts.RATE_LIMITED


class UpstreamError(GatewayError):
    """Any other non-success status from the provider."""

    kind = ErrorKind.UPSTREAM_ERROR
    default_message = texts.UPSTREAM_ERROR


# ── Transport / processing errors ───────────────────────────────────────────


class InternalGatewayError(GatewayError):
    """Provider unreachable, timed out, or returned an unreadable body."""

    kind = ErrorKind.INTERNAL_ERROR
