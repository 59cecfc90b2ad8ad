"""Translate failures to HTTP responses.

Gateway results carry an :class:`ErrorKind`; each kind maps to a status code
and the ``{"error": "..."}`` envelope.  Exceptions that escape the gateways
(malformed bodies, bugs) are caught here so no request goes unanswered.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ad_gateway import texts
from ad_gateway.domain.entities import CompletionFailure, ErrorKind
from ad_gateway.interface.middleware import CORS_HEADERS

logger = logging.getLogger(__name__)

_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MISSING_CREDENTIAL: 400,
    ErrorKind.INVALID_CREDENTIAL: 401,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.UPSTREAM_ERROR: 500,
    ErrorKind.INTERNAL_ERROR: 500,
}

# Endpoints whose callers only ever see a single fallback message.
_FALLBACK_BY_PATH: dict[str, str] = {
    "/car-research": texts.CHAT_FALLBACK,
}


def error_json(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def status_for(kind: ErrorKind) -> int:
    return _KIND_STATUS.get(kind, 500)


def failure_response(failure: CompletionFailure) -> JSONResponse:
    return error_json(status_for(failure.kind), failure.message)


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Malformed request bodies ────────────────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        detail = "; ".join(messages)
        logger.warning("%s on %s: %s", ErrorKind.INTERNAL_ERROR.value, request.url.path, detail)
        return error_json(500, _FALLBACK_BY_PATH.get(request.url.path, detail))

    # ── Catch-all for unexpected errors ─────────────────────────────────
    # Runs outside CorsHeadersMiddleware, so the headers are added here.

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        message = _FALLBACK_BY_PATH.get(request.url.path, str(exc) or texts.UNKNOWN_ERROR)
        return error_json(500, message, headers=CORS_HEADERS)
