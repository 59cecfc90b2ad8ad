"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from ad_gateway.interface.dependencies import shutdown, startup
from ad_gateway.interface.error_handlers import register_error_handlers
from ad_gateway.interface.middleware import CorsHeadersMiddleware
from ad_gateway.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Bilannons Gateway",
        version="1.0.0",
        description=(
            "Generates Swedish car ads and answers car-research questions "
            "through an OpenAI-compatible chat-completion API."
        ),
        lifespan=_lifespan,
    )

    app.add_middleware(CorsHeadersMiddleware)
    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
