"""Rosati Render Relay - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RelayError -> {"error": ...} JSON responses
    - CORS configured from settings (default: any origin)
    - Settings, bearer gate and vendor backend fixed on app.state at construction

Design Decisions:
    - create_app() factory: tests inject Settings and a fake backend instead of
      patching module globals
    - Lifespan over @app.on_event for logging setup and the startup message
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rosati_render.api.error_handlers import register_error_handlers
from rosati_render.api.routes import health, render, tidy
from rosati_render.config import Settings, get_settings
from rosati_render.core.bearer_gate import BearerConfig, BearerGate
from rosati_render.core.relay_protocols import RelayBackend
from rosati_render.infrastructure.observability import setup_logging
from rosati_render.infrastructure.relay_backend import build_relay_backend

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if settings.uses_dev_token:
        logger.warning(
            "BEARER_TOKEN not set, accepting the development token; "
            "set BEARER_TOKEN before exposing this service",
        )
    logger.info(f"rosati-render listening on :{settings.port}")
    yield
    logger.info("rosati-render shutting down")


def create_app(
    settings: Settings | None = None, backend: RelayBackend | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Rosati Render Relay", version="1.0.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.bearer_gate = BearerGate(BearerConfig(settings.bearer_token))
    app.state.relay_backend = backend or build_relay_backend(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(tidy.router)
    app.include_router(render.router)

    register_error_handlers(app)
    return app


app = create_app()


def main():
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
