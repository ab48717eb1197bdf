"""Ogiri API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery) under settings.api_prefix
    - Global error handlers map every failure to {"error": message}
    - The store is owned by the app (app.state.store): injected by the caller of
      create_app, or built once in the lifespan from settings
    - Static files mounted AFTER API routes so the API takes precedence

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app factory: tests build isolated apps with their own store;
      the module-level `app` is what uvicorn serves
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from ogiri.api.cors import install_cors
from ogiri.api.error_handlers import register_error_handlers
from ogiri.api.routes import answers, health, themes
from ogiri.config import API_VERSION, Settings, get_settings
from ogiri.core.repository_protocols import DataStore
from ogiri.infrastructure.observability import setup_logging
from ogiri.infrastructure.store_factory import build_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: DataStore | None = None,
) -> FastAPI:
    """Build the API. `store` skips building one from settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if app.state.store is None:
            app.state.store = build_store(settings)
        _log_banner(settings)
        yield
        logger.info("Ogiri API shutting down")

    app = FastAPI(title="Ogiri API", version=API_VERSION, lifespan=lifespan)
    app.state.store = store

    install_cors(app, settings.cors_origins)
    register_error_handlers(app)

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(themes.router, prefix=settings.api_prefix)
    app.include_router(answers.router, prefix=settings.api_prefix)

    # html=True serves index.html for directory paths
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return app


def _log_banner(settings: Settings) -> None:
    host = "localhost" if settings.host == "0.0.0.0" else settings.host
    base = f"http://{host}:{settings.port}"
    logger.info(
        f"Ogiri API started on port {settings.port}",
        extra={"backend": settings.store_backend.value},
    )
    logger.info(f"API: {base}{settings.api_prefix}/themes")
    if os.path.isdir(settings.static_dir):
        logger.info(f"Static files: {base}/ (from {settings.static_dir})")


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
