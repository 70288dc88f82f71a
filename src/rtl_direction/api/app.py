"""FastAPI application factory."""
from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ..config import Settings
from ..utils.logging import setup_logging
from .middleware import RequestLoggingMiddleware
from .routes import direction, health


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    setup_logging(settings.log_level)

    app = FastAPI(
        title="RTL Direction API",
        description="Text direction lookup for locale and language codes",
        version="0.1.0",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Store settings in app state
    app.state.settings = settings

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(direction.router, tags=["direction"])

    return app
