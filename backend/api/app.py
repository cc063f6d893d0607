"""
FastAPI application factory.

Creates and configures the FastAPI application instance from an
explicit Settings object and service container.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.logging import setup_logging

from .dependencies import ServiceContainer
from .error_handlers import register_error_handlers
from .middleware.rate_limit import FixedWindowLimiter, RateLimitMiddleware
from .routes import health
from modules.auth.routes import router as auth_router
from modules.catalog.routes import router as catalog_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Refuses to start when the store is required but not configured.
    """
    # Startup
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    app.state.container.verify()
    logger.info("Starting %s %s on %s:%s", settings.app_name, settings.app_version, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration (defaults to the cached environment settings)
        container: Service wiring (defaults to Supabase-backed services)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    container = container or ServiceContainer(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Login, session validation and read-only listings backed by Supabase",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = container
    app.state.started_at = time.monotonic()

    if settings.rate_limit_enabled:
        app.state.rate_limiter = FixedWindowLimiter(
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window,
        )
        app.add_middleware(RateLimitMiddleware, limiter=app.state.rate_limiter)

    # Configure CORS (outermost, so 429 responses carry CORS headers too)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(catalog_router, prefix="/api", tags=["catalog"])

    return app


# Application instance for uvicorn
app = create_app()
