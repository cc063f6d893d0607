"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class RootResponse(BaseModel):
    """Service descriptor returned at the root path."""

    message: str
    version: str
    status: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    uptime: float


@router.get("/", response_model=RootResponse)
async def root(request: Request) -> RootResponse:
    """Describe the service."""
    settings = request.app.state.settings
    return RootResponse(message=settings.app_name, version=settings.app_version, status="online")


@router.get("/api/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running, with seconds since startup.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        uptime=round(time.monotonic() - request.app.state.started_at, 3),
    )
