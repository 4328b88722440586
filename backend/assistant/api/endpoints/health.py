"""
Health check endpoints.
Simple endpoints for monitoring application health and status.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from assistant.config.settings import Settings, get_settings

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class DetailedHealthResponse(BaseModel):
    """Detailed health check response model."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    default_model: str
    api_key_configured: bool


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """Basic liveness check."""
    return "AI Assistant Service is running"


@router.get("/health/detailed", response_model=DetailedHealthResponse)
async def detailed_health_check(settings: Settings = Depends(get_settings)):
    """Detailed health check with configuration status."""
    return DetailedHealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        version=VERSION,
        environment=settings.environment,
        default_model=settings.gemini_model,
        api_key_configured=bool(settings.gemini_api_key),
    )
