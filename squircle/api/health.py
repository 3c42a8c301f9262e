"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from squircle import __version__
from squircle.config import Settings
from squircle.dependencies import get_settings
from squircle.engine.generator import get_accuracy
from squircle.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        environment=settings.squircle_env,
        accuracy=get_accuracy(),
    )
