"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from warplanner.config import Settings
from warplanner.dependencies import get_settings
from warplanner.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", rounds=settings.rounds)
