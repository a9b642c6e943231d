"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from centroid_calculator.config import Settings
from centroid_calculator.dependencies import get_session, get_settings
from centroid_calculator.engine.session import ShapeSession
from centroid_calculator.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    session: ShapeSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        env=settings.centroid_env,
        segment_count=len(session.builder),
    )
