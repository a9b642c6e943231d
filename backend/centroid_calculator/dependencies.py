"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from centroid_calculator.config import settings
from centroid_calculator.engine.session import ShapeSession


def get_settings():
    return settings


def get_session(request: Request) -> ShapeSession:
    return request.app.state.shape_session
