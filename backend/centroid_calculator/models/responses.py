"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Coordinate = tuple[float, float]


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    segment_count: int = 0


class LinesResponse(BaseModel):
    lines: list[tuple[Coordinate, Coordinate]] = Field(default_factory=list)


class CentroidResponse(BaseModel):
    centroid: Coordinate | None = None
    closed: bool = False


class ShapeStateResponse(BaseModel):
    lines: list[tuple[Coordinate, Coordinate]] = Field(default_factory=list)
    closed: bool = False
    connected: bool = False
    centroid: Coordinate | None = None


class IntersectionResponse(BaseModel):
    kind: Literal["none", "point", "overlap"]
    point: Coordinate | None = None
