"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SegmentRequest(BaseModel):
    x0: float = Field(..., description="Start x (world coordinates)")
    y0: float = Field(..., description="Start y (world coordinates)")
    x1: float = Field(..., description="End x (world coordinates)")
    y1: float = Field(..., description="End y (world coordinates)")


class RectRequest(BaseModel):
    x0: float = Field(..., description="First corner x")
    y0: float = Field(..., description="First corner y")
    x1: float = Field(..., description="Opposite corner x")
    y1: float = Field(..., description="Opposite corner y")


class IntersectionRequest(BaseModel):
    first: SegmentRequest
    second: SegmentRequest
