"""/api/shape — segment store, closure and centroid for the drawing surface."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from centroid_calculator.dependencies import get_session
from centroid_calculator.engine.session import ShapeSession
from centroid_calculator.models.requests import RectRequest, SegmentRequest
from centroid_calculator.models.responses import (
    CentroidResponse,
    LinesResponse,
    ShapeStateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shape")


@router.get("", response_model=ShapeStateResponse)
async def get_shape(session: ShapeSession = Depends(get_session)) -> ShapeStateResponse:
    return ShapeStateResponse(**session.state())


@router.get("/lines", response_model=LinesResponse)
async def get_lines(session: ShapeSession = Depends(get_session)) -> LinesResponse:
    return LinesResponse(lines=session.builder.get_lines())


@router.post("/lines", response_model=ShapeStateResponse)
async def add_line(
    req: SegmentRequest,
    session: ShapeSession = Depends(get_session),
) -> ShapeStateResponse:
    session.builder.add_line(req.x0, req.y0, req.x1, req.y1)
    logger.debug("Added line (%s, %s) -> (%s, %s)", req.x0, req.y0, req.x1, req.y1)
    return ShapeStateResponse(**session.state())


@router.post("/rect", response_model=ShapeStateResponse)
async def add_rect(
    req: RectRequest,
    session: ShapeSession = Depends(get_session),
) -> ShapeStateResponse:
    session.builder.add_rect(req.x0, req.y0, req.x1, req.y1)
    logger.debug("Added rect (%s, %s) / (%s, %s)", req.x0, req.y0, req.x1, req.y1)
    return ShapeStateResponse(**session.state())


@router.post("/lines/delete", response_model=ShapeStateResponse)
async def delete_line(
    req: SegmentRequest,
    session: ShapeSession = Depends(get_session),
) -> ShapeStateResponse:
    before = len(session.builder)
    session.builder.delete_line(req.x0, req.y0, req.x1, req.y1)
    if len(session.builder) == before:
        logger.debug("No line (%s, %s) -> (%s, %s) to delete", req.x0, req.y0, req.x1, req.y1)
    return ShapeStateResponse(**session.state())


@router.post("/clear", response_model=ShapeStateResponse)
async def clear(session: ShapeSession = Depends(get_session)) -> ShapeStateResponse:
    session.builder.clear()
    logger.debug("Cleared shape")
    return ShapeStateResponse(**session.state())


@router.get("/centroid", response_model=CentroidResponse)
async def centroid(session: ShapeSession = Depends(get_session)) -> CentroidResponse:
    return CentroidResponse(
        centroid=session.builder.calculate_centroid(),
        closed=session.builder.is_closed(),
    )
