"""POST /api/geometry/intersection — stateless segment intersection."""

from __future__ import annotations

from fastapi import APIRouter

from centroid_calculator.engine.shape_builder import InvalidCoordinate, validate_coordinates
from centroid_calculator.models.requests import IntersectionRequest, SegmentRequest
from centroid_calculator.models.responses import IntersectionResponse
from centroid_calculator.utils.geometry import segment_intersection

router = APIRouter(prefix="/geometry")


def _check(label: str, seg: SegmentRequest) -> None:
    try:
        validate_coordinates(seg.x0, seg.y0, seg.x1, seg.y1)
    except InvalidCoordinate as exc:
        raise InvalidCoordinate(f"{label}.{exc.argument}", exc.value) from exc


@router.post("/intersection", response_model=IntersectionResponse)
async def intersection(req: IntersectionRequest) -> IntersectionResponse:
    a, b = req.first, req.second
    _check("first", a)
    _check("second", b)
    hit = segment_intersection((a.x0, a.y0), (a.x1, a.y1), (b.x0, b.y0), (b.x1, b.y1))
    return IntersectionResponse(kind=hit.kind, point=hit.point)
