"""Segment value type stored by the ShapeBuilder."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from centroid_calculator.utils.math_helpers import points_close

Point = tuple[float, float]


@dataclass(frozen=True)
class Segment:
    """A line between two points. Orientation is kept as supplied."""

    start: Point
    end: Point

    def as_pair(self) -> tuple[Point, Point]:
        return (self.start, self.end)

    def matches(self, p: Point, q: Point, eps: float) -> bool:
        """True if {p, q} equals {start, end} in either orientation."""
        if points_close(self.start, p, eps) and points_close(self.end, q, eps):
            return True
        return points_close(self.start, q, eps) and points_close(self.end, p, eps)


def vertex_walk(segments: list[Segment]) -> NDArray[np.float64]:
    """Nx2 array of segment endpoints in insertion order: start, end, start, end, ..."""
    if not segments:
        return np.empty((0, 2))
    return np.array([pt for seg in segments for pt in seg.as_pair()], dtype=np.float64)
