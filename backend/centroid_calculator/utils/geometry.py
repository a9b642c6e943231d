"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import LineString, Point
from shapely.geometry.base import BaseGeometry


def cross_terms(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """x_i * y_{i+1} - x_{i+1} * y_i for each vertex, wrapping last -> first."""
    x = points[:, 0]
    y = points[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return x * y_next - x_next * y


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over a closed ring. Positive = CCW, Negative = CW."""
    if len(points) == 0:
        return 0.0
    return float(0.5 * np.sum(cross_terms(points)))


def mean_point(points: NDArray[np.float64]) -> tuple[float, float]:
    """Unweighted mean of a point set."""
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def _power_of_two_scale(value: float) -> float:
    """Largest power of two not above ``value``; dividing by it is exact."""
    _, exponent = math.frexp(value)
    return math.ldexp(1.0, exponent - 1)


def polygon_centroid(points: NDArray[np.float64], eps: float) -> tuple[float, float] | None:
    """Area centroid of the ring through ``points``.

    Falls back to the mean of the points when the enclosed area is within
    ``eps`` of zero (collinear points, a lone segment, an open polyline that
    folds back on itself). Returns None for fewer than 2 points.

    The sums run on a copy shifted to the first vertex and scaled by powers
    of two, so products of large coordinates cannot overflow.
    """
    if len(points) < 2:
        return None

    peak = float(np.max(np.abs(points)))
    if peak == 0.0:
        return (0.0, 0.0)
    magnitude = _power_of_two_scale(peak)
    scaled = points / magnitude
    origin = scaled[0]
    local = scaled - origin
    peak = float(np.max(np.abs(local)))
    if peak == 0.0:
        return (float(points[0, 0]), float(points[0, 1]))
    spread = _power_of_two_scale(peak)
    local = local / spread

    def restore(cx: float, cy: float) -> tuple[float, float]:
        return (
            float((cx * spread + origin[0]) * magnitude),
            float((cy * spread + origin[1]) * magnitude),
        )

    area = signed_area(local)
    extent = magnitude * spread
    if area == 0.0 or abs(area) * extent * extent <= eps:
        return restore(*mean_point(local))

    cross = cross_terms(local)
    x = local[:, 0]
    y = local[:, 1]
    factor = 1.0 / (6.0 * area)
    cx = factor * float(np.sum((x + np.roll(x, -1)) * cross))
    cy = factor * float(np.sum((y + np.roll(y, -1)) * cross))
    return restore(cx, cy)


@dataclass(frozen=True)
class Intersection:
    """Result of intersecting two segments."""

    kind: Literal["none", "point", "overlap"]
    point: tuple[float, float] | None = None


def _segment_geometry(p: tuple[float, float], q: tuple[float, float]) -> BaseGeometry:
    # Zero-length segments are points; shapely treats a two-point line with
    # equal ends as empty for intersection.
    if p == q:
        return Point(p)
    return LineString([p, q])


def segment_intersection(
    a0: tuple[float, float],
    a1: tuple[float, float],
    b0: tuple[float, float],
    b1: tuple[float, float],
) -> Intersection:
    """Intersect segment a0-a1 with segment b0-b1.

    A single shared point (crossing or touching) gives kind="point";
    collinear segments sharing a stretch give kind="overlap"; parallel or
    disjoint segments give kind="none". Zero-length segments behave as points.
    """
    hit = _segment_geometry(a0, a1).intersection(_segment_geometry(b0, b1))
    if hit.is_empty:
        return Intersection(kind="none")
    if hit.geom_type == "Point":
        return Intersection(kind="point", point=(float(hit.x), float(hit.y)))
    return Intersection(kind="overlap")
