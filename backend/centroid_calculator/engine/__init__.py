"""Centroid calculator shape-authoring engine."""

from centroid_calculator.engine.segment import Point, Segment
from centroid_calculator.engine.shape_builder import InvalidCoordinate, ShapeBuilder
from centroid_calculator.engine.session import ShapeSession

__all__ = [
    "Point",
    "Segment",
    "InvalidCoordinate",
    "ShapeBuilder",
    "ShapeSession",
]
