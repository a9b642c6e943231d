"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from centroid_calculator.engine.shape_builder import ShapeBuilder
from centroid_calculator.main import create_app


# Segment sequences as (x0, y0, x1, y1), in drawing order

TRIANGLE = [
    (0.0, 0.0, 1.0, 0.0),
    (1.0, 0.0, 0.5, 1.0),
    (0.5, 1.0, 0.0, 0.0),
]

UNIT_SQUARE = [
    (0.0, 0.0, 0.0, 1.0),
    (0.0, 1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0, 0.0),
    (1.0, 0.0, 0.0, 0.0),
]

SQUARE_3X3 = [
    (0.0, 0.0, 3.0, 0.0),
    (3.0, 0.0, 3.0, 3.0),
    (3.0, 3.0, 0.0, 3.0),
    (0.0, 3.0, 0.0, 0.0),
]

# Ends meet the start but the middle segments are disjoint
LOOSE_LOOP = [
    (0.0, 0.0, 4.0, 0.0),
    (10.0, 10.0, 12.0, 10.0),
    (4.0, 4.0, 0.0, 0.0),
]


def build(segments: list[tuple[float, float, float, float]], **kwargs) -> ShapeBuilder:
    builder = ShapeBuilder(**kwargs)
    for seg in segments:
        builder.add_line(*seg)
    return builder


@pytest.fixture
def builder() -> ShapeBuilder:
    return ShapeBuilder()


@pytest.fixture
def triangle() -> ShapeBuilder:
    return build(TRIANGLE)


@pytest.fixture
def unit_square() -> ShapeBuilder:
    return build(UNIT_SQUARE)


@pytest.fixture
def client() -> TestClient:
    """Fresh app per test so the owned session starts empty."""
    return TestClient(create_app())
