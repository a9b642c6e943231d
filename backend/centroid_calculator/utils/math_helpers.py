"""Math helpers for finiteness checks and tolerant comparison. No engine imports."""

from __future__ import annotations

import math
import numbers


def is_finite_number(value: object) -> bool:
    """True for real, finite numbers (numpy scalars included). Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def approx_equal(a: float, b: float, eps: float) -> bool:
    return abs(a - b) <= eps


def points_close(
    p: tuple[float, float],
    q: tuple[float, float],
    eps: float,
) -> bool:
    """Per-axis comparison: |dx| <= eps and |dy| <= eps."""
    return approx_equal(p[0], q[0], eps) and approx_equal(p[1], q[1], eps)
