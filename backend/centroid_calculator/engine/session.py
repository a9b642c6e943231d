"""ShapeSession: the drawing surface's handle on its ShapeBuilder.

The web app owns exactly one session on ``app.state``; handlers receive it
through a dependency rather than a module-level global.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from centroid_calculator.engine.shape_builder import DEFAULT_EPSILON, ShapeBuilder


@dataclass
class ShapeSession:
    """Holds the builder for one drawing surface."""

    epsilon: float = DEFAULT_EPSILON
    builder: ShapeBuilder = field(init=False)

    def __post_init__(self) -> None:
        self.builder = ShapeBuilder(epsilon=self.epsilon)

    def state(self) -> dict[str, Any]:
        """Everything the canvas redraws from after a mutation."""
        return {
            "lines": self.builder.get_lines(),
            "closed": self.builder.is_closed(),
            "connected": self.builder.is_connected(),
            "centroid": self.builder.calculate_centroid(),
        }
