"""ShapeBuilder: the ordered segment store behind the drawing surface.

Segments are kept in insertion order. Closure and centroid are derived on
demand from that order, so the builder holds no cached geometry:

    builder = ShapeBuilder()
    builder.add_rect(0, 0, 1, 1)
    builder.is_closed()           # True
    builder.calculate_centroid()  # (0.5, 0.5)
"""

from __future__ import annotations

from centroid_calculator.engine.segment import Point, Segment, vertex_walk
from centroid_calculator.utils.geometry import polygon_centroid
from centroid_calculator.utils.math_helpers import is_finite_number, points_close

DEFAULT_EPSILON = 1e-9

_ARG_NAMES = ("x0", "y0", "x1", "y1")


class InvalidCoordinate(ValueError):
    """A coordinate passed to a mutating call was not a finite number."""

    def __init__(self, argument: str, value: object) -> None:
        super().__init__(f"{argument} must be a finite number, got {value!r}")
        self.argument = argument
        self.value = value


def validate_coordinates(x0: float, y0: float, x1: float, y1: float) -> None:
    for name, value in zip(_ARG_NAMES, (x0, y0, x1, y1)):
        if not is_finite_number(value):
            raise InvalidCoordinate(name, value)


class ShapeBuilder:
    """Ordered, undirected line segments plus the queries the canvas needs."""

    def __init__(self, epsilon: float = DEFAULT_EPSILON) -> None:
        if not is_finite_number(epsilon) or epsilon < 0:
            raise ValueError(f"epsilon must be a finite non-negative number, got {epsilon!r}")
        self._epsilon = float(epsilon)
        self._segments: list[Segment] = []

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"ShapeBuilder(segments={len(self._segments)}, epsilon={self._epsilon!r})"

    # --- Segment store ---

    def add_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        validate_coordinates(x0, y0, x1, y1)
        self._segments.append(Segment((float(x0), float(y0)), (float(x1), float(y1))))

    def get_lines(self) -> list[tuple[Point, Point]]:
        """Snapshot of the stored segments as ((x0, y0), (x1, y1)) tuples."""
        return [seg.as_pair() for seg in self._segments]

    def clear(self) -> None:
        self._segments.clear()

    # --- Rectangle decomposition ---

    def add_rect(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Add the rectangle with opposite corners (x0, y0) and (x1, y1).

        Edges go A-B, B-C, C-D, D-A with A=(x0, y0), B=(x1, y0), C=(x1, y1),
        D=(x0, y1), so a rectangle on an empty builder is closed. Zero-width
        or zero-height rectangles still add four (partly zero-length) edges.
        """
        validate_coordinates(x0, y0, x1, y1)
        self.add_line(x0, y0, x1, y0)
        self.add_line(x1, y0, x1, y1)
        self.add_line(x1, y1, x0, y1)
        self.add_line(x0, y1, x0, y0)

    # --- Deletion ---

    def delete_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Remove the first segment joining the two points, in either direction.

        Missing segments are ignored.
        """
        p = (x0, y0)
        q = (x1, y1)
        for i, seg in enumerate(self._segments):
            if seg.matches(p, q, self._epsilon):
                del self._segments[i]
                return

    # --- Closure ---

    def is_closed(self) -> bool:
        """First segment's start meets last segment's end, with 3+ segments.

        Only the first/last pair is compared; the segments in between are not
        checked for connectivity. See is_connected() for the strict check.
        """
        if len(self._segments) < 3:
            return False
        return points_close(self._segments[0].start, self._segments[-1].end, self._epsilon)

    def is_connected(self) -> bool:
        """is_closed() plus every segment's end meeting the next segment's start."""
        if not self.is_closed():
            return False
        return all(
            points_close(prev.end, nxt.start, self._epsilon)
            for prev, nxt in zip(self._segments, self._segments[1:])
        )

    # --- Centroid ---

    def calculate_centroid(self) -> Point | None:
        """Area centroid of the vertex walk, or its mean when the area is ~0.

        The walk is every segment's start then end, in insertion order.
        Returns None when there are no segments.
        """
        return polygon_centroid(vertex_walk(self._segments), self._epsilon)
