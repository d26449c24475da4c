"""PathBuilder — ordered points to SVG path data."""

from __future__ import annotations

from collections.abc import Sequence

from radarchart.engine.types import Point

# Fraction of each edge used to place the cubic control points.
CONTROL_POINT_DISTANCE = 0.15


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def build_smooth_closed_path(
    points: Sequence[Point],
    control_point_distance: float = CONTROL_POINT_DISTANCE,
) -> str:
    """Build one closed curve through every point, in order.

    Each edge (current -> next, wrapping back to the first point) becomes a
    cubic bezier with control points pulled ``control_point_distance`` of the
    edge in from each end. Returns ``""`` for no points.
    """
    if not points:
        return ""

    first = points[0]
    parts = [f"M {_fmt(first.x)} {_fmt(first.y)}"]
    n = len(points)
    for i in range(n):
        current = points[i]
        nxt = points[(i + 1) % n]
        dx = nxt.x - current.x
        dy = nxt.y - current.y
        cp1x = current.x + dx * control_point_distance
        cp1y = current.y + dy * control_point_distance
        cp2x = nxt.x - dx * control_point_distance
        cp2y = nxt.y - dy * control_point_distance
        parts.append(
            f"C {_fmt(cp1x)} {_fmt(cp1y)}, {_fmt(cp2x)} {_fmt(cp2y)}, {_fmt(nxt.x)} {_fmt(nxt.y)}"
        )
    parts.append("Z")
    return " ".join(parts)


def format_polygon_points(vertices: Sequence[Point]) -> str:
    """SVG ``points`` attribute: ``"x0,y0 x1,y1 ..."``."""
    return " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in vertices)
