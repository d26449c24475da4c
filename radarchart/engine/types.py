"""Geometry value objects. Immutable; recomputed whenever inputs change."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartDimensions:
    center_x: float
    center_y: float
    # Half the smaller side minus label padding
    radius: float
    # Always >= MINIMUM_SPOKES
    spoke_count: int
    # 2*pi / spoke_count, radians
    angle_step: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class SpokeLine:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class StaticPoint:
    """Per-category trig, computed once per data/dimension change.

    Animation only scales ``max_radius``; it never recomputes cos/sin.
    """

    angle: float
    max_radius: float
    cos: float
    sin: float
    center_x: float
    center_y: float


@dataclass(frozen=True)
class LabelPosition:
    name: str
    x: float
    y: float
    anchor: str = "middle"  # start, middle, end
