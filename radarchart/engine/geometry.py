"""GeometryEngine — pure trigonometry for the radar layout.

Screen coordinate system (SVG/canvas):
- Origin at top-left, Y increases downward
- Spoke 0 points to 12 o'clock (angle -pi/2)
- Angles increase clockwise on screen

No validation happens here. Values are expected to be finite and
``max_value`` positive; both are guaranteed upstream.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from radarchart.engine.normalizer import MINIMUM_SPOKES
from radarchart.engine.types import ChartDimensions, LabelPosition, Point, SpokeLine, StaticPoint
from radarchart.models.validation import DataPoint
from radarchart.utils.math_helpers import clamp

# Space reserved around the chart for category labels.
PADDING = 60.0
GRID_LEVELS = 5
LABEL_RADIUS_OFFSET = 20.0
# Labels within this many px of the vertical axis are centered.
_LABEL_CENTER_BAND = 10.0

_START_ANGLE = -math.pi / 2


def compute_dimensions(
    width: float,
    height: float,
    spoke_count_hint: int,
    padding: float = PADDING,
    minimum_spokes: int = MINIMUM_SPOKES,
) -> ChartDimensions:
    spoke_count = max(minimum_spokes, int(spoke_count_hint))
    return ChartDimensions(
        center_x=width / 2,
        center_y=height / 2,
        radius=min(width, height) / 2 - padding,
        spoke_count=spoke_count,
        angle_step=2 * math.pi / spoke_count,
    )


def spoke_angles(dimensions: ChartDimensions) -> NDArray[np.float64]:
    """Angle of every spoke in radians, index 0 at 12 o'clock."""
    return np.arange(dimensions.spoke_count) * dimensions.angle_step + _START_ANGLE


def compute_grid_polygons(dimensions: ChartDimensions, levels: int = GRID_LEVELS) -> list[list[Point]]:
    """One vertex list per grid level, innermost (level 1) to outermost."""
    angles = spoke_angles(dimensions)
    cos = np.cos(angles)
    sin = np.sin(angles)

    polygons: list[list[Point]] = []
    for level in range(1, levels + 1):
        level_radius = dimensions.radius * level / levels
        xs = dimensions.center_x + level_radius * cos
        ys = dimensions.center_y + level_radius * sin
        polygons.append([Point(float(x), float(y)) for x, y in zip(xs, ys)])
    return polygons


def compute_spokes(dimensions: ChartDimensions) -> list[SpokeLine]:
    """Radial axis lines from the center to the outermost grid vertex."""
    angles = spoke_angles(dimensions)
    xs = dimensions.center_x + dimensions.radius * np.cos(angles)
    ys = dimensions.center_y + dimensions.radius * np.sin(angles)
    return [
        SpokeLine(dimensions.center_x, dimensions.center_y, float(x), float(y))
        for x, y in zip(xs, ys)
    ]


def compute_static_point(
    dimensions: ChartDimensions,
    value: float,
    max_value: float,
    index: int,
) -> StaticPoint:
    angle = index * dimensions.angle_step + _START_ANGLE
    clamped = clamp(value, 0.0, max_value)
    return StaticPoint(
        angle=angle,
        max_radius=dimensions.radius * clamped / max_value,
        cos=math.cos(angle),
        sin=math.sin(angle),
        center_x=dimensions.center_x,
        center_y=dimensions.center_y,
    )


def compute_static_points(
    dimensions: ChartDimensions,
    points: Sequence[DataPoint],
    max_value: float,
) -> list[StaticPoint]:
    """Vectorized ``compute_static_point`` over a whole data set."""
    if not points:
        return []
    indices = np.arange(len(points))
    angles = indices * dimensions.angle_step + _START_ANGLE
    values = np.clip(np.array([p.value for p in points], dtype=np.float64), 0.0, max_value)
    radii = dimensions.radius * values / max_value
    cos = np.cos(angles)
    sin = np.sin(angles)
    return [
        StaticPoint(
            angle=float(angles[i]),
            max_radius=float(radii[i]),
            cos=float(cos[i]),
            sin=float(sin[i]),
            center_x=dimensions.center_x,
            center_y=dimensions.center_y,
        )
        for i in indices
    ]


def compute_animated_point(static: StaticPoint, progress: float) -> Point:
    """Scale a static point by animation progress. No trig calls.

    Progress 0 collapses to the center, 1 reaches the full value radius.
    Values outside [0, 1] extrapolate linearly; clamping is the caller's job.
    """
    animated_radius = static.max_radius * progress
    return Point(
        static.center_x + animated_radius * static.cos,
        static.center_y + animated_radius * static.sin,
    )


def compute_animated_points(statics: Sequence[StaticPoint], progress: float) -> list[Point]:
    return [compute_animated_point(s, progress) for s in statics]


def compute_label_positions(
    dimensions: ChartDimensions,
    points: Sequence[DataPoint],
    offset: float = LABEL_RADIUS_OFFSET,
) -> list[LabelPosition]:
    """Category label anchors just outside the outer grid ring.

    The text anchor follows which side of the vertical axis the label is on.
    """
    label_radius = dimensions.radius + offset
    labels: list[LabelPosition] = []
    for index, point in enumerate(points):
        if not point.name:
            continue
        angle = index * dimensions.angle_step + _START_ANGLE
        x = dimensions.center_x + label_radius * math.cos(angle)
        y = dimensions.center_y + label_radius * math.sin(angle)

        anchor = "middle"
        if x < dimensions.center_x - _LABEL_CENTER_BAND:
            anchor = "end"
        elif x > dimensions.center_x + _LABEL_CENTER_BAND:
            anchor = "start"
        labels.append(LabelPosition(name=point.name, x=x, y=y, anchor=anchor))
    return labels
