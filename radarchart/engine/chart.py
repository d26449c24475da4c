"""RadarChart — wires validation output through the geometry engine.

Everything that depends only on data and dimensions is computed once in the
constructor. ``tick(progress)`` is the per-refresh entry point and does
O(spoke_count) arithmetic with no trig.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator, Sequence
from functools import lru_cache
from typing import Any, Protocol

from radarchart.config import ChartSettings, get_settings
from radarchart.engine.animation import AnimationClock
from radarchart.engine.diagnostics import format_validation_warnings
from radarchart.engine.geometry import (
    compute_animated_points,
    compute_dimensions,
    compute_grid_polygons,
    compute_label_positions,
    compute_spokes,
    compute_static_points,
)
from radarchart.engine.normalizer import normalize
from radarchart.engine.path_builder import build_smooth_closed_path, format_polygon_points
from radarchart.engine.types import ChartDimensions, Point
from radarchart.engine.validator import validate
from radarchart.models.frame import ChartFrame, DimensionsOut, LabelOut, PointOut, SpokeOut
from radarchart.models.validation import ValidationResult

logger = logging.getLogger(__name__)


class ChartRenderer(Protocol):
    """Rendering surface (SVG, canvas, ...). Lives outside this package."""

    def render(self, frame: ChartFrame) -> None: ...


@lru_cache(maxsize=64)
def cached_dimensions(
    width: float,
    height: float,
    spoke_count: int,
    padding: float,
    minimum_spokes: int,
) -> ChartDimensions:
    return compute_dimensions(width, height, spoke_count, padding, minimum_spokes)


def _point_out(p: Point) -> PointOut:
    return PointOut(x=p.x, y=p.y)


class RadarChart:
    """One chart instance for a validated data set."""

    def __init__(self, result: ValidationResult, settings: ChartSettings | None = None) -> None:
        self.settings = settings or get_settings()
        if not result.is_valid or not result.processed_data:
            raise ValueError("RadarChart requires a valid ValidationResult with processed data")
        # Points scale against the bound the data was clamped to.
        self.max_value = result.max_value if result.max_value is not None else self.settings.max_value
        if not self.max_value > 0:
            raise ValueError(f"max_value must be positive, got {self.max_value}")

        start = time.perf_counter()
        cfg = self.settings
        self.result = result
        self.data = normalize(result.processed_data, cfg.minimum_spokes)
        self.dimensions = cached_dimensions(
            cfg.width, cfg.height, len(self.data), cfg.padding, cfg.minimum_spokes
        )
        self.grid_polygons = compute_grid_polygons(self.dimensions, cfg.grid_levels)
        self.spokes = compute_spokes(self.dimensions)
        self.labels = compute_label_positions(self.dimensions, self.data, cfg.label_offset)
        self.static_points = compute_static_points(self.dimensions, self.data, self.max_value)

        self._warnings = format_validation_warnings(result.warnings)
        if cfg.debug:
            for message in self._warnings:
                logger.warning("Data warning: %s", message)
        elif self._warnings:
            logger.info("%d data warnings (enable debug to list them)", len(self._warnings))

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            "Chart geometry ready: %d spokes, %d grid levels in %.2fms",
            self.dimensions.spoke_count,
            len(self.grid_polygons),
            elapsed,
        )

    def points_at(self, progress: float) -> list[Point]:
        return compute_animated_points(self.static_points, progress)

    def path_at(self, progress: float) -> str:
        return build_smooth_closed_path(self.points_at(progress), self.settings.control_point_distance)

    def tick(self, progress: float) -> ChartFrame:
        """Build the frame for one animation tick."""
        points = self.points_at(progress)
        d = self.dimensions
        return ChartFrame(
            progress=progress,
            dimensions=DimensionsOut(
                center_x=d.center_x,
                center_y=d.center_y,
                radius=d.radius,
                spoke_count=d.spoke_count,
                angle_step=d.angle_step,
            ),
            path=build_smooth_closed_path(points, self.settings.control_point_distance),
            points=[_point_out(p) for p in points],
            grid_polygons=[[_point_out(v) for v in poly] for poly in self.grid_polygons],
            grid_points=[format_polygon_points(poly) for poly in self.grid_polygons],
            spokes=[SpokeOut(x1=s.x1, y1=s.y1, x2=s.x2, y2=s.y2) for s in self.spokes],
            labels=[LabelOut(name=lb.name, x=lb.x, y=lb.y, anchor=lb.anchor) for lb in self.labels],
            warnings=self._warnings,
        )

    def frames(self, clock: AnimationClock, max_frames: int = 1000) -> Generator[ChartFrame, None, None]:
        """Yield frames until the clock reaches progress 1 (or max_frames)."""
        for _ in range(max_frames):
            progress = clock.progress()
            yield self.tick(progress)
            if progress >= 1.0:
                return
        logger.warning("Animation stopped after %d frames before reaching progress 1", max_frames)


def build_chart(
    raw_points: Sequence[Any] | None,
    settings: ChartSettings | None = None,
) -> tuple[ValidationResult, RadarChart | None]:
    """Validate raw records and build a chart when the data is usable."""
    cfg = settings or get_settings()
    result = validate(raw_points, max_value=cfg.max_value, min_value=cfg.min_value)
    if not result.is_valid:
        logger.info("Chart not built: %d validation errors", len(result.errors))
        return result, None
    return result, RadarChart(result, cfg)
