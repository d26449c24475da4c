"""Radar chart validation + geometry engine."""

from radarchart.engine.chart import RadarChart, build_chart
from radarchart.engine.geometry import (
    compute_animated_point,
    compute_dimensions,
    compute_grid_polygons,
    compute_spokes,
    compute_static_point,
)
from radarchart.engine.normalizer import normalize
from radarchart.engine.path_builder import build_smooth_closed_path
from radarchart.engine.validator import validate

__all__ = [
    "RadarChart",
    "build_chart",
    "build_smooth_closed_path",
    "compute_animated_point",
    "compute_dimensions",
    "compute_grid_polygons",
    "compute_spokes",
    "compute_static_point",
    "normalize",
    "validate",
]
