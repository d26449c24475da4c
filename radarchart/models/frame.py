"""Chart frame — everything a renderer needs to draw one animation tick."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DimensionsOut(BaseModel):
    center_x: float
    center_y: float
    radius: float
    spoke_count: int
    angle_step: float


class PointOut(BaseModel):
    x: float
    y: float


class SpokeOut(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float


class LabelOut(BaseModel):
    name: str
    x: float
    y: float
    anchor: str = "middle"  # start, middle, end


class ChartFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    progress: float = 1.0
    dimensions: DimensionsOut
    path: str = ""
    points: list[PointOut] = Field(default_factory=list)
    grid_polygons: list[list[PointOut]] = Field(default_factory=list)
    # SVG ``points`` attribute per grid level, innermost first
    grid_points: list[str] = Field(default_factory=list)
    spokes: list[SpokeOut] = Field(default_factory=list)
    labels: list[LabelOut] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
