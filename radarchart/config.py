"""Chart configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChartSettings(BaseSettings):
    # Canvas
    width: float = 400.0
    height: float = 400.0
    padding: float = 60.0
    label_offset: float = 20.0

    # Value scale
    max_value: float = 5.0
    min_value: float = 0.0

    # Layout
    grid_levels: int = 5
    minimum_spokes: int = 5
    control_point_distance: float = 0.15

    # Animation (consumed by the external scheduler)
    animation_duration_ms: float = 1200.0
    easing_factor: float = 3.0

    debug: bool = False
    log_level: str = "info"

    model_config = SettingsConfigDict(
        env_prefix="RADARCHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("width", "height", "max_value", "animation_duration_ms")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"must be positive, got {v}")
        return v

    @field_validator("grid_levels", "minimum_spokes")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v

    @field_validator("control_point_distance")
    @classmethod
    def _control_distance(cls, v: float) -> float:
        # Past 0.5 the two control points cross over each other.
        if not 0.0 <= v <= 0.5:
            raise ValueError(f"must be within [0, 0.5], got {v}")
        return v

    @model_validator(mode="after")
    def _value_range(self) -> "ChartSettings":
        if self.min_value >= self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must be below max_value ({self.max_value})"
            )
        if min(self.width, self.height) / 2 <= self.padding:
            raise ValueError(
                f"canvas {self.width}x{self.height} leaves no room inside padding {self.padding}"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> ChartSettings:
    return ChartSettings()
