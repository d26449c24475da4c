"""Animation clock contract and easing.

The engine owns no timer. An external scheduler calls ``RadarChart.tick``
once per display refresh with the current progress; stopping the ticks is
all the cancellation there is.
"""

from __future__ import annotations

import math
from typing import Protocol

from radarchart.utils.math_helpers import clamp

ANIMATION_DURATION_MS = 1200.0
EASING_FACTOR = 3.0


class AnimationClock(Protocol):
    """Supplies non-decreasing progress values in [0, 1]."""

    def progress(self) -> float: ...


def ease_out_progress(
    elapsed_ms: float,
    duration_ms: float = ANIMATION_DURATION_MS,
    easing_factor: float = EASING_FACTOR,
) -> float:
    """Ease-out curve: 1 - (1 - t)^k with t = elapsed / duration clamped to [0, 1]."""
    if duration_ms <= 0:
        return 1.0
    t = clamp(elapsed_ms / duration_ms, 0.0, 1.0)
    return 1.0 - (1.0 - t) ** easing_factor


class FixedStepClock:
    """Deterministic clock that advances ``step_ms`` per call.

    Stands in for a display-refresh scheduler in tests and the CLI.
    """

    def __init__(
        self,
        step_ms: float,
        duration_ms: float = ANIMATION_DURATION_MS,
        easing_factor: float = EASING_FACTOR,
    ) -> None:
        if step_ms <= 0:
            raise ValueError(f"step_ms must be positive, got {step_ms}")
        self.step_ms = step_ms
        self.duration_ms = duration_ms
        self.easing_factor = easing_factor
        self._elapsed = 0.0

    def progress(self) -> float:
        if math.isclose(self._elapsed, self.duration_ms):
            value = 1.0
        else:
            value = ease_out_progress(self._elapsed, self.duration_ms, self.easing_factor)
        self._elapsed += self.step_ms
        return value
