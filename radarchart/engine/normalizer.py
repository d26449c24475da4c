"""Normalizer — pads validated data so the polygon has enough sides."""

from __future__ import annotations

from collections.abc import Sequence

from radarchart.models.validation import DataPoint

# Fewer vertices than this give a degenerate-looking polygon.
MINIMUM_SPOKES = 5


def normalize(points: Sequence[DataPoint], minimum: int = MINIMUM_SPOKES) -> list[DataPoint]:
    """Append zero-valued ``Point {n}`` entries until ``minimum`` is reached.

    Existing points are never removed or reordered.
    """
    padded = list(points)
    while len(padded) < minimum:
        padded.append(DataPoint(name=f"Point {len(padded) + 1}", value=0.0))
    return padded
