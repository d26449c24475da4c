"""Data-source adapter — typed access to host records.

The host's dynamic object model stops here: the validator only ever sees
plain ``{"name", "value"}`` dicts.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Callable, Sequence
from typing import Any, Protocol

from radarchart.engine.validator import DEFAULT_MAX_VALUE, validate
from radarchart.models.validation import ErrorType, ValidationError, ValidationResult
from radarchart.utils.math_helpers import to_number

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"

# Shown while the source is unavailable (not loading, not failed).
DEFAULT_SAMPLE_DATA: tuple[dict[str, Any], ...] = (
    {"name": "Roles and Skills", "value": 4.2},
    {"name": "Agile Working", "value": 3.8},
    {"name": "Training", "value": 4.5},
    {"name": "Experts", "value": 3.9},
    {"name": "Program Owner", "value": 4.1},
    {"name": "Sponsorship", "value": 4.3},
    {"name": "Technical Owner", "value": 3.7},
    {"name": "Partners", "value": 4.0},
)


class DataSourceStatus(str, enum.Enum):
    LOADING = "loading"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


class DataSource(Protocol):
    status: DataSourceStatus
    items: Sequence[Any] | None


def read_data_points(
    source: DataSource,
    name_of: Callable[[Any], Any],
    value_of: Callable[[Any], Any],
) -> list[dict[str, Any]]:
    """Project host items onto ``{"name", "value"}`` dicts.

    Missing names become ``"Unknown"``; values go through ``to_number``.
    """
    points: list[dict[str, Any]] = []
    for item in source.items or ():
        name = name_of(item) or UNKNOWN_NAME
        points.append({"name": name, "value": to_number(value_of(item), 0.0)})
    return points


def coerce_max_value(max_value: Any) -> float:
    """Host max value as a float. Unset or zero falls back to the default.

    Raises:
        ValueError: if the coerced value is negative or not finite.
    """
    scale = to_number(max_value or None, DEFAULT_MAX_VALUE)
    if not (scale > 0 and math.isfinite(scale)):
        raise ValueError(f"max_value must be a positive finite number, got {max_value!r}")
    return scale


def _missing(message: str) -> ValidationResult:
    return ValidationResult(
        is_valid=False,
        errors=[ValidationError(type=ErrorType.MISSING_DATA, message=message)],
    )


def load_validation_result(
    source: DataSource | None,
    name_of: Callable[[Any], Any],
    value_of: Callable[[Any], Any],
    max_value: Any = DEFAULT_MAX_VALUE,
) -> ValidationResult | None:
    """Read and validate a data source.

    Returns ``None`` while the source is still loading. An available source
    with no items is reported as empty; sample data only stands in while the
    source is unavailable.

    Raises:
        ValueError: for a negative or non-finite ``max_value``.
    """
    scale = coerce_max_value(max_value)

    if source is None:
        return _missing("No data source configured")

    if source.status == DataSourceStatus.LOADING:
        return None

    if source.status == DataSourceStatus.ERROR:
        return _missing("Data source is unavailable")

    if source.status == DataSourceStatus.UNAVAILABLE:
        logger.debug("Data source not available yet, using sample data")
        return validate(list(DEFAULT_SAMPLE_DATA), max_value=scale)

    try:
        points = read_data_points(source, name_of, value_of)
    except Exception:
        logger.exception("Error reading radar chart data source (%d items)", len(source.items or ()))
        return ValidationResult(
            is_valid=False,
            errors=[ValidationError(
                type=ErrorType.INVALID_DATA_TYPE,
                message="Error processing data source. Please check your data configuration.",
            )],
        )

    return validate(points, max_value=scale)
