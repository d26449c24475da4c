"""Validator — sanitizes raw (name, value) records into a ValidationResult.

Issues are collected, never raised. A failure on one record does not stop
processing of the others, so a single pass reports everything that is wrong.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from numbers import Real
from typing import Any

from radarchart.models.validation import (
    DataPoint,
    ErrorType,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    WarningType,
)
from radarchart.utils.math_helpers import clamp, is_finite_number

logger = logging.getLogger(__name__)

DEFAULT_MAX_VALUE = 5.0
DEFAULT_MIN_VALUE = 0.0

# Labels longer than this get truncated by most renderers.
MAX_NAME_LENGTH = 20
_SPECIAL_CHAR_RE = re.compile(r"[<>'\"&]")

NO_DATA_MESSAGE = "No data points provided or data is not a list"
EMPTY_DATA_MESSAGE = "Data source is empty. Please add data to display the chart."
NO_VALID_POINTS_MESSAGE = "No valid data points found after processing"


def _field(point: Any, key: str) -> Any:
    if isinstance(point, Mapping):
        return point.get(key)
    return getattr(point, key, None)


def _is_record(point: Any) -> bool:
    if isinstance(point, Mapping):
        return True
    if point is None or isinstance(point, (str, bytes, Real)):
        return False
    # Named tuples and other attribute records count; bare sequences do not.
    return hasattr(point, "name") or hasattr(point, "value")


def _validate_name(
    name: Any,
    index: int,
    seen: set[str],
    errors: list[ValidationError],
    warnings: list[ValidationWarning],
) -> str:
    default = f"Category {index + 1}"

    if not isinstance(name, str):
        errors.append(ValidationError(
            type=ErrorType.INVALID_DATA_TYPE,
            message=f"Name at index {index} is missing or not a string",
            field="name",
            index=index,
        ))
        processed = default
    else:
        processed = name.strip()
        if not processed:
            warnings.append(ValidationWarning(
                type=WarningType.EMPTY_NAME,
                message=f"Name at index {index} is empty after trimming",
                field="name",
                index=index,
            ))
            processed = default

    key = processed.lower()
    if key in seen:
        errors.append(ValidationError(
            type=ErrorType.DUPLICATE_NAMES,
            message=f'Duplicate name "{processed}" found at index {index}',
            field="name",
            index=index,
        ))
    else:
        seen.add(key)

    if len(processed) > MAX_NAME_LENGTH:
        warnings.append(ValidationWarning(
            type=WarningType.LONG_NAME,
            message=f'Name "{processed}" is very long and may be truncated in display',
            field="name",
            index=index,
        ))

    if _SPECIAL_CHAR_RE.search(processed):
        warnings.append(ValidationWarning(
            type=WarningType.SPECIAL_CHARACTERS,
            message=f'Name "{processed}" contains special characters that may affect display',
            field="name",
            index=index,
        ))

    return processed


def _validate_value(
    value: Any,
    index: int,
    max_value: float,
    min_value: float,
    errors: list[ValidationError],
    warnings: list[ValidationWarning],
) -> float:
    if value is None:
        errors.append(ValidationError(
            type=ErrorType.INVALID_DATA_TYPE,
            message=f"Value at index {index} is missing",
            field="value",
            index=index,
        ))
        return 0.0

    if not is_finite_number(value):
        errors.append(ValidationError(
            type=ErrorType.INVALID_DATA_TYPE,
            message=f"Value at index {index} is not a valid number",
            field="value",
            index=index,
        ))
        return 0.0

    original = float(value)
    clamped = clamp(original, min_value, max_value)
    if clamped != original:
        if original < min_value:
            bound = f"below minimum ({min_value:g})"
        else:
            bound = f"above maximum ({max_value:g})"
        warnings.append(ValidationWarning(
            type=WarningType.DATA_CLAMPED,
            message=f"Value {original:g} at index {index} is {bound} and was clamped to {clamped:g}",
            field="value",
            index=index,
        ))
    return clamped


def validate(
    raw_points: Any,
    max_value: float = DEFAULT_MAX_VALUE,
    min_value: float = DEFAULT_MIN_VALUE,
) -> ValidationResult:
    """Validate raw records and return corrected data plus diagnostics.

    Args:
        raw_points: list/tuple of ``{"name", "value"}`` mappings or
            objects exposing ``name``/``value`` attributes.
        max_value: upper clamp bound (must be > 0, checked by config).
        min_value: lower clamp bound.

    Returns:
        ValidationResult whose ``processed_data`` is set iff it is valid.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []

    if raw_points is None or not isinstance(raw_points, (list, tuple)):
        errors.append(ValidationError(type=ErrorType.MISSING_DATA, message=NO_DATA_MESSAGE))
        return ValidationResult(
            is_valid=False, errors=errors, warnings=warnings, max_value=max_value
        )

    if len(raw_points) == 0:
        errors.append(ValidationError(type=ErrorType.EMPTY_VALUES, message=EMPTY_DATA_MESSAGE))
        return ValidationResult(
            is_valid=False, errors=errors, warnings=warnings, max_value=max_value
        )

    seen: set[str] = set()
    processed: list[DataPoint] = []

    for index, point in enumerate(raw_points):
        if not _is_record(point):
            errors.append(ValidationError(
                type=ErrorType.INVALID_DATA_TYPE,
                message=f"Data point at index {index} is not a valid object",
                index=index,
            ))
            continue

        name = _validate_name(_field(point, "name"), index, seen, errors, warnings)
        value = _validate_value(
            _field(point, "value"), index, max_value, min_value, errors, warnings
        )
        if name and value == value:  # NaN check
            processed.append(DataPoint(name=name, value=value))

    if not processed:
        errors.append(ValidationError(type=ErrorType.EMPTY_VALUES, message=NO_VALID_POINTS_MESSAGE))

    is_valid = not errors and bool(processed)
    logger.debug(
        "Validated %d records: %d errors, %d warnings, valid=%s",
        len(raw_points),
        len(errors),
        len(warnings),
        is_valid,
    )
    return ValidationResult(
        is_valid=is_valid,
        errors=errors,
        warnings=warnings,
        processed_data=processed if is_valid else None,
        max_value=max_value,
    )
