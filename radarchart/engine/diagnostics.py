"""Presentation-facing view of a ValidationResult."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from radarchart.models.validation import ErrorType, ValidationError, ValidationResult, ValidationWarning


class DisplayState(str, enum.Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


def resolve_display_state(result: ValidationResult | None, loading: bool = False) -> DisplayState:
    """Pick what the presentation layer should show.

    A ``None`` result means the data source has not produced anything yet.
    """
    if loading or result is None:
        return DisplayState.LOADING
    if result.is_valid:
        return DisplayState.READY
    if result.errors and all(e.type == ErrorType.EMPTY_VALUES for e in result.errors):
        return DisplayState.EMPTY
    return DisplayState.ERROR


def format_validation_errors(errors: Sequence[ValidationError]) -> str:
    """Collapse errors into one user-friendly sentence per error type."""
    if not errors:
        return ""

    counts: dict[ErrorType, int] = {}
    for error in errors:
        counts[error.type] = counts.get(error.type, 0) + 1

    messages: list[str] = []
    if ErrorType.MISSING_DATA in counts:
        messages.append("Data source is not properly configured.")
    if ErrorType.EMPTY_VALUES in counts:
        messages.append("No data is available to display.")
    if ErrorType.INVALID_DATA_TYPE in counts:
        count = counts[ErrorType.INVALID_DATA_TYPE]
        verb = "point has" if count == 1 else "points have"
        messages.append(f"{count} data {verb} invalid format.")
    if ErrorType.DUPLICATE_NAMES in counts:
        messages.append("Some category names are duplicated.")
    if ErrorType.INVALID_RANGE in counts:
        messages.append("Some values are outside the valid range.")
    return " ".join(messages)


def format_validation_warnings(warnings: Sequence[ValidationWarning]) -> list[str]:
    return [w.message for w in warnings]
