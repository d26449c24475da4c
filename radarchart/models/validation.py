"""Validation data model — data points and the diagnostic report."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, enum.Enum):
    """Blocking issues. Any of these makes a result invalid."""

    MISSING_DATA = "MISSING_DATA"
    EMPTY_VALUES = "EMPTY_VALUES"
    INVALID_DATA_TYPE = "INVALID_DATA_TYPE"
    DUPLICATE_NAMES = "DUPLICATE_NAMES"
    # Reserved: out-of-range values are clamped (DATA_CLAMPED) instead.
    INVALID_RANGE = "INVALID_RANGE"


class WarningType(str, enum.Enum):
    """Advisory issues. Rendering proceeds with corrected data."""

    DATA_CLAMPED = "DATA_CLAMPED"
    EMPTY_NAME = "EMPTY_NAME"
    SPECIAL_CHARACTERS = "SPECIAL_CHARACTERS"
    LONG_NAME = "LONG_NAME"


class DataPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float


class ValidationError(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ErrorType
    message: str
    field: str | None = None
    index: int | None = None


class ValidationWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: WarningType
    message: str
    field: str | None = None
    index: int | None = None


class ValidationResult(BaseModel):
    """Outcome of one validation pass.

    ``processed_data`` is set only when ``is_valid`` is true.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)
    processed_data: list[DataPoint] | None = None
    # Top of the scale values were clamped to; charts scale against it.
    max_value: float | None = None

    def has_error(self, error_type: ErrorType) -> bool:
        return any(e.type == error_type for e in self.errors)

    def has_warning(self, warning_type: WarningType) -> bool:
        return any(w.type == warning_type for w in self.warnings)
