"""Tests for the data validator."""

from collections import namedtuple
from decimal import Decimal

import numpy as np
import pytest

from radarchart.engine.validator import validate
from radarchart.models.validation import DataPoint, ErrorType, WarningType
from radarchart.utils.math_helpers import clamp
from tests.conftest import MESSY_DATA, SKILLS_DATA


def _types(items):
    return [i.type for i in items]


def test_valid_data_passes_through():
    result = validate(SKILLS_DATA)
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []
    assert [p.name for p in result.processed_data] == [p["name"] for p in SKILLS_DATA]
    assert [p.value for p in result.processed_data] == [p["value"] for p in SKILLS_DATA]


def test_none_is_missing_data():
    result = validate(None)
    assert not result.is_valid
    assert _types(result.errors) == [ErrorType.MISSING_DATA]
    assert result.warnings == []
    assert result.processed_data is None


@pytest.mark.parametrize("raw", ["A,B", {"name": "A", "value": 1}, 42])
def test_non_list_is_missing_data(raw):
    result = validate(raw)
    assert _types(result.errors) == [ErrorType.MISSING_DATA]


def test_empty_list():
    result = validate([])
    assert not result.is_valid
    assert _types(result.errors) == [ErrorType.EMPTY_VALUES]
    assert result.processed_data is None


def test_value_above_max_is_clamped():
    result = validate([{"name": "A", "value": 7}], max_value=5)
    assert result.is_valid
    assert _types(result.warnings) == [WarningType.DATA_CLAMPED]
    warning = result.warnings[0]
    assert warning.index == 0
    assert warning.field == "value"
    assert "7" in warning.message and "5" in warning.message
    assert result.processed_data[0].value == 5


def test_value_below_min_is_clamped():
    result = validate([{"name": "A", "value": -2}])
    assert result.is_valid
    assert result.processed_data[0].value == 0
    assert "below minimum" in result.warnings[0].message


def test_custom_range():
    result = validate([{"name": "A", "value": 15}, {"name": "B", "value": 3}], max_value=10, min_value=5)
    assert [p.value for p in result.processed_data] == [10, 5]
    assert len(result.warnings) == 2


def test_duplicate_names_case_insensitive():
    result = validate([{"name": "A", "value": 1}, {"name": "a", "value": 2}])
    assert not result.is_valid
    assert result.processed_data is None
    dupes = [e for e in result.errors if e.type == ErrorType.DUPLICATE_NAMES]
    assert len(dupes) == 1
    assert dupes[0].index == 1


def test_duplicate_after_trimming():
    result = validate([{"name": "Speed", "value": 1}, {"name": "  SPEED ", "value": 2}])
    assert result.has_error(ErrorType.DUPLICATE_NAMES)
    assert result.errors[0].index == 1


def test_non_string_name_gets_default():
    result = validate([{"name": 12, "value": 1}, {"name": "B", "value": 2}])
    assert not result.is_valid
    assert result.errors[0].type == ErrorType.INVALID_DATA_TYPE
    assert result.errors[0].field == "name"
    assert "index 0" in result.errors[0].message


def test_empty_name_warns_and_defaults():
    result = validate([{"name": "   ", "value": 1}, {"name": "", "value": 2}])
    assert result.is_valid
    assert _types(result.warnings) == [WarningType.EMPTY_NAME, WarningType.EMPTY_NAME]
    assert [p.name for p in result.processed_data] == ["Category 1", "Category 2"]


def test_names_are_trimmed():
    result = validate([{"name": "  Speed  ", "value": 1}])
    assert result.processed_data[0].name == "Speed"


def test_long_name_warning():
    result = validate([{"name": "x" * 21, "value": 1}, {"name": "y" * 20, "value": 1}])
    assert result.is_valid
    long_names = [w for w in result.warnings if w.type == WarningType.LONG_NAME]
    assert [w.index for w in long_names] == [0]


@pytest.mark.parametrize("name", ["a<b", "a>b", "it's", 'say "hi"', "R&D"])
def test_special_characters_warning(name):
    result = validate([{"name": name, "value": 1}])
    assert result.is_valid
    assert result.has_warning(WarningType.SPECIAL_CHARACTERS)


def test_missing_value():
    result = validate([{"name": "A"}, {"name": "B", "value": None}])
    assert not result.is_valid
    assert [e.index for e in result.errors] == [0, 1]
    assert all(e.type == ErrorType.INVALID_DATA_TYPE and e.field == "value" for e in result.errors)


@pytest.mark.parametrize(
    "value",
    ["3", float("nan"), float("inf"), -float("inf"), True, [1], Decimal("NaN"), Decimal("1e400"), 10**400, -(10**400)],
)
def test_non_finite_or_non_numeric_value(value):
    result = validate([{"name": "A", "value": value}])
    assert not result.is_valid
    assert _types(result.errors) == [ErrorType.INVALID_DATA_TYPE]
    assert "not a valid number" in result.errors[0].message


@pytest.mark.parametrize("value", [3, 3.0, Decimal("3"), np.float64(3.0), np.int64(3)])
def test_numeric_types_accepted(value):
    result = validate([{"name": "A", "value": value}])
    assert result.is_valid
    assert result.processed_data[0].value == 3.0


def test_non_record_element_is_skipped():
    result = validate(["nope", {"name": "A", "value": 1}])
    assert not result.is_valid
    assert result.errors[0].type == ErrorType.INVALID_DATA_TYPE
    assert result.errors[0].index == 0
    assert "not a valid object" in result.errors[0].message


def test_all_records_unusable_adds_empty_values():
    result = validate([None, 3])
    assert _types(result.errors) == [
        ErrorType.INVALID_DATA_TYPE,
        ErrorType.INVALID_DATA_TYPE,
        ErrorType.EMPTY_VALUES,
    ]


def test_attribute_records_and_datapoints():
    class Row:
        def __init__(self, name, value):
            self.name = name
            self.value = value

    result = validate([Row("A", 1), DataPoint(name="B", value=2)])
    assert result.is_valid
    assert [p.name for p in result.processed_data] == ["A", "B"]


def test_processing_continues_across_failures():
    result = validate(MESSY_DATA)
    assert not result.is_valid
    assert result.processed_data is None

    error_indices = {(e.type, e.index) for e in result.errors}
    assert (ErrorType.INVALID_DATA_TYPE, 2) in error_indices
    assert (ErrorType.DUPLICATE_NAMES, 3) in error_indices
    assert (ErrorType.INVALID_DATA_TYPE, 6) in error_indices
    assert (ErrorType.INVALID_DATA_TYPE, 7) in error_indices
    assert (ErrorType.INVALID_DATA_TYPE, 8) in error_indices

    warning_indices = {(w.type, w.index) for w in result.warnings}
    assert (WarningType.DATA_CLAMPED, 0) in warning_indices
    assert (WarningType.EMPTY_NAME, 1) in warning_indices
    assert (WarningType.LONG_NAME, 4) in warning_indices
    assert (WarningType.SPECIAL_CHARACTERS, 5) in warning_indices


def test_tuple_input_and_order_preserved():
    raw = tuple({"name": n, "value": i} for i, n in enumerate("EDCBA"))
    result = validate(raw)
    assert [p.name for p in result.processed_data] == list("EDCBA")


def test_valid_values_within_range():
    raw = [{"name": f"c{i}", "value": v} for i, v in enumerate([-3, 0, 2.5, 5, 99])]
    result = validate(raw, max_value=5)
    assert result.is_valid
    assert all(0 <= p.value <= 5 for p in result.processed_data)


def test_deterministic():
    assert validate(MESSY_DATA) == validate(MESSY_DATA)


@pytest.mark.parametrize("value", [-10.0, -0.5, 0.0, 2.5, 5.0, 7.25, 1e9])
def test_clamp_idempotent(value):
    once = clamp(value, 0.0, 5.0)
    assert clamp(once, 0.0, 5.0) == once
    assert 0.0 <= once <= 5.0


def test_integer_too_large_for_float():
    result = validate([{"name": "A", "value": 10**400}, {"name": "B", "value": 2}])
    assert not result.is_valid
    assert result.errors[0].index == 0
    assert result.errors[0].field == "value"
    assert "not a valid number" in result.errors[0].message


def test_named_tuple_records():
    Row = namedtuple("Row", ["name", "value"])
    result = validate([Row("A", 1), Row("B", 2)])
    assert result.is_valid
    assert [(p.name, p.value) for p in result.processed_data] == [("A", 1.0), ("B", 2.0)]


def test_plain_tuple_element_is_not_a_record():
    result = validate([("A", 1), {"name": "B", "value": 2}])
    assert result.errors[0].index == 0
    assert "not a valid object" in result.errors[0].message


def test_result_records_max_value():
    assert validate([{"name": "A", "value": 3}], max_value=10).max_value == 10
    assert validate([], max_value=7).max_value == 7
