"""Shared test fixtures."""

from __future__ import annotations

import pytest

from radarchart.config import ChartSettings, get_settings


# Sample score sets

SKILLS_DATA = [
    {"name": "Roles and Skills", "value": 4.2},
    {"name": "Agile Working", "value": 3.8},
    {"name": "Training", "value": 4.5},
    {"name": "Experts", "value": 3.9},
    {"name": "Program Owner", "value": 4.1},
    {"name": "Sponsorship", "value": 4.3},
    {"name": "Technical Owner", "value": 3.7},
    {"name": "Partners", "value": 4.0},
]

TWO_POINT_DATA = [
    {"name": "A", "value": 1},
    {"name": "B", "value": 2},
]

# Every kind of problem the validator knows about, one per record
MESSY_DATA = [
    {"name": "Speed", "value": 7},  # clamped
    {"name": "   ", "value": 2},  # empty name
    {"name": 42, "value": 1},  # non-string name
    {"name": "speed", "value": 3},  # duplicate (case-insensitive)
    {"name": "An extremely long category name", "value": 4},
    {"name": "R&D <core>", "value": 2.5},
    {"name": "Missing", "value": None},
    {"name": "NotANumber", "value": "high"},
    "not a record",
]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep RADARCHART_* env vars and the settings cache out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("RADARCHART_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ChartSettings:
    return ChartSettings()


@pytest.fixture
def skills_data() -> list[dict]:
    return [dict(p) for p in SKILLS_DATA]


@pytest.fixture
def messy_data() -> list:
    return list(MESSY_DATA)
