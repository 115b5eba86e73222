"""Shared pytest fixtures for plays-like tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from playslike.config import reset_settings_cache
from playslike.models import EnvironmentalConditions


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def standard_conditions() -> EnvironmentalConditions:
    return EnvironmentalConditions(
        temperature=70.0,
        humidity=50.0,
        pressure=1013.25,
        altitude=0.0,
        wind_speed=0.0,
        wind_direction=0.0,
        wind_gust=0.0,
    )
