from __future__ import annotations

import logging

import pytest

from playslike.models import EnvironmentalConditions
from playslike.services.wind_calculator import (
    adaptive_convergence_threshold,
    calculate_wind_effect,
)


def test_calm_standard_day_has_tiny_environmental_effect(
    standard_conditions: EnvironmentalConditions,
) -> None:
    result = calculate_wind_effect(150, 0.0, 0.0, "7-iron", standard_conditions)
    assert result is not None
    assert result.environmental_effect == pytest.approx(0.1, abs=0.05)
    assert result.wind_effect == 0.0
    assert result.lateral_effect == 0.0
    assert result.total_distance == pytest.approx(150.0)


def test_tailwind_adds_and_headwind_subtracts(
    standard_conditions: EnvironmentalConditions,
) -> None:
    tail = calculate_wind_effect(150, 20.0, 0.0, "7-iron", standard_conditions)
    head = calculate_wind_effect(150, 20.0, 180.0, "7-iron", standard_conditions)
    assert tail is not None and head is not None
    assert tail.wind_effect > 0 > head.wind_effect
    assert abs(tail.wind_effect) > abs(head.wind_effect)
    assert tail.total_distance > 150 > head.total_distance


def test_total_distance_is_target_plus_wind_effect(
    standard_conditions: EnvironmentalConditions,
) -> None:
    result = calculate_wind_effect(172, 12.0, 30.0, "6-iron", standard_conditions)
    assert result is not None
    assert result.total_distance == pytest.approx(172 + result.wind_effect)


def test_crosswind_is_lateral_only_and_symmetric(
    standard_conditions: EnvironmentalConditions,
) -> None:
    right = calculate_wind_effect(150, 20.0, 90.0, "7-iron", standard_conditions)
    left = calculate_wind_effect(150, 20.0, 270.0, "7-iron", standard_conditions)
    assert right is not None and left is not None
    assert right.wind_effect == 0.0
    assert left.wind_effect == 0.0
    assert right.lateral_effect > 0
    assert left.lateral_effect == pytest.approx(-right.lateral_effect)


def test_angles_are_normalized(standard_conditions: EnvironmentalConditions) -> None:
    wrapped = calculate_wind_effect(150, 10.0, -180.0, "7-iron", standard_conditions)
    direct = calculate_wind_effect(150, 10.0, 180.0, "7-iron", standard_conditions)
    assert wrapped == direct


def test_calculation_is_deterministic(standard_conditions: EnvironmentalConditions) -> None:
    first = calculate_wind_effect(140, 14.0, 200.0, "8-iron", standard_conditions)
    second = calculate_wind_effect(140, 14.0, 200.0, "8-iron", standard_conditions)
    assert first == second


@pytest.mark.parametrize(
    ("target", "wind_speed", "wind_angle", "club"),
    [
        (0, 10.0, 0.0, "7-iron"),
        (-5, 10.0, 0.0, "7-iron"),
        (None, 10.0, 0.0, "7-iron"),
        (150, -1.0, 0.0, "7-iron"),
        (150, None, 0.0, "7-iron"),
        (150, 10.0, None, "7-iron"),
        (150, 10.0, 0.0, "putter"),
        (150, 10.0, 0.0, ""),
        (150, 51.0, 0.0, "7-iron"),
    ],
)
def test_invalid_inputs_return_none_and_log(
    caplog: pytest.LogCaptureFixture,
    standard_conditions: EnvironmentalConditions,
    target,
    wind_speed,
    wind_angle,
    club,
) -> None:
    caplog.set_level(logging.ERROR, logger="playslike.services.wind_calculator")
    result = calculate_wind_effect(target, wind_speed, wind_angle, club, standard_conditions)
    assert result is None
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_model_failure_is_logged_with_context(
    caplog: pytest.LogCaptureFixture,
    standard_conditions: EnvironmentalConditions,
) -> None:
    caplog.set_level(logging.ERROR, logger="playslike.services.wind_calculator")
    result = calculate_wind_effect(
        150, 10.0, 0.0, "7-iron", standard_conditions, ball_model="range_ball"
    )
    assert result is None
    record = caplog.records[-1]
    assert record.wind_calculator["error_type"] == "INVALID_INPUT"
    assert record.wind_calculator["club"] == "7-iron"


def test_ball_model_comes_from_settings(
    monkeypatch: pytest.MonkeyPatch, standard_conditions: EnvironmentalConditions
) -> None:
    from playslike.config import reset_settings_cache

    monkeypatch.setenv("PLAYSLIKE_BALL_MODEL", "range_ball")
    reset_settings_cache()
    assert calculate_wind_effect(150, 10.0, 0.0, "7-iron", standard_conditions) is None


def test_injected_logger_receives_records(
    caplog: pytest.LogCaptureFixture,
    standard_conditions: EnvironmentalConditions,
) -> None:
    custom = logging.getLogger("tests.injected")
    caplog.set_level(logging.DEBUG, logger="tests.injected")
    with_logger = calculate_wind_effect(
        150, 10.0, 0.0, "7-iron", standard_conditions, logger=custom
    )
    without_logger = calculate_wind_effect(150, 10.0, 0.0, "7-iron", standard_conditions)
    assert with_logger == without_logger
    assert any(record.name == "tests.injected" for record in caplog.records)
    payload = next(
        record.wind_calculator
        for record in caplog.records
        if record.name == "tests.injected"
    )
    assert payload["club"] == "7-iron"
    assert payload["target_yardage"] == 150


@pytest.mark.parametrize(
    ("distance", "threshold"), [(50, 1.0), (99.9, 1.0), (100, 2.0), (199, 2.0), (200, 3.0), (320, 3.0)]
)
def test_adaptive_convergence_threshold(distance: float, threshold: float) -> None:
    assert adaptive_convergence_threshold(distance) == threshold
