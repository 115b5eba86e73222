from __future__ import annotations

import pytest
from pydantic import ValidationError

from playslike.models import EnvironmentalConditions
from playslike.physics import environment


def test_air_density_at_standard_conditions() -> None:
    density = environment.calculate_air_density(70.0, 1013.25, 50.0)
    assert density == pytest.approx(1.1939, rel=1e-3)


def test_dry_air_has_no_vapor_pressure() -> None:
    assert environment.vapor_pressure(70.0, 0.0) == 0.0
    assert environment.vapor_pressure(70.0, 100.0) == pytest.approx(25.03, rel=1e-3)


def test_humid_air_is_less_dense() -> None:
    humid = environment.calculate_air_density(80.0, 1013.25, 90.0)
    dry = environment.calculate_air_density(80.0, 1013.25, 10.0)
    assert humid < dry


def test_environmental_factor_is_identity_at_standard_conditions() -> None:
    assert environment.environmental_factor() == pytest.approx(1.0, abs=1e-3)


def test_environmental_factor_increases_as_density_drops() -> None:
    standard = environment.environmental_factor(70.0, 1013.25, 50.0, 0.0)
    hot = environment.environmental_factor(95.0, 1013.25, 50.0, 0.0)
    mountain = environment.environmental_factor(70.0, 843.0, 50.0, 5000.0)
    assert hot > standard
    assert mountain > hot


def test_density_exponent_switches_above_threshold() -> None:
    assert environment.density_exponent(0.0) == 0.7
    assert environment.density_exponent(3000.0) == 0.7
    assert environment.density_exponent(3001.0) == 0.5
    assert environment.density_exponent(None) == 0.7


def test_skill_multipliers() -> None:
    assert environment.skill_multiplier("beginner") == 0.90
    assert environment.skill_multiplier(environment.SkillLevel.INTERMEDIATE) == 0.95
    assert environment.skill_multiplier("advanced") == 1.0
    assert environment.skill_multiplier("professional") == 1.0
    with pytest.raises(ValueError):
        environment.skill_multiplier("expert")


@pytest.mark.parametrize(
    ("altitude", "expected"),
    [(-100.0, 1.0), (0.0, 1.0), (1500.0, 1.032), (8000.0, 1.19), (12000.0, 1.19)],
)
def test_altitude_reference_factor_interpolates(altitude: float, expected: float) -> None:
    assert environment.altitude_reference_factor(altitude) == pytest.approx(expected)


def test_conditions_derive_density_when_missing() -> None:
    conditions = EnvironmentalConditions(temperature=70.0, humidity=50.0, pressure=1013.25)
    assert conditions.density == pytest.approx(1.1939, rel=1e-3)

    explicit = EnvironmentalConditions(density=1.1)
    assert explicit.density == 1.1


def test_conditions_accept_aliases_and_validate_ranges() -> None:
    conditions = EnvironmentalConditions.model_validate(
        {"windSpeed": 12.0, "windDirection": 270.0, "windGust": 18.0}
    )
    assert conditions.wind_speed == 12.0
    assert conditions.wind_direction == 270.0

    with pytest.raises(ValidationError):
        EnvironmentalConditions(humidity=120.0)
    with pytest.raises(ValidationError):
        EnvironmentalConditions(wind_direction=360.0)
    with pytest.raises(ValidationError):
        EnvironmentalConditions(wind_speed=-1.0)


def test_conditions_are_immutable(standard_conditions: EnvironmentalConditions) -> None:
    with pytest.raises(ValidationError):
        standard_conditions.temperature = 90.0  # type: ignore[misc]


def test_shot_adjustments_for_headwind() -> None:
    conditions = EnvironmentalConditions(wind_speed=10.0, wind_direction=0.0)
    adjustments = environment.calculate_shot_adjustments(conditions)
    density_effect = (1 - conditions.density / environment.STANDARD_DENSITY) * 100
    assert adjustments.distance_adjustment == pytest.approx(density_effect - 15.0)
    assert adjustments.launch_angle_adjustment == pytest.approx(1.0)
    assert adjustments.trajectory_shift == pytest.approx(0.0)


def test_flight_time_adjustment_grows_in_thin_air() -> None:
    sea_level = EnvironmentalConditions()
    thin = EnvironmentalConditions(pressure=843.0, altitude=5000.0)
    assert environment.flight_time_adjustment(thin) > environment.flight_time_adjustment(
        sea_level
    )


def test_recommended_adjustments() -> None:
    rough_day = EnvironmentalConditions(
        temperature=40.0,
        humidity=90.0,
        altitude=5000.0,
        pressure=843.0,
        wind_speed=10.0,
        wind_direction=0.0,
    )
    advice = environment.recommended_adjustments(rough_day)
    assert any(line.startswith("Into wind") for line in advice)
    assert any(line.startswith("Cold conditions") for line in advice)
    assert any(line.startswith("High humidity") for line in advice)
    assert any(line.startswith("High altitude") for line in advice)

    downwind = EnvironmentalConditions(wind_speed=10.0, wind_direction=180.0)
    assert environment.recommended_adjustments(downwind) == [
        "Downwind: Club down and be aware of reduced spin/control"
    ]

    crosswind = EnvironmentalConditions(wind_speed=10.0, wind_direction=90.0)
    assert environment.recommended_adjustments(crosswind) == [
        "Significant crosswind: Allow for shot shape into the wind"
    ]


def test_environmental_summary_mentions_altitude_reference() -> None:
    summary = environment.environmental_summary(
        EnvironmentalConditions(altitude=5000.0, pressure=843.0)
    )
    assert "Distance: Increase" in summary
    assert "Altitude reference: +11.2%" in summary

    flat = environment.environmental_summary(EnvironmentalConditions())
    assert "Altitude reference" not in flat
