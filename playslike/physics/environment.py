"""Air density and the environmental distance factor (no wind)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from .wind import wind_components

if TYPE_CHECKING:
    from playslike.models import EnvironmentalConditions

# WMO-recommended Magnus coefficients
MAGNUS_A = 6.1121
MAGNUS_B = 17.502
MAGNUS_C = 240.97

GAS_CONSTANT_DRY = 287.058  # J/(kg·K)
GAS_CONSTANT_VAPOR = 461.495  # J/(kg·K)

AIR_DENSITY_SEA_LEVEL = 1.193  # kg/m³, reference for the distance factor
STANDARD_DENSITY = 1.225  # kg/m³, reference for shot adjustments

DENSITY_EXPONENT_SEA = 0.7
DENSITY_EXPONENT_ALT = 0.5
ALTITUDE_THRESHOLD_FT = 3000.0

STANDARD_TEMPERATURE_F = 70.0
STANDARD_PRESSURE_MB = 1013.25
STANDARD_HUMIDITY = 50.0

# Carry ratio versus sea level; reference data only, station pressure
# already carries the altitude effect in the density model.
ALTITUDE_EFFECTS: Mapping[int, float] = MappingProxyType(
    {
        0: 1.000,
        1000: 1.021,
        2000: 1.043,
        3000: 1.065,
        4000: 1.088,
        5000: 1.112,
        6000: 1.137,
        7000: 1.163,
        8000: 1.190,
    }
)


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    PROFESSIONAL = "professional"


SKILL_MULTIPLIERS: Mapping[SkillLevel, float] = MappingProxyType(
    {
        SkillLevel.BEGINNER: 0.90,
        SkillLevel.INTERMEDIATE: 0.95,
        SkillLevel.ADVANCED: 1.00,
        SkillLevel.PROFESSIONAL: 1.00,
    }
)


def fahrenheit_to_celsius(temp_f: float) -> float:
    return (temp_f - 32.0) * 5.0 / 9.0


def vapor_pressure(temp_f: float, humidity: float) -> float:
    """Return the partial pressure of water vapour in mb."""
    temp_c = fahrenheit_to_celsius(temp_f)
    saturation = MAGNUS_A * math.exp((MAGNUS_B * temp_c) / (temp_c + MAGNUS_C))
    return (humidity / 100.0) * saturation


def calculate_air_density(temp_f: float, pressure_mb: float, humidity: float) -> float:
    """Return moist-air density in kg/m³ from station pressure."""
    temp_k = fahrenheit_to_celsius(temp_f) + 273.15
    vapor_pa = vapor_pressure(temp_f, humidity) * 100.0
    pressure_pa = pressure_mb * 100.0
    return (pressure_pa - vapor_pa) / (GAS_CONSTANT_DRY * temp_k) + vapor_pa / (
        GAS_CONSTANT_VAPOR * temp_k
    )


def density_exponent(altitude_ft: float | None) -> float:
    if altitude_ft is not None and altitude_ft > ALTITUDE_THRESHOLD_FT:
        return DENSITY_EXPONENT_ALT
    return DENSITY_EXPONENT_SEA


def environmental_factor(
    temp_f: float = STANDARD_TEMPERATURE_F,
    pressure_mb: float = STANDARD_PRESSURE_MB,
    humidity: float = STANDARD_HUMIDITY,
    altitude_ft: float | None = 0.0,
) -> float:
    """Distance multiplier from air density; thinner air gives values above 1."""
    density = calculate_air_density(temp_f, pressure_mb, humidity)
    ratio = density / AIR_DENSITY_SEA_LEVEL
    return ratio ** (-density_exponent(altitude_ft))


def skill_multiplier(skill_level: SkillLevel | str) -> float:
    return SKILL_MULTIPLIERS[SkillLevel(skill_level)]


def altitude_reference_factor(altitude_ft: float) -> float:
    """Interpolate the reference carry ratio, clamped to the table range."""
    points = sorted(ALTITUDE_EFFECTS.items())
    if altitude_ft <= points[0][0]:
        return points[0][1]
    for (low_alt, low_val), (high_alt, high_val) in zip(points, points[1:]):
        if altitude_ft <= high_alt:
            frac = (altitude_ft - low_alt) / (high_alt - low_alt)
            return low_val + frac * (high_val - low_val)
    return points[-1][1]


@dataclass(frozen=True)
class ShotAdjustments:
    distance_adjustment: float  # percent
    trajectory_shift: float  # yards, + right
    spin_adjustment: float
    launch_angle_adjustment: float  # degrees


def _conditions_density(conditions: "EnvironmentalConditions") -> float:
    if conditions.density:
        return conditions.density
    return calculate_air_density(
        conditions.temperature, conditions.pressure, conditions.humidity
    )


def calculate_shot_adjustments(
    conditions: "EnvironmentalConditions", shot_direction: float = 0.0
) -> ShotAdjustments:
    density_ratio = _conditions_density(conditions) / STANDARD_DENSITY
    headwind, crosswind = wind_components(
        conditions.wind_speed, conditions.wind_direction, shot_direction
    )
    density_effect = (1 - density_ratio) * 100
    return ShotAdjustments(
        distance_adjustment=density_effect - headwind * 1.5,
        trajectory_shift=crosswind * 2,
        spin_adjustment=(density_ratio - 1) * -50,
        launch_angle_adjustment=headwind * 0.1,
    )


def flight_time_adjustment(conditions: "EnvironmentalConditions") -> float:
    density_ratio = _conditions_density(conditions) / STANDARD_DENSITY
    return 1 + (1 - density_ratio) * 0.1


def recommended_adjustments(conditions: "EnvironmentalConditions") -> list[str]:
    """Plain-language advice for the current conditions."""
    headwind, crosswind = wind_components(
        conditions.wind_speed, conditions.wind_direction, 0.0
    )
    advice: list[str] = []
    if abs(headwind) > 5:
        advice.append(
            "Into wind: Club up and swing easier for better control"
            if headwind > 0
            else "Downwind: Club down and be aware of reduced spin/control"
        )
    if abs(crosswind) > 5:
        advice.append("Significant crosswind: Allow for shot shape into the wind")
    if conditions.temperature < 50:
        advice.append("Cold conditions: Ball will fly shorter, consider clubbing up")
    if conditions.humidity > 80:
        advice.append("High humidity: Ball will fly slightly shorter")
    if conditions.altitude > ALTITUDE_THRESHOLD_FT:
        advice.append("High altitude: Ball will fly further, consider clubbing down")
    return advice


def environmental_summary(conditions: "EnvironmentalConditions") -> str:
    adjustments = calculate_shot_adjustments(conditions)
    distance = adjustments.distance_adjustment
    shift = adjustments.trajectory_shift
    lines = [
        "Playing conditions will affect your shots as follows:",
        "• Distance: {verb} by {pct:.1f}% (includes altitude effect)".format(
            verb="Increase" if distance > 0 else "Decrease", pct=abs(distance)
        ),
        "• Ball flight: {yards:.1f} yards {side}".format(
            yards=abs(shift), side="right" if shift > 0 else "left"
        ),
        "• Spin rate: {verb} effect".format(
            verb="Increased" if adjustments.spin_adjustment > 0 else "Decreased"
        ),
    ]
    if conditions.altitude > 0:
        reference = altitude_reference_factor(conditions.altitude)
        lines.append(
            f"• Altitude reference: {(reference - 1) * 100:+.1f}% carry vs sea level"
        )
    return "\n".join(lines)


__all__ = [
    "AIR_DENSITY_SEA_LEVEL",
    "ALTITUDE_EFFECTS",
    "ALTITUDE_THRESHOLD_FT",
    "SKILL_MULTIPLIERS",
    "STANDARD_DENSITY",
    "ShotAdjustments",
    "SkillLevel",
    "altitude_reference_factor",
    "calculate_air_density",
    "calculate_shot_adjustments",
    "density_exponent",
    "environmental_factor",
    "environmental_summary",
    "flight_time_adjustment",
    "recommended_adjustments",
    "skill_multiplier",
    "vapor_pressure",
]
