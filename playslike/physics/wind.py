"""Wind gradient, head/tail asymmetry and crosswind drift."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Tuple

from playslike import errors

from .balls import BallProfile
from .clubs import ClubAerodynamicProfile

WIND_POWER_SCALE = 0.230
TAILWIND_AMPLIFIER = 1.235
LATERAL_BASE_MULTIPLIER = 2.0
SPIN_GYRO_THRESHOLD = 6000.0  # rpm
# Declared alongside the gyro threshold but not part of the stability clamp.
SPIN_TRANSITION_ZONE = 300.0  # rpm
HEADTAIL_CALIBRATION = 0.15
HEADTAIL_SCALE = 3.7
CROSSWIND_CALIBRATION = 0.08
QUARTERING_HEAD_MULTIPLIER = 1.3
QUARTERING_TAIL_MULTIPLIER = 0.8

GRADIENT_BASE = 1.1
GRADIENT_SCALE = 0.14
GRADIENT_REFERENCE_HEIGHT_FT = 32.0

SPIN_DECAY_RATE = 0.12
REFERENCE_BALL_SPEED = 123.0  # mph

_ZERO_TOLERANCE = 1e-12

WindCategory = Literal["headwind", "tailwind", "crosswind"]


@dataclass(frozen=True)
class WindEffects:
    distance_effect: float  # yards removed from the running carry
    lateral_movement: float  # yards, + right of aim


def _snap(value: float) -> float:
    return 0.0 if abs(value) < _ZERO_TOLERANCE else value


def wind_gradient(height_ft: float) -> float:
    """Wind speed multiplier at *height_ft*, floored at the 32 ft reference."""
    if height_ft < 0:
        raise errors.calculation_failed(
            "Height cannot be negative", {"height_ft": height_ft}
        )
    reference = GRADIENT_REFERENCE_HEIGHT_FT
    return GRADIENT_BASE + GRADIENT_SCALE * math.log10(
        max(height_ft, reference) / reference
    )


def gyro_stability(spin_rate: float) -> float:
    return min(1.0, spin_rate / SPIN_GYRO_THRESHOLD)


def distance_factor(yardage: float) -> float:
    taper = 1 - max(0.0, yardage - 400) / 1000
    return (yardage / 200) ** (0.7 * taper)


def calculate_wind_effects(
    yardage: float,
    club: ClubAerodynamicProfile,
    ball: BallProfile,
    effective_wind: float,
    wind_rad: float,
    flight_time: float,
) -> WindEffects:
    """Return the carry change and sideways drift for one wind vector.

    ``wind_rad`` follows the model convention: a positive cosine is a
    tailwind, a positive sine drifts the ball right.
    """
    cos_w = _snap(math.cos(wind_rad))
    sin_w = _snap(math.sin(wind_rad))

    dist = distance_factor(yardage)
    height = (club.max_height / 40) ** 3
    speed = math.sqrt(REFERENCE_BALL_SPEED / (club.ball_speed * ball.speed_factor))
    stability = gyro_stability(club.spin_rate)
    stability_factor = 0.7 + 0.42 * stability
    wind_normalized = abs(effective_wind / 5)
    shared = (
        dist * speed * club.wind_sensitivity * height * stability_factor
    )

    if cos_w > 0:
        spin_lift = 1.0 + stability * 0.25
        wind_factor = (
            cos_w
            * TAILWIND_AMPLIFIER
            * wind_normalized**WIND_POWER_SCALE
            * (flight_time / 2.0) ** 0.37
            * spin_lift
        )
    else:
        spin_lift = 1.1 + stability * 0.25
        wind_factor = (
            cos_w
            * wind_normalized**WIND_POWER_SCALE
            * (flight_time / 2.0) ** 0.30
            * spin_lift
        )
    wind_factor *= HEADTAIL_CALIBRATION * HEADTAIL_SCALE

    distance_effect = effective_wind * wind_factor * shared

    quartering = (
        QUARTERING_HEAD_MULTIPLIER if cos_w > 0 else QUARTERING_TAIL_MULTIPLIER
    )
    lateral = (
        sin_w
        * effective_wind
        * flight_time
        * shared
        * CROSSWIND_CALIBRATION
        * wind_normalized**0.3
        * (1 + ball.spin_factor * 0.05)
        * LATERAL_BASE_MULTIPLIER
        * quartering
    )
    return WindEffects(distance_effect=distance_effect, lateral_movement=lateral)


def spin_after_flight(spin_rate: float, flight_time: float, ball_speed: float) -> float:
    """Residual spin at landing using exponential decay scaled by ball speed."""
    speed_ratio = ball_speed / REFERENCE_BALL_SPEED
    return spin_rate * math.exp(-SPIN_DECAY_RATE * flight_time * speed_ratio)


def wind_components(
    wind_speed: float, wind_direction: float, shot_direction: float = 0.0
) -> Tuple[float, float]:
    """Return (headwind, crosswind); positive headwind blows into the golfer."""
    rel = math.radians(wind_direction - shot_direction)
    return wind_speed * _snap(math.cos(rel)), wind_speed * _snap(math.sin(rel))


def normalize_angle(angle: float) -> float:
    return angle % 360.0


def relative_wind_angle(wind_direction: float, heading: float) -> float:
    """Wind "from" direction relative to where the golfer faces, 0-360."""
    return normalize_angle(wind_direction - heading)


def classify_wind(relative_angle: float) -> WindCategory:
    angle = normalize_angle(relative_angle)
    if angle >= 315 or angle < 45:
        return "headwind"
    if 135 <= angle < 225:
        return "tailwind"
    return "crosswind"


_DESCRIPTIONS: dict[str, str] = {
    "tailwind": "helping wind from behind",
    "headwind": "opposing wind from front",
    "crosswind": "crosswind from side",
}


def wind_strength_opacity(wind_speed: float, max_speed: float = 25.0) -> float:
    clamped = max(0.0, min(wind_speed, max_speed))
    return 0.5 + 0.5 * (clamped / max_speed)


def describe_wind(wind_direction: float, heading: float, wind_speed: float) -> str:
    category = classify_wind(relative_wind_angle(wind_direction, heading))
    return f"Wind {round(wind_speed)} miles per hour, {_DESCRIPTIONS[category]}"


__all__ = [
    "SPIN_GYRO_THRESHOLD",
    "SPIN_TRANSITION_ZONE",
    "TAILWIND_AMPLIFIER",
    "WindCategory",
    "WindEffects",
    "calculate_wind_effects",
    "classify_wind",
    "describe_wind",
    "distance_factor",
    "gyro_stability",
    "normalize_angle",
    "relative_wind_angle",
    "spin_after_flight",
    "wind_components",
    "wind_gradient",
    "wind_strength_opacity",
]
