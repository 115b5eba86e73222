"""Single-shot yardage model combining environment, skill and wind."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from playslike import errors
from playslike.models import ShotResult

from .balls import DEFAULT_BALL_MODEL, BallProfile, get_ball_profile
from .clubs import CLUB_DATABASE, ClubAerodynamicProfile, get_club_profile
from .environment import (
    STANDARD_HUMIDITY,
    STANDARD_PRESSURE_MB,
    STANDARD_TEMPERATURE_F,
    SkillLevel,
    environmental_factor,
    skill_multiplier,
)
from .wind import calculate_wind_effects, wind_gradient

logger = logging.getLogger(__name__)

GRAVITY_FPS2 = 32.174
MPH_TO_FPS = 1.467
MAX_WIND_SPEED_MPH = 50.0
GRADIENT_HEIGHT_MULTIPLIER = 3.0


@dataclass(frozen=True)
class ShotConditions:
    temperature: float = STANDARD_TEMPERATURE_F
    altitude: float = 0.0
    pressure: float = STANDARD_PRESSURE_MB
    humidity: float = STANDARD_HUMIDITY
    wind_speed: float | None = None
    wind_direction: float | None = None


def validate_wind_inputs(wind_speed: float | None, wind_direction: float | None) -> None:
    if wind_speed is not None:
        if wind_speed < 0:
            raise errors.invalid_input(
                "Wind speed cannot be negative", "wind_speed", wind_speed
            )
        if wind_speed > MAX_WIND_SPEED_MPH:
            raise errors.invalid_input(
                "Wind speed exceeds maximum supported value (50 mph)",
                "wind_speed",
                wind_speed,
            )
    if wind_direction is not None and not 0 <= wind_direction < 360:
        raise errors.invalid_input(
            "Wind direction must be between 0 and 359 degrees",
            "wind_direction",
            wind_direction,
        )


def flight_time(club: ClubAerodynamicProfile, ball: BallProfile) -> float:
    """Projectile hang time in seconds from ball speed and launch angle."""
    velocity_fps = club.ball_speed * MPH_TO_FPS * ball.speed_factor
    return 2 * velocity_fps * math.sin(math.radians(club.launch_angle)) / GRAVITY_FPS2


def _round_tenth(value: float) -> float:
    # half-up, so 0.05 -> 0.1 and -0.05 -> 0.0
    return math.floor(value * 10 + 0.5) / 10


def compute_shot(
    conditions: ShotConditions,
    club: str,
    ball: str,
    target_yardage: float,
    skill_level: SkillLevel | str,
) -> ShotResult:
    """Return carry and lateral movement for one club under *conditions*."""
    if target_yardage is None or not target_yardage > 0:
        raise errors.invalid_input(
            "Target yardage must be positive", "target_yardage", target_yardage
        )
    try:
        skill = SkillLevel(skill_level)
    except ValueError as exc:
        raise errors.invalid_input(
            f"Unknown skill level: {skill_level}", "skill_level", skill_level
        ) from exc
    validate_wind_inputs(conditions.wind_speed, conditions.wind_direction)

    club_profile = get_club_profile(club)
    ball_profile = get_ball_profile(ball)
    hang_time = flight_time(club_profile, ball_profile)

    adjusted = target_yardage * environmental_factor(
        conditions.temperature,
        conditions.pressure,
        conditions.humidity,
        conditions.altitude,
    )
    adjusted *= skill_multiplier(skill)

    lateral = 0.0
    if conditions.wind_speed is not None and conditions.wind_direction is not None:
        gradient = wind_gradient(club_profile.max_height * GRADIENT_HEIGHT_MULTIPLIER)
        effects = calculate_wind_effects(
            adjusted,
            club_profile,
            ball_profile,
            conditions.wind_speed * gradient,
            math.radians(conditions.wind_direction),
            hang_time,
        )
        adjusted -= effects.distance_effect
        lateral = effects.lateral_movement

    if not (math.isfinite(adjusted) and math.isfinite(lateral)):
        raise errors.calculation_failed(
            "Yardage model produced a non-finite result",
            {"club": club, "target_yardage": target_yardage},
        )

    return ShotResult(
        carry_distance=_round_tenth(adjusted),
        lateral_movement=_round_tenth(lateral),
    )


class YardageModel:
    """Stateful wrapper holding one conditions snapshot and a ball model."""

    def __init__(self, ball_model: str = DEFAULT_BALL_MODEL) -> None:
        get_ball_profile(ball_model)
        self._ball_model = ball_model
        self._conditions = ShotConditions()

    @property
    def conditions(self) -> ShotConditions:
        return self._conditions

    @property
    def ball_model(self) -> str:
        return self._ball_model

    @staticmethod
    def club_exists(club_key: str) -> bool:
        return club_key in CLUB_DATABASE

    def set_ball_model(self, model: str) -> None:
        get_ball_profile(model)
        self._ball_model = model

    def set_conditions(
        self,
        temperature: float,
        altitude: float,
        wind_speed: float,
        wind_direction: float,
        pressure: float,
        humidity: float,
    ) -> None:
        validate_wind_inputs(wind_speed, wind_direction)
        self._conditions = ShotConditions(
            temperature=temperature,
            altitude=altitude,
            pressure=pressure,
            humidity=humidity,
            wind_speed=wind_speed,
            wind_direction=wind_direction,
        )

    def calculate_adjusted_yardage(
        self, target_yardage: float, skill_level: SkillLevel | str, club: str
    ) -> ShotResult:
        result = compute_shot(
            self._conditions, club, self._ball_model, target_yardage, skill_level
        )
        logger.debug(
            "adjusted %s yd with %s -> %s yd, lateral %s yd",
            target_yardage,
            club,
            result.carry_distance,
            result.lateral_movement,
        )
        return result


__all__ = [
    "GRAVITY_FPS2",
    "MAX_WIND_SPEED_MPH",
    "ShotConditions",
    "YardageModel",
    "compute_shot",
    "flight_time",
    "validate_wind_inputs",
]
