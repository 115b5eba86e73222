"""Flight-physics approximation: tables, environment and wind."""

from .balls import BALL_MODELS, BallProfile, get_ball_profile
from .clubs import (
    CLUB_DATABASE,
    ClubAerodynamicProfile,
    club_exists,
    get_club_profile,
    normalize_club_name,
)
from .environment import SkillLevel, calculate_air_density, environmental_factor
from .wind import WindEffects, calculate_wind_effects, wind_components

__all__ = [
    "BALL_MODELS",
    "BallProfile",
    "CLUB_DATABASE",
    "ClubAerodynamicProfile",
    "SkillLevel",
    "WindEffects",
    "calculate_air_density",
    "calculate_wind_effects",
    "club_exists",
    "environmental_factor",
    "get_ball_profile",
    "get_club_profile",
    "normalize_club_name",
    "wind_components",
]
