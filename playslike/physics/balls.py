from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from playslike import errors

DEFAULT_BALL_MODEL = "tour_premium"


@dataclass(frozen=True)
class BallProfile:
    name: str
    compression: int
    speed_factor: float
    spin_factor: float
    temp_sensitivity: float
    dimple_pattern: str  # cosmetic


BALL_MODELS: Mapping[str, BallProfile] = MappingProxyType(
    {
        "tour_premium": BallProfile(
            name="Tour Premium",
            compression=95,
            speed_factor=1.00,
            spin_factor=1.05,
            temp_sensitivity=1.0,
            dimple_pattern="hexagonal",
        ),
    }
)


def get_ball_profile(model: str) -> BallProfile:
    profile = BALL_MODELS.get(model)
    if profile is None:
        raise errors.invalid_input(f"Unknown ball model: {model}", "ball_model", model)
    return profile


__all__ = ["BALL_MODELS", "BallProfile", "DEFAULT_BALL_MODEL", "get_ball_profile"]
