"""Plays-like distance engine: environment, wind and club convergence."""

import logging

from .models import (
    ConvergenceReason,
    EnvironmentalConditions,
    RecursiveWindCalculationResult,
    ShotResult,
    WindCalculationResult,
)
from .errors import WindError, WindErrorType
from .physics.environment import SkillLevel
from .physics.yardage import YardageModel, compute_shot
from .services.wind_calculator import (
    calculate_wind_effect,
    calculate_wind_effect_recursive,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConvergenceReason",
    "EnvironmentalConditions",
    "RecursiveWindCalculationResult",
    "ShotResult",
    "SkillLevel",
    "WindCalculationResult",
    "WindError",
    "WindErrorType",
    "YardageModel",
    "calculate_wind_effect",
    "calculate_wind_effect_recursive",
    "compute_shot",
]
