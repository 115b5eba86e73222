from .shot_plan import PlanLine, ShotPlan, aim_direction, plan_shot
from .wind_calculator import (
    adaptive_convergence_threshold,
    calculate_wind_effect,
    calculate_wind_effect_recursive,
)

__all__ = [
    "PlanLine",
    "ShotPlan",
    "adaptive_convergence_threshold",
    "aim_direction",
    "calculate_wind_effect",
    "calculate_wind_effect_recursive",
    "plan_shot",
]
