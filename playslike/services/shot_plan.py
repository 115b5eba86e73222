"""Sustained-versus-gust shot planning on top of the wind calculator."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from playslike.bag import ClubBag
from playslike.models import EnvironmentalConditions, WindCalculationResult
from playslike.units import DistanceUnit, format_distance

from .wind_calculator import CalculatorLogger, calculate_wind_effect

_LOG = logging.getLogger(__name__)


class PlanLine(BaseModel):
    adjusted_yardage: int = Field(alias="adjustedYardage")
    lateral_offset: int = Field(alias="lateralOffset")
    recommended_club: Optional[str] = Field(default=None, alias="recommendedClub")
    wind_effect: float = Field(default=0.0, alias="windEffect")
    environmental_effect: float = Field(default=0.0, alias="environmentalEffect")

    model_config = ConfigDict(populate_by_name=True)


class ShotPlan(BaseModel):
    club: str
    sustained: PlanLine
    gust: PlanLine


def _plan_line(
    target_yardage: float, result: WindCalculationResult | None, bag: ClubBag
) -> PlanLine:
    adjusted = round(result.total_distance) if result else round(target_yardage)
    recommended = bag.recommended_club(adjusted)
    return PlanLine(
        adjusted_yardage=adjusted,
        lateral_offset=round(result.lateral_effect) if result else 0,
        recommended_club=recommended.name if recommended else None,
        wind_effect=result.wind_effect if result else 0.0,
        environmental_effect=result.environmental_effect if result else 0.0,
    )


def plan_shot(
    target_yardage: float,
    wind_angle: float,
    conditions: EnvironmentalConditions,
    bag: ClubBag,
    *,
    logger: CalculatorLogger | None = None,
) -> ShotPlan | None:
    """Plan the shot for the sustained wind and for the gust.

    Returns ``None`` when the bag has no enabled club. A line whose wind
    calculation is unavailable falls back to the raw target.
    """
    log = logger or _LOG
    club = bag.recommended_club(target_yardage)
    if club is None:
        log.warning("No enabled club for %s yards", target_yardage)
        return None

    sustained = calculate_wind_effect(
        target_yardage,
        conditions.wind_speed,
        wind_angle,
        club.key,
        conditions,
        logger=log,
    )
    gust_conditions = conditions.model_copy(update={"wind_speed": conditions.wind_gust})
    gust = calculate_wind_effect(
        target_yardage,
        conditions.wind_gust,
        wind_angle,
        club.key,
        gust_conditions,
        logger=log,
    )
    return ShotPlan(
        club=club.name,
        sustained=_plan_line(target_yardage, sustained, bag),
        gust=_plan_line(target_yardage, gust, bag),
    )


def aim_direction(offset: float, distance_unit: DistanceUnit = "yards") -> str:
    """Render a lateral offset as aim advice; positive offsets aim right."""
    if abs(offset) < 1:
        return "On target"
    distance = format_distance(abs(offset), distance_unit)
    side = "RIGHT" if offset > 0 else "LEFT"
    return f"Aim {distance.value} {distance.short_label} {side}"


__all__ = ["PlanLine", "ShotPlan", "aim_direction", "plan_shot"]
