"""Value objects exchanged with UI collaborators."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from playslike.physics.environment import (
    STANDARD_HUMIDITY,
    STANDARD_PRESSURE_MB,
    STANDARD_TEMPERATURE_F,
    calculate_air_density,
)


class EnvironmentalConditions(BaseModel):
    temperature: float = STANDARD_TEMPERATURE_F  # °F
    humidity: float = Field(default=STANDARD_HUMIDITY, ge=0, le=100)
    pressure: float = Field(default=STANDARD_PRESSURE_MB, gt=0)  # station, mb
    altitude: float = 0.0  # ft
    wind_speed: float = Field(default=0.0, ge=0, alias="windSpeed")
    wind_direction: float = Field(default=0.0, ge=0, lt=360, alias="windDirection")
    wind_gust: float = Field(default=0.0, ge=0, alias="windGust")
    density: float = Field(..., gt=0)  # kg/m³

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _derive_density(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("density") is not None:
            return data
        try:
            density = calculate_air_density(
                float(data.get("temperature", STANDARD_TEMPERATURE_F)),
                float(data.get("pressure", STANDARD_PRESSURE_MB)),
                float(data.get("humidity", STANDARD_HUMIDITY)),
            )
        except (TypeError, ValueError, ZeroDivisionError, OverflowError):
            return data
        return {**data, "density": density}


class ShotResult(BaseModel):
    carry_distance: float = Field(alias="carryDistance")
    lateral_movement: float = Field(alias="lateralMovement")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class WindCalculationResult(BaseModel):
    environmental_effect: float = Field(alias="environmentalEffect")
    wind_effect: float = Field(alias="windEffect")
    lateral_effect: float = Field(alias="lateralEffect")
    total_distance: float = Field(alias="totalDistance")
    carry_distance: float = Field(alias="carryDistance")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ConvergenceReason(str, Enum):
    DISTANCE_THRESHOLD = "distance_threshold"
    CLUB_STABLE = "club_stable"
    NO_CLUB_RECOMMENDATION = "no_club_recommendation"
    MAX_ITERATIONS = "max_iterations"


class IterationDetail(BaseModel):
    iteration: int
    club: str
    playing_distance: float = Field(alias="playingDistance")
    environmental_effect: float = Field(alias="environmentalEffect")
    wind_effect: float = Field(alias="windEffect")
    convergence_delta: float = Field(alias="convergenceDelta")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RecursiveWindCalculationResult(WindCalculationResult):
    initial_club: str = Field(alias="initialClub")
    final_club: str = Field(alias="finalClub")
    iterations: int = Field(..., ge=1)
    effective_playing_distance: float = Field(alias="effectivePlayingDistance")
    iteration_details: Optional[List[IterationDetail]] = Field(
        default=None, alias="iterationDetails"
    )
    converged_reason: ConvergenceReason = Field(alias="convergedReason")


class ClubRecommendation(BaseModel):
    name: str
    normal_yardage: float = Field(alias="normalYardage")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


__all__ = [
    "ClubRecommendation",
    "ConvergenceReason",
    "EnvironmentalConditions",
    "IterationDetail",
    "RecursiveWindCalculationResult",
    "ShotResult",
    "WindCalculationResult",
]
