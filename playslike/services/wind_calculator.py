"""Decompose plays-like distance into environmental and wind components."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping, Optional, Union

from playslike import errors
from playslike.config import get_settings
from playslike.models import (
    ClubRecommendation,
    ConvergenceReason,
    EnvironmentalConditions,
    IterationDetail,
    RecursiveWindCalculationResult,
    WindCalculationResult,
)
from playslike.physics.clubs import club_exists, normalize_club_name
from playslike.physics.environment import SkillLevel
from playslike.physics.yardage import YardageModel, validate_wind_inputs

from .telemetry import (
    build_structured_log_payload,
    record_calculation,
    record_convergence,
)

_LOG = logging.getLogger(__name__)

CalculatorLogger = Union[logging.Logger, logging.LoggerAdapter]
Recommendation = Union[ClubRecommendation, Mapping[str, Any], Any]
ClubRecommendationFunction = Callable[[float], Optional[Recommendation]]
ConvergenceThreshold = Union[float, Callable[[float], float]]


def _context(**fields: Any) -> dict[str, Any]:
    return {"wind_calculator": fields}


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def _is_valid_target(target_yardage: float | None) -> bool:
    return target_yardage is not None and target_yardage > 0


def calculate_wind_effect(
    target_yardage: float,
    wind_speed: float,
    wind_angle: float,
    club_name: str,
    conditions: EnvironmentalConditions,
    *,
    logger: CalculatorLogger | None = None,
    ball_model: str | None = None,
) -> WindCalculationResult | None:
    """Return the wind/environment decomposition, or ``None`` when it cannot be computed.

    ``wind_angle`` is relative to the target line in the model convention
    (0 = tailwind). The model runs twice for the same club: once without
    wind for the environmental baseline, once with the actual wind.
    """
    log = logger or _LOG
    started = time.perf_counter()
    result = _wind_effect(
        target_yardage, wind_speed, wind_angle, club_name, conditions, log, ball_model
    )
    duration_ms = _elapsed_ms(started)
    record_calculation(
        mode="single",
        outcome="ok" if result is not None else "unavailable",
        duration_ms=duration_ms,
    )
    if result is not None:
        log.debug(
            "wind calculation completed",
            extra=_context(
                **build_structured_log_payload(
                    club=club_name,
                    target_yardage=target_yardage,
                    result=result.model_dump(),
                    duration_ms=duration_ms,
                )
            ),
        )
    return result


def _wind_effect(
    target_yardage: float,
    wind_speed: float,
    wind_angle: float,
    club_name: str,
    conditions: EnvironmentalConditions,
    log: CalculatorLogger,
    ball_model: str | None,
) -> WindCalculationResult | None:
    if not _is_valid_target(target_yardage):
        log.error(
            "Invalid target yardage", extra=_context(target_yardage=target_yardage)
        )
        return None
    if wind_speed is None or wind_speed < 0:
        log.error("Invalid wind speed", extra=_context(wind_speed=wind_speed))
        return None
    if wind_angle is None:
        log.error("Invalid wind angle", extra=_context(wind_angle=wind_angle))
        return None

    club_key = normalize_club_name(club_name)
    if not club_key or not YardageModel.club_exists(club_key):
        log.error(
            "Invalid club name or club does not exist",
            extra=_context(club_name=club_name, club_key=club_key),
        )
        return None

    try:
        model = YardageModel(ball_model or get_settings().ball_model)
        model.set_conditions(
            conditions.temperature,
            conditions.altitude,
            0,
            0,
            conditions.pressure,
            conditions.humidity,
        )
        env_result = model.calculate_adjusted_yardage(
            target_yardage, SkillLevel.PROFESSIONAL, club_key
        )

        model.set_conditions(
            conditions.temperature,
            conditions.altitude,
            wind_speed,
            wind_angle % 360,
            conditions.pressure,
            conditions.humidity,
        )
        wind_result = model.calculate_adjusted_yardage(
            target_yardage, SkillLevel.PROFESSIONAL, club_key
        )
    except errors.WindError as exc:
        log.error(
            "Error in wind effect calculation: %s",
            exc.message,
            extra=_context(
                **{
                    **exc.context,
                    "error_type": exc.type.value,
                    "club": club_key,
                    "target_yardage": target_yardage,
                    "wind_speed": wind_speed,
                    "wind_angle": wind_angle,
                }
            ),
        )
        return None

    wind_carry_change = wind_result.carry_distance - env_result.carry_distance
    return WindCalculationResult(
        environmental_effect=-(env_result.carry_distance - target_yardage),
        wind_effect=-wind_carry_change,
        lateral_effect=wind_result.lateral_movement,
        total_distance=target_yardage - wind_carry_change,
        carry_distance=wind_result.carry_distance,
    )


def adaptive_convergence_threshold(distance: float) -> float:
    """Tighter tolerance for short shots, where club gaps are smaller."""
    if distance < 100:
        return 1.0
    if distance < 200:
        return 2.0
    return 3.0


def _recommendation_name(recommendation: Recommendation | None) -> str | None:
    if recommendation is None:
        return None
    if isinstance(recommendation, Mapping):
        name = recommendation.get("name")
    else:
        name = getattr(recommendation, "name", None)
    return name or None


def _same_club(left: str, right: str) -> bool:
    return (normalize_club_name(left) or left) == (normalize_club_name(right) or right)


def _resolve_threshold(threshold: ConvergenceThreshold, target_yardage: float) -> float:
    if callable(threshold):
        return float(threshold(target_yardage))
    return float(threshold)


def calculate_wind_effect_recursive(
    target_yardage: float,
    wind_speed: float,
    wind_angle: float,
    club_name: str,
    conditions: EnvironmentalConditions,
    get_recommended_club: ClubRecommendationFunction,
    *,
    max_iterations: int | None = None,
    convergence_threshold: ConvergenceThreshold = adaptive_convergence_threshold,
    include_iteration_details: bool | None = None,
    logger: CalculatorLogger | None = None,
    ball_model: str | None = None,
) -> RecursiveWindCalculationResult:
    """Iterate club selection until the plays-like distance settles.

    Raises :class:`~playslike.errors.WindError` instead of returning ``None``.
    """
    log = logger or _LOG
    settings = get_settings()
    if max_iterations is None:
        max_iterations = settings.max_iterations
    if include_iteration_details is None:
        include_iteration_details = settings.include_iteration_details

    if not _is_valid_target(target_yardage):
        raise errors.invalid_input(
            "Invalid target yardage", "target_yardage", target_yardage
        )
    if wind_speed is None or wind_speed < 0:
        raise errors.invalid_input("Invalid wind speed", "wind_speed", wind_speed)
    validate_wind_inputs(wind_speed, None)
    if not club_name:
        raise errors.invalid_club(
            club_name or "undefined", {"message": "Club name is required"}
        )
    if not callable(get_recommended_club):
        raise errors.invalid_parameters(
            "Valid club recommendation function is required",
            {"function_type": type(get_recommended_club).__name__},
        )
    if not isinstance(max_iterations, int) or max_iterations < 1:
        raise errors.invalid_parameters(
            "max_iterations must be a positive integer",
            {"max_iterations": max_iterations},
        )
    if not callable(convergence_threshold) and not isinstance(
        convergence_threshold, (int, float)
    ):
        raise errors.invalid_parameters(
            "convergence_threshold must be a number or a callable",
            {"threshold_type": type(convergence_threshold).__name__},
        )

    started = time.perf_counter()
    current_club = club_name
    previous_distance = float(target_yardage)
    current_distance = float(target_yardage)
    final_result: WindCalculationResult | None = None
    details: list[IterationDetail] = []
    iterations = 0
    reason = ConvergenceReason.MAX_ITERATIONS

    log.info(
        "Starting recursive wind calculation for %s yards with %smph wind at %s°",
        target_yardage,
        wind_speed,
        wind_angle,
        extra=_context(initial_club=club_name),
    )

    for iteration in range(1, max_iterations + 1):
        iterations = iteration
        club_key = normalize_club_name(current_club)
        if club_key is None or not club_exists(club_key):
            record_calculation(
                mode="recursive", outcome="error", duration_ms=_elapsed_ms(started)
            )
            raise errors.invalid_club(current_club, {"iteration": iteration})

        result = calculate_wind_effect(
            target_yardage,
            wind_speed,
            wind_angle,
            current_club,
            conditions,
            logger=log,
            ball_model=ball_model,
        )
        if result is None:
            log.error("Club calculation failed for %s", current_club)
            record_calculation(
                mode="recursive", outcome="error", duration_ms=_elapsed_ms(started)
            )
            raise errors.calculation_failed(
                f"Calculation failed for club {current_club}",
                {"iteration": iteration, "club": current_club},
            )
        final_result = result

        current_distance = (
            target_yardage + result.environmental_effect + result.wind_effect
        )
        delta = abs(current_distance - previous_distance)
        if include_iteration_details:
            details.append(
                IterationDetail(
                    iteration=iteration,
                    club=current_club,
                    playing_distance=current_distance,
                    environmental_effect=result.environmental_effect,
                    wind_effect=result.wind_effect,
                    convergence_delta=delta,
                )
            )
        log.info(
            "Iteration %d: %s yards plays like %d yards with %s",
            iteration,
            target_yardage,
            round(current_distance),
            current_club,
            extra=_context(
                delta=delta,
                environmental_effect=result.environmental_effect,
                wind_effect=result.wind_effect,
            ),
        )

        threshold = _resolve_threshold(convergence_threshold, target_yardage)
        if delta < threshold:
            log.info("Converged - distance change under threshold (%s yards)", threshold)
            reason = ConvergenceReason.DISTANCE_THRESHOLD
            break

        recommended = _recommendation_name(get_recommended_club(current_distance))
        if recommended is None:
            log.warning("No recommended club for %s yards", current_distance)
            reason = ConvergenceReason.NO_CLUB_RECOMMENDATION
            break
        if _same_club(recommended, current_club):
            log.info("Club selection stable at %s", current_club)
            reason = ConvergenceReason.CLUB_STABLE
            break

        previous_distance = current_distance
        current_club = recommended
        log.info("Switching to %s for next iteration", current_club)
    else:
        log.warning(
            "Reached maximum iterations (%d) without convergence", max_iterations
        )

    if final_result is None:
        raise errors.calculation_failed(
            "Recursive calculation failed to produce a result"
        )

    record_calculation(
        mode="recursive", outcome="ok", duration_ms=_elapsed_ms(started)
    )
    record_convergence(reason=reason.value, iterations=iterations)

    return RecursiveWindCalculationResult(
        **final_result.model_dump(),
        initial_club=club_name,
        final_club=current_club,
        iterations=iterations,
        effective_playing_distance=current_distance,
        iteration_details=details if include_iteration_details else None,
        converged_reason=reason,
    )


__all__ = [
    "ClubRecommendationFunction",
    "adaptive_convergence_threshold",
    "calculate_wind_effect",
    "calculate_wind_effect_recursive",
]
