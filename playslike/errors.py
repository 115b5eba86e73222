"""Typed failures raised by the yardage model and wind calculator."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping


class WindErrorType(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CLUB = "INVALID_CLUB"
    INVALID_PARAMETERS = "INVALID_PARAMETERS"
    CALCULATION_FAILED = "CALCULATION_FAILED"
    # Reserved for collaborators (compass/GPS, weather fetch).
    SENSOR_UNAVAILABLE = "SENSOR_UNAVAILABLE"
    NETWORK_ERROR = "NETWORK_ERROR"


USER_MESSAGES: Mapping[WindErrorType, str] = {
    WindErrorType.INVALID_INPUT: "Please check your input values and try again.",
    WindErrorType.INVALID_CLUB: (
        "The selected club is not recognized. Please select a different club."
    ),
    WindErrorType.INVALID_PARAMETERS: (
        "Invalid calculation parameters. Please try again."
    ),
    WindErrorType.CALCULATION_FAILED: (
        "Unable to calculate wind effect. Please try again."
    ),
    WindErrorType.SENSOR_UNAVAILABLE: (
        "Required sensor is not available on this device."
    ),
    WindErrorType.NETWORK_ERROR: (
        "Network error. Please check your connection and try again."
    ),
}

DEFAULT_USER_MESSAGE = "An unexpected error occurred. Please try again."


class WindError(Exception):
    """Failure carrying a machine-readable type and diagnostic context."""

    def __init__(
        self,
        error_type: WindErrorType,
        message: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.type = error_type
        self.message = message
        self.context: dict[str, Any] = dict(context or {})

    def __repr__(self) -> str:
        return f"WindError({self.type.value}, {self.message!r}, {self.context!r})"


def invalid_input(message: str, field: str, value: Any) -> WindError:
    return WindError(
        WindErrorType.INVALID_INPUT, message, {"field": field, "value": value}
    )


def invalid_club(
    club_name: str, context: Mapping[str, Any] | None = None
) -> WindError:
    return WindError(
        WindErrorType.INVALID_CLUB,
        f"Invalid or unknown club: {club_name}",
        {"club_name": club_name, **(context or {})},
    )


def invalid_parameters(
    message: str, context: Mapping[str, Any] | None = None
) -> WindError:
    return WindError(WindErrorType.INVALID_PARAMETERS, message, context)


def calculation_failed(
    message: str, context: Mapping[str, Any] | None = None
) -> WindError:
    return WindError(WindErrorType.CALCULATION_FAILED, message, context)


def sensor_unavailable(
    sensor: str, context: Mapping[str, Any] | None = None
) -> WindError:
    return WindError(
        WindErrorType.SENSOR_UNAVAILABLE,
        f"{sensor} sensor is not available on this device",
        {"sensor": sensor, **(context or {})},
    )


def network_error(message: str, context: Mapping[str, Any] | None = None) -> WindError:
    return WindError(WindErrorType.NETWORK_ERROR, message, context)


def is_wind_error(error: object) -> bool:
    return isinstance(error, WindError)


def get_user_message(error: BaseException) -> str:
    if isinstance(error, WindError):
        return USER_MESSAGES.get(error.type, DEFAULT_USER_MESSAGE)
    return DEFAULT_USER_MESSAGE


def to_error_envelope(error: WindError) -> dict[str, Any]:
    """Return the ``{error_code, message, details}`` shape surfaced to the UI."""
    return {
        "error_code": error.type.value,
        "message": get_user_message(error),
        "details": dict(error.context) or None,
    }


__all__ = [
    "DEFAULT_USER_MESSAGE",
    "USER_MESSAGES",
    "WindError",
    "WindErrorType",
    "calculation_failed",
    "get_user_message",
    "invalid_club",
    "invalid_input",
    "invalid_parameters",
    "is_wind_error",
    "network_error",
    "sensor_unavailable",
    "to_error_envelope",
]
