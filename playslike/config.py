"""Configuration helpers for the plays-like engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any


__all__ = [
    "Settings",
    "coerce_boolish",
    "env_bool",
    "get_settings",
    "reset_settings_cache",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    max_iterations: int = 3
    ball_model: str = "tour_premium"
    include_iteration_details: bool = False
    metrics_enabled: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached engine settings."""

    return Settings(
        max_iterations=max(1, _int_env("PLAYSLIKE_MAX_ITERATIONS", 3)),
        ball_model=(os.getenv("PLAYSLIKE_BALL_MODEL") or "tour_premium").strip(),
        include_iteration_details=env_bool("PLAYSLIKE_ITERATION_DETAILS", False),
        metrics_enabled=env_bool("PLAYSLIKE_METRICS_ENABLED", True),
    )


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def env_bool(name: str, default: bool = False) -> bool:
    parsed = coerce_boolish(os.getenv(name))
    return default if parsed is None else parsed


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def coerce_boolish(value: Any) -> bool | None:
    """Attempt to coerce *value* into a boolean."""

    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return None
