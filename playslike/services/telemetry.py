"""Telemetry helpers for the wind calculator."""

from __future__ import annotations

import os
from typing import Any, Mapping

from prometheus_client import Counter, Histogram

from playslike.config import get_settings
from playslike.metrics import REGISTRY

_calculation_counter = Counter(
    "playslike_wind_calculations_total",
    "Total wind calculations by mode and outcome",
    labelnames=("mode", "outcome"),
    registry=REGISTRY,
)

_latency_histogram = Histogram(
    "playslike_wind_calculation_latency_ms",
    "Latency of wind calculations in milliseconds",
    labelnames=("mode",),
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 25.0),
    registry=REGISTRY,
)

_iterations_histogram = Histogram(
    "playslike_recursive_iterations",
    "Iterations used by recursive club convergence",
    labelnames=("reason",),
    buckets=(1, 2, 3, 5, 10),
    registry=REGISTRY,
)


def record_calculation(*, mode: str, outcome: str, duration_ms: float) -> None:
    """Publish Prometheus metrics for one calculation."""
    if not get_settings().metrics_enabled:
        return
    _calculation_counter.labels(mode=mode, outcome=outcome).inc()
    _latency_histogram.labels(mode=mode).observe(duration_ms)


def record_convergence(*, reason: str, iterations: int) -> None:
    if not get_settings().metrics_enabled:
        return
    _iterations_histogram.labels(reason=reason).observe(iterations)


def build_structured_log_payload(
    *,
    club: str,
    target_yardage: float,
    result: Mapping[str, Any] | None,
    duration_ms: float | None = None,
) -> dict:
    """Build a structured log record for downstream sinks."""
    payload = {
        "club": club,
        "target_yardage": target_yardage,
        "result": dict(result) if result is not None else None,
        "build_version": os.getenv("BUILD_VERSION", "unknown"),
        "git_sha": os.getenv("GIT_SHA", "unknown"),
    }
    if duration_ms is not None:
        payload["duration_ms"] = duration_ms
    return payload


__all__ = [
    "build_structured_log_payload",
    "record_calculation",
    "record_convergence",
]
