from __future__ import annotations

import os

from prometheus_client import CollectorRegistry, generate_latest

REGISTRY = CollectorRegistry()

BUILD_VERSION = os.getenv("BUILD_VERSION", "dev")
GIT_SHA = os.getenv("GIT_SHA", "unknown")


def render_latest() -> bytes:
    """Serialise the engine registry in the Prometheus text format."""
    return generate_latest(REGISTRY)


__all__ = ["BUILD_VERSION", "GIT_SHA", "REGISTRY", "render_latest"]
