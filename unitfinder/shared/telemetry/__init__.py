"""Shared telemetry: logging setup and OpenTelemetry config."""

from unitfinder.shared.telemetry.logging import setup_logging
from unitfinder.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    get_tracer,
    set_telemetry,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "get_tracer",
]
