"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; only wiring of
infrastructure (logging, shared search engine HTTP client, telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from unitfinder.core.config import get_settings
from unitfinder.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, shared search engine HTTP client, telemetry (if
    enabled). Shutdown order: HTTP client close, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    # Shared HTTP client for all engine calls (connection reuse). No retries.
    app.state.search_engine_http = httpx.AsyncClient(
        timeout=settings.search_engine_timeout_seconds
    )
    logger.info("Search engine client ready: %s", settings.search_engine_url)

    if settings.telemetry_enabled:
        from unitfinder.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "search_engine_http", None) is not None:
        await app.state.search_engine_http.aclose()
        app.state.search_engine_http = None
        logger.info("Search engine HTTP client closed")

    from unitfinder.shared.telemetry.telemetry import get_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
