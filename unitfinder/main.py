"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from unitfinder.api.router import api_router
from unitfinder.core.config import get_settings
from unitfinder.core.constants import HEADER_PACKAGE_NAME, HEADER_UNIT_TYPE
from unitfinder.core.exception_handlers import register_exception_handlers
from unitfinder.core.lifespan import create_lifespan
from unitfinder.core.limiter import limiter
from unitfinder.middleware import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Middleware: first added = outermost. Order: timeout → request ID → correlation ID → security → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[HEADER_PACKAGE_NAME, HEADER_UNIT_TYPE, "content-disposition"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CorrelationIDMiddleware,
        header_name=settings.correlation_id_header,
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router)

    return app


app = create_app()
