"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Upstream error detail never reaches the caller.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from unitfinder.core.config import get_settings
from unitfinder.domain.exceptions import (
    DocumentNotFoundException,
    UnitFinderException,
    UpstreamErrorException,
    UpstreamUnavailableException,
)

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "UPSTREAM_UNAVAILABLE": 502,
    "DOCUMENT_NOT_FOUND": 404,
}


def _unitfinder_exception_handler(
    request: Request, exc: UnitFinderException
) -> JSONResponse:
    """Return JSON from UnitFinderException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _document_not_found_handler(
    request: Request, exc: DocumentNotFoundException
) -> Response:
    """Return 404 with an empty body."""
    return Response(status_code=404, content=b"")


def _upstream_error_handler(request: Request, exc: UpstreamErrorException) -> JSONResponse:
    """Relay the upstream status code with a generic body."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _upstream_unavailable_handler(
    request: Request, exc: UpstreamUnavailableException
) -> JSONResponse:
    """Return 502; the transport error is logged, not returned."""
    logger.error("Search engine unavailable (%s): %s", exc.url, exc.reason)
    return JSONResponse(status_code=502, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. The most specific domain handlers are
    registered alongside the UnitFinderException fallback; Starlette picks
    the closest class in the MRO.
    """
    app.add_exception_handler(DocumentNotFoundException, _document_not_found_handler)
    app.add_exception_handler(UpstreamErrorException, _upstream_error_handler)
    app.add_exception_handler(UpstreamUnavailableException, _upstream_unavailable_handler)
    app.add_exception_handler(UnitFinderException, _unitfinder_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
