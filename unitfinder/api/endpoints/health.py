"""Health check endpoints, used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from unitfinder.api.dependencies import get_search_engine
from unitfinder.infrastructure.search_engine import SearchEngineClient
from unitfinder.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Search engine not reachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    engine: Annotated[SearchEngineClient, Depends(get_search_engine)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 when the search engine's /health answers 200; 503 otherwise."""
    if await engine.is_healthy():
        return ReadinessResponse()
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            status="not_ready",
            message="Search engine is not healthy",
        ).model_dump(),
    )
