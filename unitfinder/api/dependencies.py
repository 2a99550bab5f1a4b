"""Gateway dependencies (composition root).

Routes get their services from here; nothing constructs the engine client
by hand. Tests replace get_search_engine via app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Request

from unitfinder.application.services import SearchRelayService, UnitFileService
from unitfinder.core.config import get_settings
from unitfinder.infrastructure.search_engine import SearchEngineClient


def get_search_engine(request: Request) -> SearchEngineClient:
    """Engine client on the shared HTTP client created in the lifespan."""
    settings = get_settings()
    return SearchEngineClient(
        http=request.app.state.search_engine_http,
        base_url=settings.search_engine_url,
        api_key=settings.search_engine_key,
    )


def get_search_relay_service(
    engine: Annotated[SearchEngineClient, Depends(get_search_engine)],
) -> SearchRelayService:
    """Query relay use case."""
    return SearchRelayService(engine)


def get_unit_file_service(
    engine: Annotated[SearchEngineClient, Depends(get_search_engine)],
) -> UnitFileService:
    """Unit file retrieval use case."""
    return UnitFileService(engine)
