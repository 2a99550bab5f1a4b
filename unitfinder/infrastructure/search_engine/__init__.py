"""Search engine adapter: credentialed request builders and async client."""

from unitfinder.infrastructure.search_engine.client import (
    SearchEngineClient,
    build_document_request,
    build_health_request,
    build_search_request,
)

__all__ = [
    "SearchEngineClient",
    "build_document_request",
    "build_health_request",
    "build_search_request",
]
