"""Query relay use case: forward a search body and hand back the engine's answer as-is."""

from __future__ import annotations

import logging

import httpx

from unitfinder.domain.enums import Collection
from unitfinder.infrastructure.search_engine import SearchEngineClient

logger = logging.getLogger(__name__)

# Hop-by-hop headers and headers that no longer describe the body once
# httpx has decoded it; the ASGI server sets its own framing.
_NON_RELAYED_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
        "content-length",
        "content-encoding",
    }
)


def relay_headers(upstream: httpx.Response) -> dict[str, str]:
    """Return the upstream headers that are safe to reproduce on the relayed response."""
    return {
        name: value
        for name, value in upstream.headers.items()
        if name.lower() not in _NON_RELAYED_HEADERS
    }


class SearchRelayService:
    """Transparent, credential-injecting relay for search queries.

    No validation, transformation, caching or retry of the body.
    """

    def __init__(self, engine: SearchEngineClient) -> None:
        self.engine = engine

    async def search(self, collection: Collection, body: bytes) -> httpx.Response:
        """Forward body to the collection's search endpoint and return the raw response."""
        response = await self.engine.search(collection, body)
        if response.status_code >= 400:
            logger.info(
                "Search engine returned %s for %s search",
                response.status_code,
                collection.value,
            )
        return response
