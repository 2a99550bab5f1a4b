"""Search engine REST client (Meilisearch API shape).

The only component that knows the engine credential. Outbound requests are
built by pure functions (collection, body) -> httpx.Request so the
credential injection can be checked without a network; sending happens on a
shared httpx.AsyncClient owned by the application lifespan.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from pydantic import SecretStr

from unitfinder.domain.enums import Collection, UnitCollection
from unitfinder.domain.exceptions import UpstreamUnavailableException

logger = logging.getLogger(__name__)
_tracer = trace.get_tracer(__name__)


def _auth_headers(api_key: SecretStr) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key.get_secret_value()}"}


def build_search_request(
    base_url: str,
    api_key: SecretStr,
    collection: Collection,
    body: bytes,
) -> httpx.Request:
    """Return the POST /indexes/{collection}/search request carrying body unmodified."""
    headers = _auth_headers(api_key)
    headers["Content-Type"] = "application/json"
    return httpx.Request(
        "POST",
        f"{base_url}/indexes/{collection.value}/search",
        headers=headers,
        content=body,
    )


def build_document_request(
    base_url: str,
    api_key: SecretStr,
    collection: UnitCollection,
    document_id: str,
) -> httpx.Request:
    """Return the GET /indexes/{collection}/documents/{id} request (id path-escaped)."""
    return httpx.Request(
        "GET",
        f"{base_url}/indexes/{collection.value}/documents/{quote(document_id, safe='')}",
        headers=_auth_headers(api_key),
    )


def build_health_request(base_url: str) -> httpx.Request:
    """Return the engine's unauthenticated GET /health request."""
    return httpx.Request("GET", f"{base_url}/health")


class SearchEngineClient:
    """Sends credentialed requests to the search engine.

    Stateless apart from the shared connection pool; safe to use from
    concurrent requests. Does not retry.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str,
        api_key: SecretStr,
    ) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    async def _send(self, request: httpx.Request) -> httpx.Response:
        with _tracer.start_as_current_span("search_engine.request") as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("http.url", str(request.url))
            try:
                response = await self._http.send(request)
            except httpx.TransportError as e:
                logger.warning(
                    "Search engine request failed: %s %s: %s",
                    request.method,
                    request.url,
                    e,
                )
                span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                raise UpstreamUnavailableException(str(request.url), str(e)) from e
            span.set_attribute("http.status_code", response.status_code)
            return response

    async def search(self, collection: Collection, body: bytes) -> httpx.Response:
        """Forward a raw JSON search body to the collection's search endpoint."""
        return await self._send(
            build_search_request(self._base_url, self._api_key, collection, body)
        )

    async def get_document(
        self, collection: UnitCollection, document_id: str
    ) -> httpx.Response:
        """Fetch a single document by id; the caller interprets the status."""
        return await self._send(
            build_document_request(
                self._base_url, self._api_key, collection, document_id
            )
        )

    async def is_healthy(self) -> bool:
        """Return True when the engine answers GET /health with 200."""
        try:
            response = await self._send(build_health_request(self._base_url))
        except UpstreamUnavailableException:
            return False
        return response.status_code == 200
