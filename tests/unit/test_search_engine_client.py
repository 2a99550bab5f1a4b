"""Outbound request builders and SearchEngineClient failure mapping."""

import httpx
import pytest
from pydantic import SecretStr

from unitfinder.domain.enums import Collection, UnitCollection
from unitfinder.domain.exceptions import UpstreamUnavailableException
from unitfinder.infrastructure.search_engine import (
    SearchEngineClient,
    build_document_request,
    build_health_request,
    build_search_request,
)

BASE = "http://meili.local:7700"
KEY = SecretStr("master-key")


class TestRequestBuilders:
    """Pure (collection, body) -> request functions."""

    def test_search_request_injects_credential_and_keeps_body(self) -> None:
        body = b'{"q":"vim"}'
        request = build_search_request(BASE, KEY, Collection.PACKAGES, body)
        assert request.method == "POST"
        assert str(request.url) == f"{BASE}/indexes/packages/search"
        assert request.headers["authorization"] == "Bearer master-key"
        assert request.headers["content-type"] == "application/json"
        assert request.content == body

    def test_document_request_targets_collection(self) -> None:
        request = build_document_request(BASE, KEY, UnitCollection.TIMERS, "t-1")
        assert request.method == "GET"
        assert str(request.url) == f"{BASE}/indexes/timers/documents/t-1"
        assert request.headers["authorization"] == "Bearer master-key"

    def test_document_id_cannot_escape_documents_path(self) -> None:
        request = build_document_request(BASE, KEY, UnitCollection.SERVICES, "../../keys")
        assert "/indexes/services/documents/" in str(request.url)
        assert "%2F" in str(request.url)
        assert request.url.raw_path == b"/indexes/services/documents/..%2F..%2Fkeys"

    def test_health_request_has_no_credential(self) -> None:
        request = build_health_request(BASE)
        assert str(request.url) == f"{BASE}/health"
        assert "authorization" not in request.headers


class TestSearchEngineClient:
    async def test_transport_error_becomes_upstream_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            engine = SearchEngineClient(http, BASE, KEY)
            with pytest.raises(UpstreamUnavailableException) as exc_info:
                await engine.search(Collection.SERVICES, b"{}")
        assert exc_info.value.url == f"{BASE}/indexes/services/search"
        assert "master-key" not in str(exc_info.value.to_dict())

    async def test_error_status_is_returned_not_raised(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "boom"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            engine = SearchEngineClient(http, BASE + "/", KEY)
            response = await engine.get_document(UnitCollection.SERVICES, "x")
        assert response.status_code == 500
        assert str(response.request.url) == f"{BASE}/indexes/services/documents/x"

    async def test_is_healthy(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "available"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            assert await SearchEngineClient(http, BASE, KEY).is_healthy()
