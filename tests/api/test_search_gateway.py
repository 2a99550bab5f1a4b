"""Query gateway: credential injection and verbatim relay of the engine's answer."""

import json

import httpx
from httpx import AsyncClient

from tests.conftest import ENGINE_KEY, FakeEngine

_ENGINE_BODY = {
    "hits": [
        {
            "name": "vim",
            "desc": "Vi Improved, a highly configurable text editor",
            "url": "https://www.vim.org",
            "version": "9.1.0-1",
            "c_size": 2048,
            "i_size": 4096,
            "_formatted": {"name": "<em>vim</em>"},
        }
    ],
    "query": "vim",
    "processingTimeMs": 1,
    "limit": 20,
    "offset": 0,
    "estimatedTotalHits": 1,
}


async def test_search_forwards_to_collection_index_with_credential(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """POST /api/search/packages hits /indexes/packages/search with the bearer key."""
    engine.route("POST", "/indexes/packages/search", httpx.Response(200, json=_ENGINE_BODY))
    response = await client.post("/api/search/packages", json={"q": "vim"})

    assert response.status_code == 200
    sent = engine.last_request
    assert sent.method == "POST"
    assert str(sent.url) == "http://engine.test/indexes/packages/search"
    assert sent.headers["authorization"] == f"Bearer {ENGINE_KEY}"
    assert sent.headers["content-type"] == "application/json"


async def test_search_relays_engine_body_unmodified(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """The caller gets exactly the engine's JSON back."""
    raw = json.dumps(_ENGINE_BODY).encode()
    engine.route(
        "POST",
        "/indexes/packages/search",
        httpx.Response(200, content=raw, headers={"content-type": "application/json"}),
    )
    response = await client.post("/api/search/packages", json={"q": "vim"})
    assert response.content == raw
    assert response.json()["estimatedTotalHits"] == 1
    assert response.headers["content-type"] == "application/json"


async def test_search_forwards_caller_body_byte_for_byte(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """No parsing or re-serialization of the caller's body."""
    engine.route("POST", "/indexes/services/search", httpx.Response(200, json={"hits": []}))
    body = b'{"q": "docker",  "offset": 20, "attributesToHighlight": ["*"], "matchingStrategy": "all"}'
    await client.post(
        "/api/search/services",
        content=body,
        headers={"content-type": "application/json"},
    )
    assert engine.last_request.content == body
    assert engine.last_request.url.path == "/indexes/services/search"


async def test_search_does_not_forward_caller_authorization(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """Only the configured credential reaches the engine."""
    engine.route("POST", "/indexes/timers/search", httpx.Response(200, json={"hits": []}))
    await client.post(
        "/api/search/timers",
        json={"q": "daily"},
        headers={"Authorization": "Bearer caller-token"},
    )
    assert engine.last_request.headers["authorization"] == f"Bearer {ENGINE_KEY}"


async def test_search_relays_engine_error_status_and_body(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """Engine errors on search are relayed as-is (status and body)."""
    error = {"message": "Invalid value type at `.offset`", "code": "bad_request"}
    engine.route("POST", "/indexes/packages/search", httpx.Response(400, json=error))
    response = await client.post("/api/search/packages", json={"q": "vim", "offset": -1})
    assert response.status_code == 400
    assert response.json() == error


async def test_search_relays_extra_engine_headers(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """Non hop-by-hop headers from the engine reach the caller."""
    engine.route(
        "POST",
        "/indexes/packages/search",
        httpx.Response(200, json={"hits": []}, headers={"x-meilisearch-request-id": "r-1"}),
    )
    response = await client.post("/api/search/packages", json={"q": "vim"})
    assert response.headers["x-meilisearch-request-id"] == "r-1"


async def test_search_unknown_collection_is_rejected_without_engine_call(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """Only packages, services and timers can be searched."""
    response = await client.post("/api/search/keys", json={"q": "x"})
    assert response.status_code == 422
    assert engine.requests == []


async def test_search_engine_unreachable_returns_502(
    client: AsyncClient, engine: FakeEngine
) -> None:
    """Transport failure surfaces as 502 without retry or credential leak."""
    engine.error = httpx.ConnectError("connection refused")
    response = await client.post("/api/search/packages", json={"q": "vim"})
    assert response.status_code == 502
    assert response.json()["error"] == "UPSTREAM_UNAVAILABLE"
    assert ENGINE_KEY not in response.text
    assert len(engine.requests) == 1
