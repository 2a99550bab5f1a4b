"""Pytest configuration and fixtures for unitfinder.

Engine settings are fixed before unitfinder.main is imported. HTTP tests
drive the app through ASGITransport; the search engine is replaced by a
FakeEngine behind httpx.MockTransport via dependency overrides.
"""

import os
from collections.abc import AsyncIterator, Callable
from typing import Union

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

ENGINE_URL = "http://engine.test"
ENGINE_KEY = "test-engine-key"

os.environ["SEARCH_ENGINE_URL"] = ENGINE_URL
os.environ["SEARCH_ENGINE_KEY"] = ENGINE_KEY

from unitfinder.api.dependencies import get_search_engine  # noqa: E402
from unitfinder.core.config import get_settings  # noqa: E402
from unitfinder.infrastructure.search_engine import SearchEngineClient  # noqa: E402

get_settings.cache_clear()

from unitfinder.main import app  # noqa: E402

EngineAnswer = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeEngine:
    """Stands in for the search engine: records requests, answers from a route table.

    Routes map (method, path) to an httpx.Response or to a callable taking the
    request. Unrouted requests get 404. Set `error` to raise a transport error
    instead of answering.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], EngineAnswer] = {}
        self.error: Exception | None = None

    def route(self, method: str, path: str, answer: EngineAnswer) -> None:
        self.routes[(method, path)] = answer

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        answer = self.routes.get((request.method, request.url.path))
        if answer is None:
            return httpx.Response(404, json={"message": "not found", "code": "document_not_found"})
        if callable(answer):
            return answer(request)
        return answer

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "search engine was not called"
        return self.requests[-1]


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
async def client(engine: FakeEngine) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app, with the engine faked."""
    engine_http = httpx.AsyncClient(transport=httpx.MockTransport(engine.handler))

    def _engine_override() -> SearchEngineClient:
        return SearchEngineClient(
            http=engine_http,
            base_url=ENGINE_URL,
            api_key=SecretStr(ENGINE_KEY),
        )

    app.dependency_overrides[get_search_engine] = _engine_override
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_search_engine, None)
        await engine_http.aclose()
