"""Async driver for one search view.

SearchController owns a SearchSession and talks to the query gateway over
an httpx.AsyncClient (base_url pointing at the gateway). Each user action
is turned into a session event; when the resulting session is waiting on a
fetch, the controller issues it as a task tagged with what it was issued
for. Responses go back through the reducer, which discards stale ones.
Nothing is cancelled: superseded fetches finish and are dropped.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from unitfinder.client.results import ResultItem, parse_hit
from unitfinder.client.session import (
    FetchFailed,
    FetchTag,
    LoadMoreRequested,
    QueryChanged,
    ResponseArrived,
    SearchSession,
    SessionEvent,
    ViewReset,
    reduce,
)
from unitfinder.domain.enums import Collection
from unitfinder.schemas.search import SearchResponse

logger = logging.getLogger(__name__)


class SearchController:
    """Search-and-paginate state machine for one collection view.

    Must be used from a running event loop; set_query() and load_more()
    return the task of the fetch they started (or None) so callers can await
    it, or call wait() to settle every fetch in flight.
    """

    def __init__(self, http: httpx.AsyncClient, collection: Collection) -> None:
        self._http = http
        self._collection = collection
        self._session = SearchSession()
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def collection(self) -> Collection:
        return self._collection

    @property
    def session(self) -> SearchSession:
        return self._session

    @property
    def query(self) -> str:
        return self._session.query

    @property
    def offset(self) -> int:
        return self._session.offset

    @property
    def accumulated(self) -> tuple[ResultItem, ...]:
        return self._session.accumulated

    @property
    def estimated_total(self) -> int:
        return self._session.estimated_total

    @property
    def has_more(self) -> bool:
        return self._session.has_more

    def dispatch(self, event: SessionEvent) -> SearchSession:
        """Apply event to the session and return the new session."""
        self._session = reduce(self._session, event)
        return self._session

    def set_query(self, text: str) -> asyncio.Task[None] | None:
        """Replace the query; the empty string clears results without a fetch."""
        session = self.dispatch(QueryChanged(text))
        tag = session.search_tag()
        if tag is None:
            return None
        return self._start(tag)

    def load_more(self) -> asyncio.Task[None] | None:
        """Request the next page; ignored when nothing more can be loaded yet."""
        before = self._session
        session = self.dispatch(LoadMoreRequested())
        if session is before:
            return None
        tag = session.page_tag()
        if tag is None:
            return None
        return self._start(tag)

    def reset(self, collection: Collection | None = None) -> None:
        """Return to the empty session, optionally switching to another collection."""
        if collection is not None:
            self._collection = collection
        self.dispatch(ViewReset())

    async def wait(self) -> None:
        """Wait until every fetch started so far (and any they lead to) has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _start(self, tag: FetchTag) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(self._fetch(self._collection, tag))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _fetch(self, collection: Collection, tag: FetchTag) -> None:
        try:
            response = await self._http.post(
                f"/api/search/{collection.value}",
                json=tag.to_payload(),
            )
            response.raise_for_status()
            body = SearchResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers undecodable JSON and pydantic validation errors
            logger.warning(
                "Search %s fetch for %r (offset %s) failed: %s",
                tag.kind.value,
                tag.query,
                tag.offset,
                e,
            )
            self.dispatch(FetchFailed(tag))
            return
        hits = tuple(parse_hit(collection, hit) for hit in body.hits)
        self.dispatch(ResponseArrived(tag, hits, body.estimated_total_hits))
