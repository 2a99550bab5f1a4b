"""Search session state and its reducer.

A SearchSession is an immutable value; every change goes through
reduce(session, event). Fetches are tagged with the generation (bumped on
each query change) and the offset they were issued for, so a response is
applied only while it still belongs to the live query. Late responses from
a superseded query are dropped here rather than racing in the caller.

Rules:
    - A query change replaces results; a page fetch appends them.
    - Only one page fetch is in flight at a time, and none while a fresh
      search for the current query is still pending.
    - The empty query clears results synchronously and fetches nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Union

from unitfinder.client.results import ResultItem
from unitfinder.core.constants import PAGE_SIZE
from unitfinder.schemas.search import SearchQuery

logger = logging.getLogger(__name__)


class FetchKind(str, Enum):
    """Whether a fetch replaces the result list or extends it."""

    SEARCH = "search"
    PAGE = "page"


@dataclass(frozen=True)
class FetchTag:
    """Identity of one outbound fetch: what it was issued for."""

    kind: FetchKind
    query: str
    generation: int
    offset: int = 0

    def to_query(self) -> SearchQuery:
        """Search body for this fetch; the first page carries no offset."""
        return SearchQuery(q=self.query, offset=self.offset or None)

    def to_payload(self) -> dict[str, Any]:
        return self.to_query().to_payload()


@dataclass(frozen=True)
class SearchSession:
    """Client-held state of one search view."""

    query: str = ""
    offset: int = 0
    estimated_total: int = 0
    accumulated: tuple[ResultItem, ...] = field(default_factory=tuple)
    generation: int = 0
    searching: bool = False
    paging: bool = False

    @property
    def has_more(self) -> bool:
        """True while the engine estimates more hits than have been requested."""
        return self.query != "" and self.offset < self.estimated_total

    @property
    def is_exhausted(self) -> bool:
        """The "no more results" signal for a non-empty query."""
        return self.query != "" and not self.has_more

    @property
    def is_loading(self) -> bool:
        return self.searching or self.paging

    def search_tag(self) -> FetchTag | None:
        """Tag for the fresh search this session is waiting on, if any."""
        if not self.searching:
            return None
        return FetchTag(FetchKind.SEARCH, self.query, self.generation, 0)

    def page_tag(self) -> FetchTag | None:
        """Tag for the page fetch this session is waiting on, if any."""
        if not self.paging:
            return None
        return FetchTag(FetchKind.PAGE, self.query, self.generation, self.offset)


# ---- Events ----


@dataclass(frozen=True)
class QueryChanged:
    text: str


@dataclass(frozen=True)
class LoadMoreRequested:
    pass


@dataclass(frozen=True)
class ResponseArrived:
    tag: FetchTag
    hits: tuple[ResultItem, ...]
    estimated_total: int


@dataclass(frozen=True)
class FetchFailed:
    tag: FetchTag


@dataclass(frozen=True)
class ViewReset:
    pass


SessionEvent = Union[QueryChanged, LoadMoreRequested, ResponseArrived, FetchFailed, ViewReset]


def _is_current(session: SearchSession, tag: FetchTag) -> bool:
    return tag.generation == session.generation and tag.query == session.query


def _on_query_changed(session: SearchSession, event: QueryChanged) -> SearchSession:
    generation = session.generation + 1
    if event.text == "":
        return SearchSession(generation=generation)
    # Previous results stay visible until the fresh search replaces them.
    return replace(
        session,
        query=event.text,
        offset=0,
        generation=generation,
        searching=True,
        paging=False,
    )


def _on_load_more(session: SearchSession) -> SearchSession:
    if not session.has_more or session.searching or session.paging:
        return session
    return replace(session, offset=session.offset + PAGE_SIZE, paging=True)


def _on_response(session: SearchSession, event: ResponseArrived) -> SearchSession:
    tag = event.tag
    if not _is_current(session, tag):
        logger.debug(
            "Dropping stale %s response for %r (generation %s, current %s)",
            tag.kind.value,
            tag.query,
            tag.generation,
            session.generation,
        )
        return session
    estimated_total = max(0, event.estimated_total)
    if tag.kind is FetchKind.SEARCH:
        if not session.searching:
            return session
        return replace(
            session,
            accumulated=tuple(event.hits),
            estimated_total=estimated_total,
            searching=False,
        )
    if not session.paging or tag.offset != session.offset:
        logger.debug("Dropping out-of-sequence page at offset %s", tag.offset)
        return session
    return replace(
        session,
        accumulated=session.accumulated + tuple(event.hits),
        estimated_total=estimated_total,
        paging=False,
    )


def _on_fetch_failed(session: SearchSession, event: FetchFailed) -> SearchSession:
    tag = event.tag
    if not _is_current(session, tag):
        return session
    if tag.kind is FetchKind.SEARCH:
        return replace(session, searching=False)
    if not session.paging or tag.offset != session.offset:
        return session
    # Step back so the same page can be requested again.
    return replace(session, offset=max(0, tag.offset - PAGE_SIZE), paging=False)


def reduce(session: SearchSession, event: SessionEvent) -> SearchSession:
    """Return the session that results from applying event to session.

    Pure: no I/O; the controller decides which fetch to issue by looking at
    search_tag()/page_tag() of the returned session.
    """
    if isinstance(event, QueryChanged):
        return _on_query_changed(session, event)
    if isinstance(event, LoadMoreRequested):
        return _on_load_more(session)
    if isinstance(event, ResponseArrived):
        return _on_response(session, event)
    if isinstance(event, FetchFailed):
        return _on_fetch_failed(session, event)
    if isinstance(event, ViewReset):
        return SearchSession(generation=session.generation + 1)
    raise TypeError(f"Unknown session event: {event!r}")
