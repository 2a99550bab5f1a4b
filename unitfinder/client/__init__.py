"""Search client: session reducer, result models, and the async controller.

Consumed by front ends (browser UI, scripts/search.py); talks to the
gateway only, never to the search engine.
"""

from unitfinder.client.controller import SearchController
from unitfinder.client.results import PackageResult, ResultItem, UnitResult, parse_hit
from unitfinder.client.session import (
    FetchFailed,
    FetchKind,
    FetchTag,
    LoadMoreRequested,
    QueryChanged,
    ResponseArrived,
    SearchSession,
    ViewReset,
    reduce,
)

__all__ = [
    "SearchController",
    "PackageResult",
    "ResultItem",
    "UnitResult",
    "parse_hit",
    "FetchFailed",
    "FetchKind",
    "FetchTag",
    "LoadMoreRequested",
    "QueryChanged",
    "ResponseArrived",
    "SearchSession",
    "ViewReset",
    "reduce",
]
