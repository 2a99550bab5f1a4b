"""Search payload schemas: what the client posts and what the engine answers.

The gateway does not validate bodies against these; the search client uses
them to build requests and read responses.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from unitfinder.core.constants import HIGHLIGHT_ALL_ATTRIBUTES, MATCHING_STRATEGY


class SearchQuery(BaseModel):
    """Body for POST /api/search/{collection}.

    offset is left out of the payload for the first page.
    """

    model_config = ConfigDict(populate_by_name=True)

    q: str = Field(..., description="Query text")
    offset: int | None = Field(default=None, ge=0, description="Index of the first hit")
    attributes_to_highlight: list[str] = Field(
        default_factory=lambda: list(HIGHLIGHT_ALL_ATTRIBUTES),
        alias="attributesToHighlight",
    )
    matching_strategy: str = Field(default=MATCHING_STRATEGY, alias="matchingStrategy")

    def to_payload(self) -> dict[str, Any]:
        """JSON body with the engine's camelCase keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SearchResponse(BaseModel):
    """Subset of the engine's search response used by the client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    estimated_total_hits: int = Field(default=0, ge=0, alias="estimatedTotalHits")
    hits: list[dict[str, Any]] = Field(default_factory=list)
