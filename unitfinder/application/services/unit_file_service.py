"""Unit file retrieval: turn an engine document into a downloadable unit file."""

from __future__ import annotations

import logging

from unitfinder.domain.entities import UnitDocument
from unitfinder.domain.enums import UnitCollection
from unitfinder.domain.exceptions import DocumentNotFoundException, UpstreamErrorException
from unitfinder.infrastructure.search_engine import SearchEngineClient

logger = logging.getLogger(__name__)


class UnitFileService:
    """Single responsibility: fetch one unit document and map the upstream status."""

    def __init__(self, engine: SearchEngineClient) -> None:
        self.engine = engine

    async def get_unit_file(
        self, collection: UnitCollection, document_id: str
    ) -> UnitDocument:
        """Return the unit document for document_id.

        Raises:
            DocumentNotFoundException: Engine answered 404.
            UpstreamErrorException: Any other non-200 status, or a 200 whose
                body is not a unit document (502).
            UpstreamUnavailableException: Engine could not be reached.
        """
        response = await self.engine.get_document(collection, document_id)
        if response.status_code == 404:
            raise DocumentNotFoundException(collection.value, document_id)
        if response.status_code != 200:
            logger.warning(
                "Search engine returned %s for %s/%s",
                response.status_code,
                collection.value,
                document_id,
            )
            raise UpstreamErrorException(response.status_code)
        try:
            return UnitDocument.from_dict(response.json(), document_id=document_id)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            logger.error(
                "Malformed unit document %s/%s: %s", collection.value, document_id, e
            )
            raise UpstreamErrorException(502) from e
