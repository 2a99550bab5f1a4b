"""Application services: search relay and unit file retrieval."""

from unitfinder.application.services.search_relay import SearchRelayService, relay_headers
from unitfinder.application.services.unit_file_service import UnitFileService

__all__ = [
    "SearchRelayService",
    "UnitFileService",
    "relay_headers",
]
