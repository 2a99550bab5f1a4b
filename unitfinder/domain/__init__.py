"""Domain layer: collections, entities, and exceptions.

No dependencies on infrastructure or presentation. Used by application,
infrastructure and client layers.
"""

from unitfinder.domain.entities import UnitDocument
from unitfinder.domain.enums import Collection, UnitCollection
from unitfinder.domain.exceptions import (
    DocumentNotFoundException,
    UnitFinderException,
    UpstreamErrorException,
    UpstreamUnavailableException,
)

__all__ = [
    # Entities
    "UnitDocument",
    # Enums
    "Collection",
    "UnitCollection",
    # Exceptions
    "DocumentNotFoundException",
    "UnitFinderException",
    "UpstreamErrorException",
    "UpstreamUnavailableException",
]
