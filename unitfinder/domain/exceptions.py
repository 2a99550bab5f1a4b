"""Domain exceptions for unitfinder.

Defines the failure taxonomy of the gateway: the search engine is
unreachable, a document does not exist, or the engine answered with an
error status. Presentation layer maps them to HTTP responses in
exception handlers.
"""

from typing import Any


class UnitFinderException(Exception):
    """Base exception for all unitfinder errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. collection, document_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class UpstreamUnavailableException(UnitFinderException):
    """Raised when the search engine cannot be reached (network layer failure)."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize with the target URL and the transport error text.

        Args:
            url: Engine URL that was called (never includes the credential).
            reason: Transport error description, logged but not returned.
        """
        self.url = url
        self.reason = reason
        super().__init__(
            "Search engine unavailable",
            "UPSTREAM_UNAVAILABLE",
        )


class DocumentNotFoundException(UnitFinderException):
    """Raised when the requested document id does not exist in the collection."""

    def __init__(self, collection: str, document_id: str) -> None:
        super().__init__(
            f"Document not found: {collection}/{document_id}",
            "DOCUMENT_NOT_FOUND",
            {"collection": collection, "document_id": document_id},
        )


class UpstreamErrorException(UnitFinderException):
    """Raised when the search engine answers a document fetch with an unexpected status.

    The upstream body is deliberately not kept: callers see the status code
    and a generic message only.
    """

    def __init__(self, status_code: int, message: str = "Search engine error") -> None:
        """Initialize with the upstream status code.

        Args:
            status_code: HTTP status returned by the engine (relayed to the caller).
            message: Generic message for the response body.
        """
        self.status_code = status_code
        super().__init__(message, "UPSTREAM_ERROR")
