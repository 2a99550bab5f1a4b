"""Unit document domain entity.

Represents a systemd unit file record as stored in the search engine,
independent of transport. Read-only: this system never creates or
deletes documents.
"""

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

_REQUIRED_FIELDS = ("filename", "package", "content")


@dataclass(frozen=True)
class UnitDocument:
    """A unit file as indexed: which package ships it, its file name and content."""

    id: str
    filename: str
    package: str
    content: str

    @classmethod
    def from_dict(cls, data: Any, document_id: str = "") -> "UnitDocument":
        """Build from the engine's JSON document.

        Args:
            data: Decoded JSON body of a get-document response.
            document_id: Requested id, used when the body carries none.

        Raises:
            ValueError: If data is not an object or a required field is missing
                or not a string.
        """
        if not isinstance(data, dict):
            raise ValueError("Unit document must be a JSON object")
        for field in _REQUIRED_FIELDS:
            if not isinstance(data.get(field), str):
                raise ValueError(f"Unit document field {field!r} missing or not a string")
        return cls(
            id=str(data.get("id") or document_id),
            filename=data["filename"],
            package=data["package"],
            content=data["content"],
        )

    @property
    def content_disposition(self) -> str:
        """Attachment header value naming the file, e.g. attachment; filename="x.service".

        Quotes and line breaks in the name are escaped or dropped; non-ASCII
        names also get an RFC 5987 filename* parameter.
        """
        safe = (
            self.filename.replace("\r", "")
            .replace("\n", "")
            .replace("\\", "\\\\")
            .replace('"', '\\"')
        )
        if safe.isascii():
            return f'attachment; filename="{safe}"'
        fallback = safe.encode("ascii", "replace").decode("ascii")
        return (
            f'attachment; filename="{fallback}"; '
            f"filename*=UTF-8''{quote(self.filename, safe='')}"
        )
