"""Result items returned by a search, one shape per collection.

Base fields hold the document data as indexed; `highlighted` holds the same
fields taken from the engine's `_formatted` object, sanitized so that only
emphasis spans remain. Base fields are never markup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union
from urllib.parse import quote

from unitfinder.domain.enums import Collection
from unitfinder.shared.utils.sanitization import sanitize_highlight


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


def _size(data: dict[str, Any], key: str) -> int:
    # Highlighted copies may carry numbers as strings
    try:
        return int(data.get(key) or 0)
    except (TypeError, ValueError):
        return 0


def _formatted(hit: dict[str, Any]) -> dict[str, Any]:
    # Fields the engine did not format fall back to the (escaped) base value.
    merged = {key: value for key, value in hit.items() if key != "_formatted"}
    formatted = hit.get("_formatted")
    if isinstance(formatted, dict):
        merged.update(formatted)
    return {key: sanitize_highlight(value) for key, value in merged.items()}


@dataclass(frozen=True)
class PackageResult:
    """An Arch Linux package hit."""

    name: str
    description: str
    url: str
    version: str
    download_size_bytes: int
    install_size_bytes: int
    highlighted: PackageResult | None = None

    @classmethod
    def _from_fields(cls, data: dict[str, Any]) -> PackageResult:
        return cls(
            name=_text(data, "name"),
            description=_text(data, "desc"),
            url=_text(data, "url"),
            version=_text(data, "version"),
            download_size_bytes=_size(data, "c_size"),
            install_size_bytes=_size(data, "i_size"),
        )

    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> PackageResult:
        """Build from an engine hit (package index field names: desc, c_size, i_size)."""
        base = cls._from_fields(hit)
        highlighted = cls._from_fields(_formatted(hit))
        return cls(
            name=base.name,
            description=base.description,
            url=base.url,
            version=base.version,
            download_size_bytes=base.download_size_bytes,
            install_size_bytes=base.install_size_bytes,
            highlighted=highlighted,
        )


@dataclass(frozen=True)
class UnitResult:
    """A systemd unit file hit (service or timer)."""

    id: str
    package: str
    filename: str
    content: str
    highlighted: UnitResult | None = None

    @classmethod
    def _from_fields(cls, data: dict[str, Any]) -> UnitResult:
        return cls(
            id=_text(data, "id"),
            package=_text(data, "package"),
            filename=_text(data, "filename"),
            content=_text(data, "content"),
        )

    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> UnitResult:
        """Build from an engine hit of the services or timers index."""
        base = cls._from_fields(hit)
        highlighted = cls._from_fields(_formatted(hit))
        return cls(
            id=base.id,
            package=base.package,
            filename=base.filename,
            content=base.content,
            highlighted=highlighted,
        )

    def download_path(self, collection: Collection) -> str:
        """Gateway path that serves this unit as a file, e.g. /file/services/<id>."""
        return f"/file/{collection.value}/{quote(self.id, safe='')}"


ResultItem = Union[PackageResult, UnitResult]


def parse_hit(collection: Collection, hit: dict[str, Any]) -> ResultItem:
    """Build the result item matching the collection the hit came from."""
    if collection is Collection.PACKAGES:
        return PackageResult.from_hit(hit)
    return UnitResult.from_hit(hit)
