"""Sanitization of engine-highlighted text before it is injected as markup."""

from typing import Any, ClassVar

import nh3

from unitfinder.core.constants import HIGHLIGHT_TAG


class HighlightSanitizer:
    """
    Reduce highlighted values to plain text plus emphasis spans.

    The engine echoes document text and query text back inside its
    highlight markup, so the result must be cleaned before a UI injects it.
    Only the highlight tag survives, without attributes.
    """

    ALLOWED_TAGS: ClassVar[set[str]] = {HIGHLIGHT_TAG}
    ALLOWED_ATTRIBUTES: ClassVar[dict[str, set[str]]] = {}

    @classmethod
    def sanitize_html(cls, value: str) -> str:
        """Strip every tag but the highlight tag; escape the rest with nh3.

        Args:
            value: Highlighted string from the engine.

        Returns:
            String safe to inject as HTML.
        """
        if not value:
            return value
        return nh3.clean(
            value,
            tags=cls.ALLOWED_TAGS,
            attributes=cls.ALLOWED_ATTRIBUTES,
            strip_comments=True,
        )

    @classmethod
    def sanitize_value(cls, value: Any) -> Any:
        """Sanitize strings (and lists of strings); pass other values through."""
        if isinstance(value, str):
            return cls.sanitize_html(value)
        if isinstance(value, list):
            return [cls.sanitize_value(item) for item in value]
        return value


def sanitize_highlight(value: Any) -> Any:
    """Sanitize a highlighted field value (string, list, or scalar)."""
    return HighlightSanitizer.sanitize_value(value)
