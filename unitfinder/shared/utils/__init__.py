"""Shared utilities."""

from unitfinder.shared.utils.sanitization import HighlightSanitizer, sanitize_highlight

__all__ = ["HighlightSanitizer", "sanitize_highlight"]
