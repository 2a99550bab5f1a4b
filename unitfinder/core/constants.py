"""Core constants: search protocol values shared by gateway and client.

Single source of truth for paging and highlighting conventions (DRY).
"""

# Results per search request; also the offset step for "load more".
PAGE_SIZE = 20

# Highlighting convention: every attribute, engine default <em> spans.
HIGHLIGHT_ALL_ATTRIBUTES = ["*"]
HIGHLIGHT_TAG = "em"
MATCHING_STRATEGY = "all"

# Response headers on downloaded unit files
HEADER_PACKAGE_NAME = "x-package-name"
HEADER_UNIT_TYPE = "x-unit-type"
