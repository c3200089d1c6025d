"""Local configuration for doctree."""

from __future__ import annotations

import os


DEFAULT_UNRESOLVED_REFERENCE_MARKER = "?"
DEFAULT_ASSUMED_PAGE_NUMBER_WIDTH = 3
DEFAULT_PAGE_GROUP = "default"
DEFAULT_NUMBER_SEPARATION_WIDTH = 2.0
DEFAULT_CITATION_NOT_FOUND = "[??]"

# Placeholder pages are the marker repeated to reserve room for the real number.
DOCTREE_UNRESOLVED_REFERENCE_MARKER = os.getenv(
    "DOCTREE_UNRESOLVED_REFERENCE_MARKER", DEFAULT_UNRESOLVED_REFERENCE_MARKER
)
DOCTREE_ASSUMED_PAGE_NUMBER_WIDTH = int(
    os.getenv("DOCTREE_ASSUMED_PAGE_NUMBER_WIDTH", str(DEFAULT_ASSUMED_PAGE_NUMBER_WIDTH))
)
DOCTREE_DEFAULT_PAGE_GROUP = os.getenv("DOCTREE_DEFAULT_PAGE_GROUP", DEFAULT_PAGE_GROUP)
DOCTREE_NUMBER_SEPARATION_WIDTH = float(
    os.getenv("DOCTREE_NUMBER_SEPARATION_WIDTH", str(DEFAULT_NUMBER_SEPARATION_WIDTH))
)
