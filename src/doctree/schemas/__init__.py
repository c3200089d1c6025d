"""Shared schemas for doctree."""

from doctree.schemas.lists import IndentAmount, ListLayout, ListRow
from doctree.schemas.numbering import CitationStyle, NumberingOverride, NumberingStyle
from doctree.schemas.settings import (
    ContentSettings,
    DocumentSettings,
    FormulaSettings,
    ImageSettings,
    ListSettings,
    SectionSettings,
    TextSettings,
)
from doctree.schemas.styles import StyleContext

__all__ = [
    "CitationStyle",
    "ContentSettings",
    "DocumentSettings",
    "FormulaSettings",
    "ImageSettings",
    "IndentAmount",
    "ListLayout",
    "ListRow",
    "ListSettings",
    "NumberingOverride",
    "NumberingStyle",
    "SectionSettings",
    "StyleContext",
    "TextSettings",
]
