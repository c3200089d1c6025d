"""doctree: document content trees with numbering, page references and generated lists."""

from doctree.document import Document, Source
from doctree.exceptions import (
    AlreadyAttachedError,
    ConfigurationError,
    DoctreeError,
    DuplicateLabelError,
    ForbiddenChildError,
    FrozenConfigurationError,
    PageAlreadyResolvedError,
    RootReparentError,
    StructuralError,
    UnresolvedPageError,
)
from doctree.layout import FixedPitchMeasurer, Measurer, PageLayout
from doctree.lists import ListOfContents, build_rows, calculate_indent_amounts
from doctree.nodes import ContentNode, Formula, Image, Section, Text
from doctree.numbering import formatted_numbers, number_components
from doctree.numbers import FormattedNumber, format_number
from doctree.pages import Placeholder, Resolved, Unassigned, resolve_pages
from doctree.schemas import DocumentSettings, ListRow, NumberingOverride, NumberingStyle
from doctree.traversal import ContentWalk, ShowInIndexFilter

__all__ = [
    "AlreadyAttachedError",
    "ConfigurationError",
    "ContentNode",
    "ContentWalk",
    "DoctreeError",
    "Document",
    "DocumentSettings",
    "DuplicateLabelError",
    "FixedPitchMeasurer",
    "ForbiddenChildError",
    "FormattedNumber",
    "Formula",
    "FrozenConfigurationError",
    "Image",
    "ListOfContents",
    "ListRow",
    "Measurer",
    "NumberingOverride",
    "NumberingStyle",
    "PageAlreadyResolvedError",
    "PageLayout",
    "Placeholder",
    "Resolved",
    "RootReparentError",
    "Section",
    "ShowInIndexFilter",
    "Source",
    "StructuralError",
    "Text",
    "Unassigned",
    "UnresolvedPageError",
    "build_rows",
    "calculate_indent_amounts",
    "format_number",
    "formatted_numbers",
    "number_components",
    "resolve_pages",
]
