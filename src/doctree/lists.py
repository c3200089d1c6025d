"""Generated lists of content: tables of contents, lists of figures and so on."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from doctree.exceptions import StructuralError, UnresolvedPageError
from doctree.layout import Measurer
from doctree.nodes import ContentNode
from doctree.schemas import IndentAmount, ListLayout, ListRow, ListSettings
from doctree.styles import Styleable
from doctree.traversal import ContentWalk, ShowInIndexFilter

logger = logging.getLogger(__name__)


def build_rows(
    content: Iterable[ContentNode],
    display_types: Iterable[str],
    max_depth: int = -1,
    *,
    allow_placeholders: bool = False,
) -> list[ListRow]:
    """Collect list rows for the matching nodes below ``content``.

    Args:
        content: Nodes the traversal starts from; they sit at depth 0.
        display_types: Content types to list. Only nodes flagged
            ``show_in_index`` are listed.
        max_depth: Deepest traversal depth, ``-1`` for unlimited.
        allow_placeholders: Accept nodes whose page is not resolved yet and
            show their placeholder. Rows built this way are only good for
            size estimates.

    Returns:
        Rows in document order.

    Raises:
        UnresolvedPageError: If a listed node has no resolved page and
            placeholders are not allowed.
    """
    walk = ContentWalk(content, max_depth=max_depth)
    rows: list[ListRow] = []
    for node, depth in ShowInIndexFilter(walk, display_types):
        if not allow_placeholders and not node.page_ref.is_resolved:
            raise UnresolvedPageError(
                f"Page of {node!r} is not resolved; run the layout pass before generating lists"
            )
        rows.append(
            ListRow(
                iterator_depth=depth,
                level=node.level,
                numbers=node.formatted_numbers(),
                text=node.alt_title,
                page=node.page_string(),
                link=node.anchor,
            )
        )
    return rows


def calculate_indent_amounts(
    rows: Sequence[ListRow],
    measurer: Measurer,
    styles: Styleable,
    gap: float,
    max_level: int = -1,
) -> dict[int, IndentAmount]:
    """Offsets of the number and text columns for every depth up to the deepest row.

    Numbers of a depth start where the text of the previous depth starts;
    the text starts after the widest number of its depth plus ``gap``.
    Depths without rows take no room. Rows deeper than ``max_level`` (when
    not ``-1``) share the columns of ``max_level``.
    """
    widest: dict[int, float] = {}
    for row in rows:
        depth = row.iterator_depth if max_level == -1 else min(row.iterator_depth, max_level)
        width = measurer.measure_width(row.numbers, styles.context(f"level{depth}"))
        widest[depth] = max(widest.get(depth, 0.0), width)

    indents: dict[int, IndentAmount] = {}
    if not widest:
        return indents

    text_offset = 0.0
    for depth in range(max(widest) + 1):
        number_offset = text_offset
        if depth in widest:
            text_offset = number_offset + widest[depth] + gap
        indents[depth] = IndentAmount(number=number_offset, text=text_offset)
    return indents


def check_title_widths(
    indents: dict[int, IndentAmount],
    settings: ListSettings,
    text_width: float,
) -> list[str]:
    """Report depths whose title column is narrower than the configured minimum."""
    minimum = settings.min_title_width_percentage / 100 * text_width
    warnings: list[str] = []
    for depth, indent in sorted(indents.items()):
        available = (
            text_width
            - settings.page_number_width
            - settings.min_page_num_distance
            - indent.text
        )
        if available < minimum:
            message = (
                f"The remaining space for the title-display of {available:g} at depth "
                f"{depth} is lower than the set minimum of {minimum:g}"
            )
            logger.warning(message, extra={"depth": depth, "available": available})
            warnings.append(message)
    return warnings


class ListOfContents(ContentNode):
    """List of the content types in ``display_types`` found in the document.

    Final rows are generated only after every listed node has its page
    resolved. Before that, :meth:`preview_structure` gives rows carrying
    placeholder pages for size estimates.
    """

    content_type = "list"
    settings_model = ListSettings

    def __init__(self, **config: Any) -> None:
        super().__init__(**config)
        self._rows: list[ListRow] = []

    def __str__(self) -> str:
        return self.alt_title

    @property
    def alt_title(self) -> str:
        if self._settings.alt_title or self.title:
            return super().alt_title
        return "List of: " + ", ".join(sorted(self.display_types))

    @property
    def display_types(self) -> frozenset[str]:
        return self._settings.display_types

    @property
    def max_depth(self) -> int:
        return self._settings.max_depth

    @property
    def show_pages(self) -> bool:
        return self._settings.show_pages

    @property
    def rows(self) -> list[ListRow]:
        return list(self._rows)

    def _content(self, content: Iterable[ContentNode] | None) -> list[ContentNode]:
        if content is not None:
            return list(content)
        document = self.document
        if document is None:
            raise StructuralError("The list is not part of a document and no content was given")
        return list(document.children)

    def generate_structure(self, content: Iterable[ContentNode] | None = None) -> list[ListRow]:
        """Build the final rows; defaults to the whole document."""
        self._rows = build_rows(self._content(content), self.display_types, self.max_depth)
        logger.debug(
            "Generated list structure",
            extra={"display_types": sorted(self.display_types), "rows": len(self._rows)},
        )
        return self.rows

    def preview_structure(self, content: Iterable[ContentNode] | None = None) -> list[ListRow]:
        """Build rows that may carry placeholder pages; the final rows are left untouched."""
        return build_rows(
            self._content(content),
            self.display_types,
            self.max_depth,
            allow_placeholders=True,
        )

    def layout(
        self,
        measurer: Measurer,
        text_width: float,
        rows: Sequence[ListRow] | None = None,
    ) -> ListLayout:
        """Size the indentation of ``rows`` (default: the generated rows)."""
        if rows is None:
            rows = self._rows or self.generate_structure()
        settings: ListSettings = self._settings
        indents = calculate_indent_amounts(
            rows,
            measurer,
            self.style,
            settings.number_separation_width,
            settings.indent_max_level,
        )
        warnings = check_title_widths(indents, settings, text_width)
        return ListLayout(
            rows=list(rows),
            indents=indents,
            show_pages=settings.show_pages,
            warnings=warnings,
        )
