"""Plain-text previews of a document tree and its generated lists."""

from __future__ import annotations

from typing import Iterable, Sequence

from doctree.document import Document
from doctree.nodes import ContentNode
from doctree.schemas import ListLayout, ListRow


def format_outline(document: Document) -> str:
    """Render the document structure as an indented outline.

    Every node is shown with its number (when enumerated), its title and its
    current page, which is a placeholder until the layout pass has run.
    """
    header = document.title or "Document"
    lines = [f"{header}:"]
    lines.extend(_outline_lines(document.children))
    return "\n".join(lines)


def count_nodes(nodes: Iterable[ContentNode]) -> int:
    """Count nodes in the given subtrees."""
    total = 0
    for node in nodes:
        total += 1
        total += count_nodes(node.children)
    return total


def format_list(
    rows: Sequence[ListRow] | ListLayout, *, show_pages: bool | None = None
) -> str:
    """Render list rows one per line, indented by iterator depth.

    Page numbers follow ``show_pages`` when given, else the setting carried
    by a ``ListLayout``; bare rows show them.
    """
    if isinstance(rows, ListLayout):
        if show_pages is None:
            show_pages = rows.show_pages
        rows = rows.rows
    if show_pages is None:
        show_pages = True
    lines: list[str] = []
    for row in rows:
        entry = f"{row.numbers} {row.text}" if row.numbers else row.text
        line = "  " * row.iterator_depth + entry
        if show_pages:
            line += f" .... {row.page}"
        lines.append(line)
    return "\n".join(lines)


def format_bibliography(document: Document) -> str:
    style = document.settings.citation_style
    lines = []
    for source in document.sources:
        details = ": ".join(part for part in (source.author, source.title) if part)
        if source.year:
            details += f" ({source.year})"
        lines.append(f"{style.prefix}{source.number}{style.postfix} {details}".rstrip())
    return "\n".join(lines)


def _outline_lines(nodes: Iterable[ContentNode], indent: int = 0) -> list[str]:
    lines: list[str] = []
    for node in nodes:
        numbers = node.formatted_numbers()
        title = f"{numbers} {node}" if numbers else str(node)
        lines.append(" " * (indent * 4) + f"[{node.content_type}] {title} ({node.page_string()})")
        if node.has_children:
            lines.extend(_outline_lines(node.children, indent + 1))
    return lines
