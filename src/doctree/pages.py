"""Page reference states and the page resolution pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from doctree.exceptions import PageAlreadyResolvedError
from doctree.traversal import ContentWalk

if TYPE_CHECKING:
    from doctree.document import Document
    from doctree.layout import PageLayout
    from doctree.nodes import ContentNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unassigned:
    """No page has been queried or resolved yet."""


@dataclass(frozen=True)
class Placeholder:
    """Fixed-width stand-in used while the real page is unknown."""

    marker: str

    def __str__(self) -> str:
        return self.marker


@dataclass(frozen=True)
class Resolved:
    """Final first page of a node within its page group."""

    number: int
    group: str

    def __str__(self) -> str:
        return str(self.number)


PageState = Union[Unassigned, Placeholder, Resolved]

UNASSIGNED = Unassigned()


class PageReference:
    """Page of one node: ``Unassigned -> Placeholder -> Resolved``."""

    def __init__(self) -> None:
        self._state: PageState = UNASSIGNED

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def is_resolved(self) -> bool:
        return isinstance(self._state, Resolved)

    def query(self, marker: str, width: int) -> Placeholder | Resolved:
        """Return the resolved page, creating and caching a placeholder when needed."""
        if isinstance(self._state, (Placeholder, Resolved)):
            return self._state
        placeholder = Placeholder(marker * width)
        self._state = placeholder
        return placeholder

    def resolve(self, number: int, group: str) -> Resolved:
        """Record the real page; a second resolution is an ordering bug."""
        if isinstance(self._state, Resolved):
            raise PageAlreadyResolvedError(
                f"Page already resolved to {self._state.number} ({self._state.group}), "
                f"refusing {number} ({group})"
            )
        self._state = Resolved(number=number, group=group)
        return self._state


def resolve_pages(document: "Document", layout: "PageLayout") -> int:
    """Ask ``layout`` for the page of every node and resolve it.

    Nodes are visited in document order, each exactly once.

    Returns:
        Number of resolved nodes.
    """
    count = 0
    for node, _depth in ContentWalk(document.children):
        number, group = layout.render_page_for(node)
        node.resolve_page(number, group)
        count += 1
    logger.debug("Resolved pages", extra={"nodes": count})
    return count


def unresolved_nodes(document: "Document") -> list["ContentNode"]:
    """Nodes whose page has not been resolved yet."""
    return [node for node, _depth in ContentWalk(document.children) if not node.page_ref.is_resolved]
