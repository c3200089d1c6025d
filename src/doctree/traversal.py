"""Depth-first walks over content nodes and the list filter on top of them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, Literal

if TYPE_CHECKING:
    from doctree.nodes import ContentNode

logger = logging.getLogger(__name__)

WalkOrder = Literal["pre", "post"]


class ContentWalk:
    """Restartable depth-first walk yielding ``(node, depth)`` pairs.

    The given nodes sit at depth 0. With ``max_depth`` set to ``n >= 0``
    nodes at depth ``n`` are still yielded but their children are not.
    ``order="pre"`` yields a node before its children, ``order="post"``
    after them. Siblings keep their insertion order. A ``max_depth`` below
    ``-1`` is logged and treated as unlimited.
    """

    def __init__(
        self,
        nodes: Iterable["ContentNode"],
        *,
        max_depth: int = -1,
        order: WalkOrder = "pre",
    ) -> None:
        if order not in ("pre", "post"):
            raise ValueError(f"Unknown walk order: {order}")
        self.nodes = list(nodes)
        if max_depth < -1:
            logger.warning("Invalid max depth, defaulting to -1", extra={"max_depth": max_depth})
            max_depth = -1
        self.max_depth = max_depth
        self.order = order

    def __iter__(self) -> Iterator[tuple["ContentNode", int]]:
        return self._walk(self.nodes, 0)

    def _walk(
        self, nodes: list["ContentNode"], depth: int
    ) -> Iterator[tuple["ContentNode", int]]:
        for node in nodes:
            if self.order == "pre":
                yield node, depth
            if self.max_depth == -1 or depth < self.max_depth:
                yield from self._walk(node.children, depth + 1)
            if self.order == "post":
                yield node, depth


class ShowInIndexFilter:
    """Keep nodes of the allowed types that are flagged ``show_in_index``.

    Rejected nodes are skipped but their children are still visited by the
    wrapped walk, so they can match independently.
    """

    def __init__(self, walk: ContentWalk, display_types: Iterable[str]) -> None:
        self.walk = walk
        self.display_types = frozenset(display_types)

    def accept(self, node: "ContentNode") -> bool:
        return node.content_type in self.display_types and node.show_in_index

    def __iter__(self) -> Iterator[tuple["ContentNode", int]]:
        for node, depth in self.walk:
            if self.accept(node):
                yield node, depth


def iter_content(
    nodes: Iterable["ContentNode"],
    *,
    max_depth: int = -1,
    display_types: Iterable[str] | None = None,
) -> Iterable[tuple["ContentNode", int]]:
    """Pre-order walk over ``nodes``, filtered for lists when ``display_types`` is given."""
    walk = ContentWalk(nodes, max_depth=max_depth)
    if display_types is None:
        return walk
    return ShowInIndexFilter(walk, display_types)
