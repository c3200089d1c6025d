"""Hierarchical numbering of content nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from doctree.numbers import format_number
from doctree.schemas import DocumentSettings, NumberingStyle

if TYPE_CHECKING:
    from doctree.nodes import ContentNode

_DETACHED_SETTINGS = DocumentSettings()


def numbering_style(node: "ContentNode") -> NumberingStyle:
    """Numbering settings for the type of ``node``, taken from its document."""
    settings = node.document_settings or _DETACHED_SETTINGS
    return settings.numbering_for(node.content_type)


def sibling_ordinal(node: "ContentNode") -> int:
    """1-based position among enumerable siblings of the same type."""
    parent = node.parent
    if parent is None:
        return 1
    position = 0
    for sibling in parent.children:
        if sibling.content_type != node.content_type or not sibling.enumerate:
            continue
        position += 1
        if sibling is node:
            return position
    raise LookupError(f"{node!r} is not enumerated among its siblings")


def numbering_chain(node: "ContentNode") -> list["ContentNode"]:
    """Enumerable nodes contributing a component, outermost first."""
    if not node.enumerate:
        return []
    level = numbering_style(node).level
    chain = [node]
    for ancestor in node.ancestors():
        if level != -1 and len(chain) > level:
            break
        if ancestor.enumerate:
            chain.append(ancestor)
    chain.reverse()
    return chain


def number_components(node: "ContentNode") -> list[int]:
    """Numeric components of the number of ``node``; empty when not enumerated."""
    return [
        numbering_style(member).start_index + sibling_ordinal(member) - 1
        for member in numbering_chain(node)
    ]


def formatted_numbers(node: "ContentNode") -> str:
    """Render the number of ``node``, e.g. ``"2.1"`` or ``"#A.iii"``."""
    chain = numbering_chain(node)
    if not chain:
        return ""
    style = numbering_style(node)
    parts = [
        format_number(value, numbering_style(member).format)
        for member, value in zip(chain, number_components(node))
    ]
    return f"{style.prefix}{style.separator.join(parts)}{style.postfix}"


class Numberable:
    """Numbering capability composed onto a content node."""

    def __init__(self, node: "ContentNode") -> None:
        self._node = node

    @property
    def style(self) -> NumberingStyle:
        return numbering_style(self._node)

    def components(self) -> list[int]:
        return number_components(self._node)

    def formatted(self) -> str:
        return formatted_numbers(self._node)
