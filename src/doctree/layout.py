"""Contracts of the layout collaborator and a fixed-pitch reference measurer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from doctree.schemas import StyleContext

if TYPE_CHECKING:
    from doctree.nodes import ContentNode


class Measurer(Protocol):
    """Measures rendered text widths."""

    def measure_width(self, text: str, style: StyleContext) -> float: ...


class PageLayout(Protocol):
    """Places nodes on pages during the layout pass."""

    def render_page_for(self, node: "ContentNode") -> tuple[int, str | None]:
        """Return the first page of ``node`` and its page group (``None`` keeps the node's group)."""
        ...


class FixedPitchMeasurer:
    """Measure text as if every character had the same advance width.

    The width of a string is ``len(text) * font_size * char_width``, scaled
    by the font stretching percentage and widened by the font spacing per
    character.
    """

    def __init__(self, char_width: float = 0.5) -> None:
        self.char_width = char_width

    def measure_width(self, text: str, style: StyleContext) -> float:
        if not text:
            return 0.0
        advance = style.font_size * self.char_width * style.font_stretching / 100
        return len(text) * (advance + style.font_spacing)
