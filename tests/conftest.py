"""Test setup for doctree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from doctree import Document  # noqa: E402
from doctree.nodes import ContentNode  # noqa: E402


class SequentialLayout:
    """Layout stub placing every node on its own page, in document order."""

    def __init__(self, first_page: int = 1) -> None:
        self.next_page = first_page
        self.calls: list[ContentNode] = []

    def render_page_for(self, node: ContentNode) -> tuple[int, str | None]:
        self.calls.append(node)
        page = self.next_page
        self.next_page += 1
        return page, None


@pytest.fixture
def layout() -> SequentialLayout:
    return SequentialLayout()


@pytest.fixture
def document() -> Document:
    """Document with the structure used across the list and numbering tests.

    Intro (1)
        Background (1.1)
        Scope (not enumerated)
    Method (2)
        figure A (image 1 inside section 2 -> 2.1)
        Setup (2.1)
    """
    doc = Document(title="Report")
    intro = doc.add_section("Intro")
    intro.add_section("Background")
    intro.add_section("Scope", enumerate=False)
    method = doc.add_section("Method")
    method.add_image("figure.png", title="Figure A")
    method.add_section("Setup")
    return doc
