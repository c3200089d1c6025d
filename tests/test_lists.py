"""Tests for generated lists and their indentation."""

from __future__ import annotations

import logging

import pytest

from doctree import (
    Document,
    FixedPitchMeasurer,
    ListOfContents,
    ListRow,
    StructuralError,
    UnresolvedPageError,
    build_rows,
    calculate_indent_amounts,
    resolve_pages,
)
from doctree.styles import Styleable

from conftest import SequentialLayout

# 12pt * 0.5 -> every character is 6 units wide
MEASURER = FixedPitchMeasurer(char_width=0.5)


def _row(depth: int, numbers: str) -> ListRow:
    return ListRow(iterator_depth=depth, level=depth, numbers=numbers, text="t", page="1")


@pytest.fixture
def intro_document() -> tuple[Document, ListOfContents]:
    doc = Document(title="Report")
    toc = doc.add_list(["section"])
    intro = doc.add_section("Intro")
    intro.add_section("Background")
    intro.add_section("Scope", enumerate=False)
    return doc, toc


class TestGenerateStructure:
    """Tests for ListOfContents.generate_structure."""

    def test_end_to_end_rows(
        self, intro_document: tuple[Document, ListOfContents], layout: SequentialLayout
    ) -> None:
        """Rows carry numbers, titles, resolved pages and links."""
        doc, toc = intro_document
        resolve_pages(doc, layout)

        rows = toc.generate_structure()

        assert [(row.numbers, row.text, row.iterator_depth) for row in rows] == [
            ("1", "Intro", 0),
            ("1.1", "Background", 1),
            ("", "Scope", 1),
        ]
        assert [row.page for row in rows] == ["2", "3", "4"]
        assert rows[0].link == "section-2"

    def test_requires_resolved_pages(self, intro_document: tuple[Document, ListOfContents]) -> None:
        """Final rows need every listed page resolved."""
        _doc, toc = intro_document

        with pytest.raises(UnresolvedPageError):
            toc.generate_structure()
        assert toc.rows == []

    def test_preview_uses_placeholders(self, intro_document: tuple[Document, ListOfContents]) -> None:
        """Preview rows carry placeholder pages."""
        _doc, toc = intro_document

        rows = toc.preview_structure()

        assert [row.page for row in rows] == ["???", "???", "???"]
        assert toc.rows == []

    def test_subtree_iterator_depth_differs_from_level(
        self, intro_document: tuple[Document, ListOfContents], layout: SequentialLayout
    ) -> None:
        """Iterator depth is relative to the traversed content, level to the document."""
        doc, toc = intro_document
        resolve_pages(doc, layout)
        intro = doc.children[1]

        rows = toc.generate_structure(intro.children)

        assert [(row.text, row.iterator_depth, row.level) for row in rows] == [
            ("Background", 0, 1),
            ("Scope", 0, 1),
        ]

    def test_max_depth(self, document: Document, layout: SequentialLayout) -> None:
        """Rows stop at the configured depth."""
        listing = ListOfContents(max_depth=0)
        document.add_child(listing)
        resolve_pages(document, layout)

        assert [row.text for row in listing.generate_structure()] == ["Intro", "Method"]

    def test_list_of_images(self, document: Document, layout: SequentialLayout) -> None:
        """Lists of images number images inside their sections."""
        listing = document.add_list(["image"])
        resolve_pages(document, layout)

        rows = listing.generate_structure()

        assert [(row.numbers, row.text, row.iterator_depth) for row in rows] == [("2.1", "Figure A", 1)]

    def test_alt_title_describes_types(self) -> None:
        """Untitled lists describe their display types."""
        assert ListOfContents(display_types=["section", "image"]).alt_title == "List of: image, section"
        assert ListOfContents(title="Contents").alt_title == "Contents"

    def test_invalid_max_depth_defaults(self, caplog: pytest.LogCaptureFixture) -> None:
        """A list max_depth below -1 logs a warning and becomes -1."""
        with caplog.at_level(logging.WARNING):
            listing = ListOfContents(max_depth=-3)

        assert listing.max_depth == -1
        assert "Invalid max depth" in caplog.text

    def test_detached_list_needs_content(self) -> None:
        """Detached lists need explicit content."""
        with pytest.raises(StructuralError):
            ListOfContents().generate_structure()

    def test_build_rows_with_placeholders(self, document: Document) -> None:
        """build_rows accepts placeholders when asked to."""
        rows = build_rows(document.children, {"section"}, allow_placeholders=True)

        assert len(rows) == 5
        assert rows[2].numbers == ""

    def test_build_rows_invalid_max_depth(self, caplog: pytest.LogCaptureFixture) -> None:
        """build_rows treats a max_depth below -1 as unlimited."""
        doc = Document()
        doc.add_section("A").add_section("B")

        with caplog.at_level(logging.WARNING):
            rows = build_rows(doc.children, {"section"}, max_depth=-2, allow_placeholders=True)

        assert [row.text for row in rows] == ["A", "B"]
        assert "Invalid max depth" in caplog.text


class TestIndentAmounts:
    """Tests for calculate_indent_amounts."""

    def test_outline_alignment(self) -> None:
        """Numbers of a depth start where the previous depth's text starts."""
        rows = [_row(0, "1"), _row(1, "1.1"), _row(1, ""), _row(0, "2")]

        indents = calculate_indent_amounts(rows, MEASURER, Styleable(), gap=2)

        assert indents[0].number == 0
        assert indents[0].text == 8
        assert indents[1].number == indents[0].text
        assert indents[1].text == 8 + 18 + 2

    def test_missing_depth_takes_no_room(self) -> None:
        """Depths without rows take no width and no gap."""
        rows = [_row(0, "1"), _row(2, "1.1.1")]

        indents = calculate_indent_amounts(rows, MEASURER, Styleable(), gap=2)

        assert indents[1].number == indents[1].text == 8
        assert indents[2].number == 8
        assert indents[2].text == 8 + 30 + 2

    def test_text_offsets_never_collide_with_numbers(self) -> None:
        """Every text column starts after the widest number of its depth."""
        rows = [
            _row(0, "10"),
            _row(1, "10.12"),
            _row(2, "10.12.3"),
            _row(1, "10.9"),
            _row(3, "10.12.3.100"),
        ]
        gap = 3.0

        indents = calculate_indent_amounts(rows, MEASURER, Styleable(), gap=gap)

        widest: dict[int, float] = {}
        for row in rows:
            width = len(row.numbers) * 6
            widest[row.iterator_depth] = max(widest.get(row.iterator_depth, 0), width)
        for d1 in widest:
            for d2 in widest:
                if d1 < d2:
                    assert indents[d2].number >= indents[d1].number + widest[d1] + gap

    def test_style_per_level(self) -> None:
        """Each depth is measured with its own level style."""
        styles = Styleable({"font_size": {"level1": 6}})
        rows = [_row(0, "1"), _row(1, "1.1")]

        indents = calculate_indent_amounts(rows, MEASURER, styles, gap=0)

        assert indents[1].text == 6 + 9

    def test_max_level_shares_columns(self) -> None:
        """Rows deeper than indent_max_level share its columns."""
        rows = [_row(0, "1"), _row(1, "1.1"), _row(2, "1.1.1")]

        indents = calculate_indent_amounts(rows, MEASURER, Styleable(), gap=0, max_level=1)

        assert set(indents) == {0, 1}
        assert indents[1].text == 6 + 30

    def test_empty_rows(self) -> None:
        """No rows give no indentation."""
        assert calculate_indent_amounts([], MEASURER, Styleable(), gap=2) == {}


class TestListLayout:
    """Tests for ListOfContents.layout."""

    def test_layout_uses_generated_rows(
        self, intro_document: tuple[Document, ListOfContents], layout: SequentialLayout
    ) -> None:
        """layout generates rows when none exist yet."""
        doc, toc = intro_document
        resolve_pages(doc, layout)

        result = toc.layout(MEASURER, text_width=500)

        assert len(result.rows) == 3
        assert result.warnings == []
        assert result.indent_for(1).number == result.indent_for(0).text
        assert result.indent_for(5) == result.indent_for(1)

    def test_narrow_title_column_is_reported(
        self,
        intro_document: tuple[Document, ListOfContents],
        layout: SequentialLayout,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Too narrow title columns are reported as warnings."""
        doc, toc = intro_document
        resolve_pages(doc, layout)

        with caplog.at_level(logging.WARNING):
            result = toc.layout(MEASURER, text_width=40)

        assert len(result.rows) == 3
        assert len(result.warnings) == 1
        assert "depth 1" in result.warnings[0]
        assert "remaining space for the title-display" in caplog.text

    def test_layout_of_preview_rows(self, intro_document: tuple[Document, ListOfContents]) -> None:
        """Preview rows can be laid out for size estimates."""
        _doc, toc = intro_document

        result = toc.layout(MEASURER, text_width=500, rows=toc.preview_structure())

        assert [row.page for row in result.rows] == ["???"] * 3
