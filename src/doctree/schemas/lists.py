"""Generated list models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ListRow(BaseModel):
    """One entry of a generated list.

    Attributes:
        iterator_depth: Depth relative to the traversed content, used for
            indentation.
        level: Nesting depth of the node in the whole document.
        numbers: Formatted hierarchical number, empty for non-enumerated nodes.
        text: Alternative title of the node.
        page: Rendered page number (or placeholder in preview mode).
        link: Navigation target of the node.
    """

    model_config = ConfigDict(frozen=True)

    iterator_depth: int = Field(..., ge=0)
    level: int = Field(..., ge=0)
    numbers: str
    text: str
    page: str
    link: str | None = None


class IndentAmount(BaseModel):
    """Horizontal offsets of the number and text columns for one depth."""

    model_config = ConfigDict(frozen=True)

    number: float
    text: float


class ListLayout(BaseModel):
    """Rows of a list together with their indentation and layout diagnostics.

    ``show_pages`` carries the list setting deciding whether page numbers are
    rendered.
    """

    rows: list[ListRow]
    indents: dict[int, IndentAmount]
    show_pages: bool = True
    warnings: list[str] = Field(default_factory=list)

    def indent_for(self, depth: int) -> IndentAmount:
        """Indentation for ``depth``; depths past the deepest known reuse it."""
        if depth in self.indents:
            return self.indents[depth]
        if not self.indents:
            return IndentAmount(number=0.0, text=0.0)
        return self.indents[max(self.indents)]
