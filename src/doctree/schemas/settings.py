"""Configuration records for documents and content nodes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from doctree.config import (
    DOCTREE_ASSUMED_PAGE_NUMBER_WIDTH,
    DOCTREE_DEFAULT_PAGE_GROUP,
    DOCTREE_NUMBER_SEPARATION_WIDTH,
    DOCTREE_UNRESOLVED_REFERENCE_MARKER,
)
from doctree.schemas.numbering import CitationStyle, NumberingOverride, NumberingStyle

logger = logging.getLogger(__name__)

FORMULA_FONTS = (
    "TeX",
    "STIX-Web",
    "Asana-Math",
    "Neo-Euler",
    "Gyre-Pagella",
    "Gyre-Termes",
    "Latin-Modern",
)
FORMULA_CODE_FORMATS = ("TeX", "MathML", "AsciiMath")


class ContentSettings(BaseModel):
    """Settings shared by every content node.

    Attributes:
        title: Title of the node.
        alt_title: Shorter title used in generated lists; falls back to
            ``title`` when empty.
        enumerate: Whether the node receives its own number.
        show_in_index: Whether the node may appear in generated lists.
        page_group: Page group of the node; inherited from the parent when
            unset.
        allowed_child_types: ``True``/``False`` to allow or forbid all children,
            or the set of allowed child types.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = ""
    alt_title: str = ""
    enumerate: bool = True
    show_in_index: bool = True
    page_group: str | None = None
    allowed_child_types: bool | frozenset[str] = True


class SectionSettings(ContentSettings):
    """Settings of a section."""

    show_in_document: bool = True


class TextSettings(ContentSettings):
    """Settings of a text block. The body is inline ``text`` or read from ``path``."""

    enumerate: bool = False
    show_in_index: bool = False
    allowed_child_types: bool | frozenset[str] = False
    text: str = ""
    path: Path | None = None


class ImageSettings(ContentSettings):
    """Settings of an image."""

    title: str = "Image"
    allowed_child_types: bool | frozenset[str] = frozenset({"image"})
    path: Path | None = None
    caption: str = ""
    caption_position: Literal["top", "bottom"] = "bottom"
    title_position: Literal["top", "bottom"] = "top"
    placement: str = "here"


class FormulaSettings(ContentSettings):
    """Settings of a formula."""

    title: str = "Formula"
    allowed_child_types: bool | frozenset[str] = frozenset({"formula"})
    code: str = ""
    font: str = "TeX"
    code_format: str = "TeX"

    @field_validator("font")
    @classmethod
    def validate_font(cls, v: str) -> str:
        if v not in FORMULA_FONTS:
            logger.warning("Formula font not available, defaulting to TeX", extra={"font": v})
            return "TeX"
        return v

    @field_validator("code_format")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        if v not in FORMULA_CODE_FORMATS:
            logger.warning(
                "Formula code format not available, defaulting to TeX",
                extra={"code_format": v},
            )
            return "TeX"
        return v


class ListSettings(ContentSettings):
    """Settings of a generated list (table of contents, list of figures, ...).

    Attributes:
        display_types: Content types listed.
        max_depth: Deepest traversal depth listed, ``-1`` for unlimited.
        show_pages: Whether page numbers are shown.
        indent_max_level: Deepest depth receiving its own indentation, ``-1``
            for unlimited. Deeper rows reuse the indentation of this depth.
        number_separation_width: Gap between the number and the text column.
        min_page_num_distance: Minimum distance between a title and the page
            number column.
        min_title_width_percentage: Minimum share of the text width left for
            titles before a layout warning is reported.
        page_number_width: Width of the page number column.
    """

    allowed_child_types: bool | frozenset[str] = False
    display_types: frozenset[str] = frozenset({"section"})
    max_depth: int = -1
    show_pages: bool = True
    indent_max_level: int = Field(default=-1, ge=-1)
    number_separation_width: float = Field(default=DOCTREE_NUMBER_SEPARATION_WIDTH, ge=0)
    min_page_num_distance: float = Field(default=15.0, ge=0)
    min_title_width_percentage: float = Field(default=20.0, ge=0, le=100)
    page_number_width: float = Field(default=8.0, ge=0)

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        if v < -1:
            logger.warning("Invalid max depth, defaulting to -1", extra={"max_depth": v})
            return -1
        return v


class DocumentSettings(BaseModel):
    """Document-wide settings supplied when the tree is created.

    Attributes:
        title: Document title.
        author: Document author.
        subject: Document subject.
        keywords: Comma separated keywords.
        description: Free text description.
        numbering: Numbering defaults for every content type.
        numbering_overrides: Partial per-type numbering settings.
        page_number_styles: Number format per page group.
        default_page_group: Page group of content without an explicit group.
        default_page_number_style: Format for page groups without a style.
        unresolved_reference_marker: Character used for placeholder pages.
        assumed_page_number_width: Placeholder length in characters.
        citation_style: Decoration of citation marks.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = ""
    author: str = ""
    subject: str = ""
    keywords: str = ""
    description: str = ""
    numbering: NumberingStyle = Field(default_factory=NumberingStyle)
    numbering_overrides: dict[str, NumberingOverride] = Field(default_factory=dict)
    page_number_styles: dict[str, str] = Field(default_factory=dict)
    default_page_group: str = DOCTREE_DEFAULT_PAGE_GROUP
    default_page_number_style: str = "int"
    unresolved_reference_marker: str = Field(
        default=DOCTREE_UNRESOLVED_REFERENCE_MARKER, min_length=1
    )
    assumed_page_number_width: int = Field(default=DOCTREE_ASSUMED_PAGE_NUMBER_WIDTH, ge=0)
    citation_style: CitationStyle = Field(default_factory=CitationStyle)

    def numbering_for(self, content_type: str) -> NumberingStyle:
        """Numbering settings of ``content_type`` with its override applied."""
        override = self.numbering_overrides.get(content_type)
        if override is None:
            return self.numbering
        return override.apply_to(self.numbering)
