"""Numbering configuration models."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, field_validator

from doctree.numbers import KNOWN_FORMATS

logger = logging.getLogger(__name__)


def _check_level(value: int) -> int:
    if value < -1:
        logger.warning(
            "Invalid numbering level, defaulting to -1 (unlimited)",
            extra={"level": value},
        )
        return -1
    return value


def _check_format(value: str) -> str:
    if value not in KNOWN_FORMATS:
        logger.warning(
            "Unknown numbering format, numbers will be rendered as plain integers",
            extra={"format": value},
        )
    return value


class NumberingStyle(BaseModel):
    """Numbering settings for one content type.

    Attributes:
        format: Numeral system passed to :func:`doctree.numbers.format_number`.
        level: How many enumerable ancestors contribute a component. ``-1``
            means every ancestor up to the document, ``0`` only the node's own
            position.
        prefix: Text placed before the joined components.
        postfix: Text placed after the joined components.
        separator: Text between two components.
        start_index: Value given to the first enumerable sibling.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: str = "int"
    level: int = -1
    prefix: str = ""
    postfix: str = ""
    separator: str = "."
    start_index: int = 1

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: int) -> int:
        return _check_level(v)

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        return _check_format(v)


class NumberingOverride(BaseModel):
    """Partial per-type numbering settings layered over the document defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: str | None = None
    level: int | None = None
    prefix: str | None = None
    postfix: str | None = None
    separator: str | None = None
    start_index: int | None = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: int | None) -> int | None:
        return None if v is None else _check_level(v)

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str | None) -> str | None:
        return None if v is None else _check_format(v)

    def apply_to(self, base: NumberingStyle) -> NumberingStyle:
        """Return ``base`` with every field set on this override replaced."""
        return base.model_copy(update=self.model_dump(exclude_none=True))


class CitationStyle(BaseModel):
    """Decoration of citation marks produced by ``Document.cite``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: str = "["
    postfix: str = "]"
    separator: str = ","
