"""The document root: label registry, page groups, numbering settings and sources."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Literal, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from doctree.config import DEFAULT_CITATION_NOT_FOUND
from doctree.exceptions import (
    ConfigurationError,
    DuplicateLabelError,
    FrozenConfigurationError,
)
from doctree.nodes import ContentNode
from doctree.numbers import format_number
from doctree.schemas import DocumentSettings

logger = logging.getLogger(__name__)

ReferenceKind = Literal["number", "page", "title"]


class Source(BaseModel):
    """Bibliography entry that content can cite."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    number: int
    title: str = ""
    author: str = ""
    year: str = ""
    publisher: str = ""
    url: str = ""


class Document(ContentNode):
    """Root of a document tree.

    The document is never a child of another node. It owns the label
    registry, the page number style of every page group, the per-type
    numbering settings and the bibliography sources.
    """

    content_type = "document"
    settings_model = DocumentSettings
    is_root = True

    def __init__(self, settings: DocumentSettings | Mapping[str, Any] | None = None, **config: Any) -> None:
        if isinstance(settings, DocumentSettings):
            settings = settings.model_dump(exclude_unset=True)
        super().__init__(**{**(settings or {}), **config})
        self._labels: dict[str, ContentNode] = {}
        self._page_number_styles: dict[str, str] = dict(self._settings.page_number_styles)
        self._sources: dict[str, Source] = {}

    def __repr__(self) -> str:
        return f"Document(title={self.title!r}, children={len(self._children)})"

    @property
    def settings(self) -> DocumentSettings:
        return self._settings

    def configure(self, **changes: Any) -> None:
        """Replace document settings; only allowed before content is attached."""
        if self._children:
            raise FrozenConfigurationError(
                "Document settings can't be changed after content has been added"
            )
        super().configure(**changes)
        self._page_number_styles = dict(self._settings.page_number_styles)

    @property
    def title(self) -> str:
        return self._settings.title

    @property
    def alt_title(self) -> str:
        return self._settings.title

    @property
    def enumerate(self) -> bool:
        return False

    @property
    def show_in_index(self) -> bool:
        return False

    @property
    def allowed_child_types(self) -> bool:
        return True

    @property
    def page_group(self) -> str:
        return self._settings.default_page_group

    @property
    def level(self) -> int:
        return -1

    @property
    def unresolved_marker(self) -> str:
        """Placeholder text used for unknown references and pages."""
        return self._settings.unresolved_reference_marker * self._settings.assumed_page_number_width

    # Labels

    @property
    def labels(self) -> dict[str, ContentNode]:
        return dict(self._labels)

    def check_labels(self, nodes: Iterable[ContentNode]) -> None:
        """Raise when any labelled node would clash with the registry or each other."""
        seen: set[str] = set()
        for node in nodes:
            if not node.label:
                continue
            if node.label in seen or self._labels.get(node.label, node) is not node:
                raise DuplicateLabelError(f"Label {node.label!r} is already in use")
            seen.add(node.label)

    def register_labels(self, nodes: Iterable[ContentNode]) -> None:
        for node in nodes:
            if node.label:
                self.register_label(node.label, node)

    def register_label(self, label: str, node: ContentNode) -> None:
        existing = self._labels.get(label)
        if existing is not None and existing is not node:
            raise DuplicateLabelError(
                f"Label {label!r} is already used by {existing!r}"
            )
        self._labels[label] = node

    def unregister_label(self, label: str) -> None:
        self._labels.pop(label, None)

    def get_labeled(self, label: str) -> ContentNode | None:
        """Node registered for ``label``; ``None`` with a warning when absent."""
        node = self._labels.get(label)
        if node is None:
            logger.warning("Label not found", extra={"label": label})
        return node

    def reference(self, label: str, kind: ReferenceKind = "number") -> str:
        """Text for a reference to the node labelled ``label``.

        Args:
            label: Label of the referenced node.
            kind: ``number`` for its formatted number, ``page`` for its page,
                ``title`` for its alternative title.

        Returns:
            The reference text, or the unresolved marker when the label is
            unknown.
        """
        node = self.get_labeled(label)
        if node is None:
            return self.unresolved_marker
        if kind == "number":
            return node.formatted_numbers()
        if kind == "page":
            return node.page_string()
        if kind == "title":
            return node.alt_title
        raise ValueError(f"Unknown reference kind: {kind}")

    # Page groups

    @property
    def page_number_styles(self) -> dict[str, str]:
        return dict(self._page_number_styles)

    def set_page_number_style(self, group: str, style: str) -> None:
        self._page_number_styles[group] = style

    def page_number_style(self, group: str) -> str:
        return self._page_number_styles.get(group, self._settings.default_page_number_style)

    @property
    def page_groups(self) -> set[str]:
        """Page groups with a registered style or used by content."""
        groups = set(self._page_number_styles)
        groups.update(node.page_group for node in self.iter_subtree())
        return groups

    # Sources and citations

    @property
    def sources(self) -> list[Source]:
        return list(self._sources.values())

    def add_source(self, key: str, **fields: Any) -> Source:
        """Register a bibliography source; sources are numbered in registration order."""
        if key in self._sources:
            raise DuplicateLabelError(f"Source {key!r} is already registered")
        try:
            source = Source(key=key, number=len(self._sources) + 1, **fields)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid source {key!r}: {exc}") from exc
        self._sources[key] = source
        return source

    def cite(self, key: str, extras: str = "") -> str:
        """Citation mark for source ``key``, e.g. ``[2]`` or ``[2, p. 14]``."""
        source = self._sources.get(key)
        if source is None:
            logger.warning("Source for citation not found", extra={"source": key})
            return DEFAULT_CITATION_NOT_FOUND
        style = self._settings.citation_style
        mark = format_number(source.number, "int")
        if extras:
            mark += f"{style.separator} {extras}"
        return f"{style.prefix}{mark}{style.postfix}"
