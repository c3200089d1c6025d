"""Content nodes of the document tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Iterator, cast

from pydantic import BaseModel, ValidationError

from doctree.exceptions import (
    AlreadyAttachedError,
    ConfigurationError,
    ForbiddenChildError,
    FrozenConfigurationError,
    RootReparentError,
    StructuralError,
)
from doctree.numbering import Numberable
from doctree.numbers import format_number
from doctree.pages import PageReference, Placeholder, Resolved
from doctree.schemas import (
    ContentSettings,
    DocumentSettings,
    FormulaSettings,
    ImageSettings,
    SectionSettings,
    TextSettings,
)
from doctree.styles import Styleable

if TYPE_CHECKING:
    from doctree.document import Document
    from doctree.lists import ListOfContents

logger = logging.getLogger(__name__)


class ContentNode:
    """Base class of every element in the document tree.

    Nodes are created detached and configured through keyword arguments that
    are validated against :attr:`settings_model`. Once a node is attached to a
    parent its configuration is frozen, so numbering computed from it stays
    stable.
    """

    content_type: ClassVar[str] = "content"
    settings_model: ClassVar[type[BaseModel]] = ContentSettings
    is_root: ClassVar[bool] = False

    def __init__(self, **config: Any) -> None:
        self._settings = self._build_settings(config)
        self._parent: ContentNode | None = None
        self._children: list[ContentNode] = []
        self._label = ""
        self.page_ref = PageReference()
        self.numbering = Numberable(self)
        self.style = Styleable()

    @classmethod
    def _build_settings(cls, config: dict[str, Any]) -> Any:
        try:
            return cls.settings_model.model_validate(config)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid {cls.content_type} configuration: {exc}"
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"

    def __str__(self) -> str:
        return self.title

    @property
    def settings(self) -> Any:
        return self._settings

    def configure(self, **changes: Any) -> None:
        """Replace configuration values; only allowed while the node is detached."""
        if self._parent is not None:
            raise FrozenConfigurationError(
                "The configuration can't be changed after setting the parent"
            )
        current = self._settings.model_dump(exclude_unset=True)
        self._settings = self._build_settings({**current, **changes})

    @property
    def title(self) -> str:
        return self._settings.title

    @property
    def alt_title(self) -> str:
        return self._settings.alt_title or self.title

    @property
    def enumerate(self) -> bool:
        return self._settings.enumerate

    @property
    def show_in_index(self) -> bool:
        return self._settings.show_in_index

    @property
    def allowed_child_types(self) -> bool | frozenset[str]:
        return self._settings.allowed_child_types

    @property
    def page_group(self) -> str:
        if self._settings.page_group:
            return self._settings.page_group
        if self._parent is not None:
            return self._parent.page_group
        settings = self.document_settings or DocumentSettings()
        return settings.default_page_group

    # Tree structure

    @property
    def parent(self) -> ContentNode | None:
        return self._parent

    @property
    def children(self) -> tuple[ContentNode, ...]:
        return tuple(self._children)

    @property
    def has_children(self) -> bool:
        return bool(self._children)

    @property
    def root(self) -> ContentNode:
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def document(self) -> "Document | None":
        root = self.root
        return cast("Document", root) if root.is_root else None

    @property
    def document_settings(self) -> DocumentSettings | None:
        document = self.document
        return document.settings if document is not None else None

    def ancestors(self) -> Iterator[ContentNode]:
        """Parents of this node up to, but excluding, the document."""
        node = self._parent
        while node is not None and not node.is_root:
            yield node
            node = node._parent

    @property
    def level(self) -> int:
        """Nesting depth; top-level content is 0 and the document is -1."""
        return sum(1 for _ in self.ancestors())

    @property
    def position(self) -> tuple[int, ...]:
        """1-based child positions from the root down to this node."""
        steps: list[int] = []
        node = self
        while node._parent is not None:
            steps.append(node._parent._children.index(node) + 1)
            node = node._parent
        return tuple(reversed(steps))

    @property
    def anchor(self) -> str:
        """Navigation target of this node inside the rendered output."""
        return f"{self.content_type}-" + ".".join(str(step) for step in self.position)

    def iter_subtree(self) -> Iterator[ContentNode]:
        """This node and all its descendants in document order."""
        yield self
        for child in self._children:
            yield from child.iter_subtree()

    def accepts(self, content_type: str) -> bool:
        allowed = self.allowed_child_types
        if isinstance(allowed, bool):
            return allowed
        return content_type in allowed

    def add_child(self, child: ContentNode) -> ContentNode:
        """Attach ``child`` as the last child of this node and freeze its configuration."""
        if child.is_root:
            raise RootReparentError("You can't set a parent for the document")
        if child._parent is not None:
            raise AlreadyAttachedError(f"{child!r} is already attached to {child._parent!r}")
        if child is self.root:
            raise StructuralError(f"{child!r} can't be attached below itself")
        if not self.accepts(child.content_type):
            raise ForbiddenChildError(
                f"{self.content_type} does not allow {child.content_type} content"
            )

        document = self.document
        if document is not None:
            document.check_labels(child.iter_subtree())

        child._parent = self
        self._children.append(child)
        if document is not None:
            document.register_labels(child.iter_subtree())
        logger.debug(
            "Attached content",
            extra={"parent": self.content_type, "child": child.content_type, "title": child.title},
        )
        return child

    def add_section(self, title: str, **config: Any) -> "Section":
        section = Section(title=title, **config)
        self.add_child(section)
        return section

    def add_text(self, text: str = "", **config: Any) -> "Text":
        block = Text(text=text, **config)
        self.add_child(block)
        return block

    def add_image(self, path: str | Path | None = None, **config: Any) -> "Image":
        image = Image(path=path, **config)
        self.add_child(image)
        return image

    def add_formula(self, code: str, **config: Any) -> "Formula":
        formula = Formula(code=code, **config)
        self.add_child(formula)
        return formula

    def add_list(self, display_types: Iterable[str] = ("section",), **config: Any) -> "ListOfContents":
        from doctree.lists import ListOfContents

        listing = ListOfContents(display_types=frozenset(display_types), **config)
        self.add_child(listing)
        return listing

    # Labels

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        if value == self._label:
            return
        document = self.document
        if document is not None:
            if value:
                document.register_label(value, self)
            if self._label:
                document.unregister_label(self._label)
        self._label = value

    # Pages

    @property
    def page(self) -> Placeholder | Resolved:
        """Resolved page, or a placeholder while the layout pass hasn't run."""
        settings = self.document_settings or DocumentSettings()
        return self.page_ref.query(
            settings.unresolved_reference_marker, settings.assumed_page_number_width
        )

    def resolve_page(self, number: int, group: str | None = None) -> Resolved:
        """Record the first page of this node; allowed exactly once."""
        return self.page_ref.resolve(number, group or self.page_group)

    def page_string(self) -> str:
        """Page rendered with the number style of its page group."""
        page = self.page
        if isinstance(page, Placeholder):
            return page.marker
        document = self.document
        style = document.page_number_style(page.group) if document is not None else "int"
        return format_number(page.number, style)

    # Numbering

    def formatted_numbers(self) -> str:
        return self.numbering.formatted()


class Section(ContentNode):
    """Section of a document, may contain any content."""

    content_type = "section"
    settings_model = SectionSettings

    @property
    def show_in_document(self) -> bool:
        return self._settings.show_in_document


class Text(ContentNode):
    """Block of text; the body is given inline or read lazily from a file."""

    content_type = "text"
    settings_model = TextSettings

    def __init__(self, **config: Any) -> None:
        super().__init__(**config)
        self._body: str | None = None

    def __str__(self) -> str:
        source = self._settings.path or "inline"
        return f"Text ({source}) {self.body[:15]}..."

    @property
    def path(self) -> Path | None:
        return self._settings.path

    @property
    def body(self) -> str:
        if self._body is None:
            self._body = self.read_text()
        return self._body

    def read_text(self) -> str:
        if self._settings.text or self._settings.path is None:
            return self._settings.text
        return self._settings.path.read_text(encoding="utf-8")


class Image(ContentNode):
    """Image with an optional caption. Its size is measured by the layout engine."""

    content_type = "image"
    settings_model = ImageSettings

    @property
    def path(self) -> Path | None:
        return self._settings.path

    @property
    def caption(self) -> str:
        return self._settings.caption


class Formula(ContentNode):
    """Formula source code rendered by an external formula renderer."""

    content_type = "formula"
    settings_model = FormulaSettings

    @property
    def code(self) -> str:
        return self._settings.code

    @property
    def font(self) -> str:
        return self._settings.font

    @property
    def code_format(self) -> str:
        return self._settings.code_format
