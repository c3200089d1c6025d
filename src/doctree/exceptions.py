"""Custom exceptions for doctree."""


class DoctreeError(Exception):
    """Base exception for doctree operations."""


class ConfigurationError(DoctreeError):
    """Invalid configuration without a safe default."""


class ForbiddenChildError(ConfigurationError):
    """Child type is not allowed by the parent's allowed child types."""


class DuplicateLabelError(ConfigurationError):
    """Label is already registered for another node of the document."""


class StructuralError(DoctreeError):
    """Tree operation performed in an invalid order or position."""


class RootReparentError(StructuralError):
    """The document root can't be attached to a parent."""


class AlreadyAttachedError(StructuralError):
    """Node already has a parent."""


class FrozenConfigurationError(StructuralError):
    """Configuration changed after the node was attached."""


class PageAlreadyResolvedError(StructuralError):
    """Page of a node resolved more than once."""


class UnresolvedPageError(StructuralError):
    """Final list content requested before the page of a listed node was resolved."""
