"""Per-key style lookup with a default fallback."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from doctree.exceptions import ConfigurationError
from doctree.schemas import StyleContext

DEFAULT_KEY = "default"


class Styleable:
    """Style properties of a node, each keyed by usage (``level0``, ``title``, ...).

    Every property holds a ``default`` entry; lookups for keys without their
    own entry return it.
    """

    def __init__(self, overrides: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        defaults = StyleContext()
        self._values: dict[str, dict[str, Any]] = {
            name: {DEFAULT_KEY: getattr(defaults, name)} for name in StyleContext.model_fields
        }
        for name, values in (overrides or {}).items():
            self.set(name, values)

    def get(self, name: str, key: str | None = None) -> Any:
        """Return property ``name`` for ``key``, or its default."""
        values = self._property(name)
        if key is not None and key in values:
            return values[key]
        return values[DEFAULT_KEY]

    def set(self, name: str, values: Mapping[str, Any]) -> None:
        """Merge ``values`` into property ``name``.

        Raises:
            ConfigurationError: If the property is unknown or a value is
                invalid for it.
        """
        current = self._property(name)
        checked: dict[str, Any] = {}
        for key, value in values.items():
            try:
                context = StyleContext.model_validate({name: value})
            except ValidationError as exc:
                raise ConfigurationError(
                    f"Invalid style value for {name} ({key}): {exc}"
                ) from exc
            checked[key] = getattr(context, name)
        current.update(checked)

    def context(self, key: str | None = None) -> StyleContext:
        """Collect every property for ``key`` into a :class:`StyleContext`."""
        return StyleContext(**{name: self.get(name, key) for name in self._values})

    def _property(self, name: str) -> dict[str, Any]:
        try:
            return self._values[name]
        except KeyError:
            raise ConfigurationError(f"Unknown style property: {name}") from None
