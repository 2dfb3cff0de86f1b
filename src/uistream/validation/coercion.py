# topmark:header:start
#
#   project      : UIStream
#   file         : coercion.py
#   file_relpath : src/uistream/validation/coercion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pre-validation enum coercion.

Generators often produce an enum value that is close to a valid one
(``"success"`` for a Badge variant, ``"medium"`` for a gap). Coercion rewrites
such values to their nearest valid equivalent *before* validation, so the
intent survives instead of being stripped by repair.

Pipeline: coerce, validate, then (if still invalid) repair.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from uistream.config.logging import get_logger
from uistream.validation.schema import default_registry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from uistream.config.logging import UIStreamLogger
    from uistream.tree.model import UIElement
    from uistream.validation.schema import SchemaRegistry

logger: UIStreamLogger = get_logger(__name__)


@dataclass(frozen=True)
class CoercionTable:
    """Immutable ``(type, prop) -> {invalid value -> valid value}`` table."""

    rules: Mapping[tuple[str, str], Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_dotted(cls, table: Mapping[str, Mapping[str, str]]) -> CoercionTable:
        """Build a table from ``{"Type.prop": {bad: good}}`` entries."""
        rules: dict[tuple[str, str], Mapping[str, str]] = {}
        for dotted, corrections in table.items():
            type_, _, prop = dotted.partition(".")
            rules[(type_, prop)] = MappingProxyType(dict(corrections))
        return cls(rules=MappingProxyType(rules))

    @classmethod
    def from_registry(cls, registry: SchemaRegistry) -> CoercionTable:
        """Build the table declared by a schema catalog."""
        return cls.from_dotted(registry.coercions)

    def lookup(self, type_: str, prop: str, value: object) -> str | None:
        """Return the replacement for ``value`` or None when it is not coerced."""
        if not isinstance(value, str):
            return None
        corrections = self.rules.get((type_, prop))
        if corrections is None:
            return None
        return corrections.get(value)

    def coerce(self, element: UIElement) -> UIElement:
        """Return ``element`` with known-invalid values replaced.

        Returns:
            UIElement: A copy with corrected props, or ``element`` itself when
                no value was coerced.
        """
        updates: dict[str, str] = {}
        for (type_, prop), corrections in self.rules.items():
            if type_ != element.type:
                continue
            value = element.props.get(prop)
            if isinstance(value, str) and value in corrections:
                updates[prop] = corrections[value]
        if not updates:
            return element
        logger.debug("Coerced %s (%s): %s", element.key, element.type, updates)
        return element.with_props(**updates)

    def __len__(self) -> int:
        return len(self.rules)


@functools.lru_cache(maxsize=1)
def default_coercions() -> CoercionTable:
    """Return the coercion table of the packaged catalog."""
    return CoercionTable.from_registry(default_registry())


def coerce_element_props(element: UIElement, table: CoercionTable | None = None) -> UIElement:
    """Apply ``table`` (default: packaged coercions) to ``element``."""
    if table is None:
        table = default_coercions()
    return table.coerce(element)
