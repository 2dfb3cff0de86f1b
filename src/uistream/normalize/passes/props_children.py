# topmark:header:start
#
#   project      : UIStream
#   file         : props_children.py
#   file_relpath : src/uistream/normalize/passes/props_children.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Move element keys misplaced under ``props.children`` into ``children``.

Generators sometimes emit structural children as a key array under
``props.children`` (e.g. a Select listing its option keys). The array is
removed from props and the keys that name existing elements are merged into
the structural children list, keeping order and skipping duplicates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree


class PropsChildrenToStructural(BaseNormalizer):
    """Migrate key arrays from ``props.children`` to ``children``."""

    def __init__(self) -> None:
        super().__init__(name=PassName.PROPS_CHILDREN_TO_STRUCTURAL)

    def run(self, tree: UITree) -> UITree:
        """Rewrite every element holding element keys under ``props.children``."""
        updated: list[UIElement] = []
        for element in tree:
            raw = element.props.get("children")
            if not isinstance(raw, list):
                continue
            refs = [
                k for k in cast("list[Any]", raw) if isinstance(k, str) and k in tree.elements
            ]
            if not refs:
                continue
            merged = list(dict.fromkeys([*element.child_keys, *refs]))
            updated.append(element.without_props(["children"]).with_children(merged))
        return tree.with_elements(*updated)


normalize_props_children_to_structural = PropsChildrenToStructural()
