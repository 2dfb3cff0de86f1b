# topmark:header:start
#
#   project      : UIStream
#   file         : nested_surfaces.py
#   file_relpath : src/uistream/normalize/passes/nested_surfaces.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lift the children of a Surface nested as the sole child of a Surface.

Two directly nested Surfaces render a doubled border. The outer Surface adopts
the inner one's children and the inner element is removed. Chains collapse
fully in one pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.vocabulary import SURFACE

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree


def _sole_surface_child(
    elements: dict[str, UIElement], outer: UIElement, root: str
) -> UIElement | None:
    if len(outer.child_keys) != 1:
        return None
    inner = elements.get(outer.child_keys[0])
    if inner is None or inner.type != SURFACE or inner.key in (outer.key, root):
        return None
    return inner


class NestedSurfaces(BaseNormalizer):
    """Collapse Surface-in-Surface chains into the outermost Surface."""

    def __init__(self) -> None:
        super().__init__(name=PassName.NESTED_SURFACES)

    def run(self, tree: UITree) -> UITree:
        """Collapse every nested Surface chain."""
        elements = dict(tree.elements)
        removed: list[str] = []
        for key in list(elements):
            outer = elements.get(key)
            if outer is None or outer.type != SURFACE:
                continue
            inner = _sole_surface_child(elements, outer, tree.root)
            if inner is None:
                continue
            while inner is not None:
                outer = outer.with_children(inner.child_keys)
                for child_key in inner.child_keys:
                    child = elements.get(child_key)
                    if child is not None and child.parent_key == inner.key:
                        elements[child_key] = child.evolve(parent_key=outer.key)
                del elements[inner.key]
                removed.append(inner.key)
                inner = _sole_surface_child(elements, outer, tree.root)
            elements[outer.key] = outer
        if not removed:
            return tree
        return tree.edit(
            updated=(e for e in elements.values() if tree.get(e.key) is not e),
            removed=removed,
        )


normalize_nested_surfaces = NestedSurfaces()
