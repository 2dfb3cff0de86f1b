# topmark:header:start
#
#   project      : UIStream
#   file         : surface_orphans.py
#   file_relpath : src/uistream/normalize/passes/surface_orphans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Wrap the loose children of a Surface in a synthesized Stack.

A Surface whose children are not exactly one Stack renders them with no
vertical rhythm. A ``Stack`` keyed ``auto-stack-<surface key>`` with
``gap="lg"`` is inserted between the Surface and its children.

A Surface whose single child has not arrived yet is left alone: the child
may still turn out to be a Stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.constants import AUTO_STACK_PREFIX
from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.tree.model import UIElement
from uistream.vocabulary import AUTO_STACK_GAP, STACK, SURFACE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from uistream.tree.model import UITree


def _needs_stack(tree: UITree, surface: UIElement) -> bool:
    if surface.type != SURFACE or not surface.child_keys:
        return False
    if len(surface.child_keys) > 1:
        return True
    only = tree.get(surface.child_keys[0])
    return only is not None and only.type != STACK


def _stack_key(tree: UITree, surface: UIElement, taken: Mapping[str, UIElement]) -> str:
    base = f"{AUTO_STACK_PREFIX}{surface.key}"
    key, n = base, 1
    while key in tree.elements or key in taken:
        n += 1
        key = f"{base}-{n}"
    return key


class SurfaceOrphans(BaseNormalizer):
    """Insert a Stack under Surfaces whose children are not a single Stack."""

    def __init__(self) -> None:
        super().__init__(name=PassName.SURFACE_ORPHANS)

    def run(self, tree: UITree) -> UITree:
        """Wrap the children of every such Surface."""
        updated: dict[str, UIElement] = {}
        for surface in tree:
            if not _needs_stack(tree, surface):
                continue
            stack_key = _stack_key(tree, surface, updated)
            updated[stack_key] = UIElement(
                key=stack_key,
                type=STACK,
                props={"gap": AUTO_STACK_GAP},
                children=surface.child_keys,
                parent_key=surface.key,
            )
            for child_key in surface.child_keys:
                child = updated.get(child_key, tree.get(child_key))
                if child is not None:
                    updated[child_key] = child.evolve(parent_key=stack_key)
            updated[surface.key] = updated.get(surface.key, surface).with_children([stack_key])
        return tree.with_elements(*updated.values())


normalize_surface_orphans = SurfaceOrphans()
