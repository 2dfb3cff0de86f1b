# topmark:header:start
#
#   project      : UIStream
#   file         : walk.py
#   file_relpath : src/uistream/tree/walk.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded traversal helpers for `UITree`.

Children lists come from untrusted input and may contain cycles, repeated keys
or dangling references. `walk_tree` therefore never visits a key twice and
stops descending past a fixed depth.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from uistream.constants import TRAVERSAL_LIMIT

if TYPE_CHECKING:
    from collections.abc import Iterator

    from uistream.tree.model import UIElement, UITree


@dataclass(frozen=True)
class Visit:
    """One step of a depth-first traversal.

    Attributes:
        element (UIElement): The visited element.
        depth (int): Distance from the root (root is 0).
        parent_key (str | None): Key of the parent that led here, None for the root.
    """

    element: UIElement
    depth: int
    parent_key: str | None


def walk_tree(tree: UITree, *, limit: int = TRAVERSAL_LIMIT) -> Iterator[Visit]:
    """Yield elements depth-first from the root, children in declaration order.

    Missing child keys are skipped, every key is yielded at most once, and
    elements deeper than ``limit`` are not visited.

    Args:
        tree (UITree): The tree to walk.
        limit (int): Maximum depth that is still visited.

    Yields:
        Visit: One record per reachable element.
    """
    if not tree.root:
        return
    visited: set[str] = set()
    stack: list[tuple[str, int, str | None]] = [(tree.root, 0, None)]
    while stack:
        key, depth, parent_key = stack.pop()
        if key in visited or depth > limit:
            continue
        element = tree.elements.get(key)
        if element is None:
            continue
        visited.add(key)
        yield Visit(element=element, depth=depth, parent_key=parent_key)
        # Reverse so the first child is popped first
        for child in reversed(element.child_keys):
            if child not in visited:
                stack.append((child, depth + 1, key))


def reachable_keys(tree: UITree, *, limit: int = TRAVERSAL_LIMIT) -> list[str]:
    """Return keys reachable from the root in depth-first order."""
    return [v.element.key for v in walk_tree(tree, limit=limit)]


def parent_index(tree: UITree) -> dict[str, list[str]]:
    """Map each referenced child key to the keys of every element listing it.

    A parent listing the same child twice counts once.
    """
    index: defaultdict[str, list[str]] = defaultdict(list)
    for element in tree:
        for child in dict.fromkeys(element.child_keys):
            index[child].append(element.key)
    return dict(index)


def find_parent(tree: UITree, key: str) -> UIElement | None:
    """Return the first element whose children list contains ``key``."""
    for element in tree:
        if key in element.child_keys:
            return element
    return None
