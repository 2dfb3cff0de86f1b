# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/tree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable UI tree model and traversal."""

from __future__ import annotations

from uistream.tree.model import (
    EMPTY_TREE,
    Action,
    UIElement,
    UITree,
    is_renderable_tree,
    unknown_types,
)
from uistream.tree.walk import Visit, find_parent, parent_index, reachable_keys, walk_tree

__all__ = [
    "EMPTY_TREE",
    "Action",
    "UIElement",
    "UITree",
    "Visit",
    "find_parent",
    "is_renderable_tree",
    "parent_index",
    "reachable_keys",
    "unknown_types",
    "walk_tree",
]
