# topmark:header:start
#
#   project      : UIStream
#   file         : checkbox_groups.py
#   file_relpath : src/uistream/normalize/passes/checkbox_groups.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stack a checkbox group that was laid out as a two-column Grid.

A Grid whose two cells are a Text label and a list of checkable items squeezes
the options into half the width. It becomes a vertical Stack; its gap is kept
and its column props are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.normalize.utils import child_elements
from uistream.vocabulary import CHECKABLE_TYPES, GRID, GRID_ONLY_PROPS, STACK, TEXT

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree


def _is_checkbox_group_grid(tree: UITree, element: UIElement) -> bool:
    if element.type != GRID or len(element.child_keys) != 2:
        return False
    label, group = (tree.get(k) for k in element.child_keys)
    if label is None or group is None or label.type != TEXT:
        return False
    items = child_elements(tree, group)
    return (
        bool(items)
        and len(items) == len(group.child_keys)
        and all(i.type in CHECKABLE_TYPES for i in items)
    )


class CheckboxGroupGrids(BaseNormalizer):
    """Turn label + checkable-list Grids into vertical Stacks."""

    def __init__(self) -> None:
        super().__init__(name=PassName.CHECKBOX_GROUP_GRIDS)

    def run(self, tree: UITree) -> UITree:
        """Rewrite every checkbox-group Grid."""
        return tree.with_elements(
            *(
                e.without_props(GRID_ONLY_PROPS).evolve(type=STACK)
                for e in tree
                if _is_checkbox_group_grid(tree, e)
            )
        )


normalize_checkbox_group_grids = CheckboxGroupGrids()
