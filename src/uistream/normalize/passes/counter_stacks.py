# topmark:header:start
#
#   project      : UIStream
#   file         : counter_stacks.py
#   file_relpath : src/uistream/normalize/passes/counter_stacks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Center counter widgets.

A Stack holding a button group with both an increment and a decrement action
is a counter. The Stack is centered and so is the button group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.normalize.utils import action_name, child_elements
from uistream.vocabulary import BUTTON, CLUSTER, DECREMENT_ACTION, INCREMENT_ACTION, STACK

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree

COUNTER_ACTIONS: frozenset[str] = frozenset({INCREMENT_ACTION, DECREMENT_ACTION})


def _is_counter_group(tree: UITree, element: UIElement) -> bool:
    if element.type not in (CLUSTER, STACK):
        return False
    names = {action_name(b) for b in child_elements(tree, element) if b.type == BUTTON}
    return COUNTER_ACTIONS <= names


def _centered(group: UIElement) -> UIElement:
    if group.type == CLUSTER:
        return group.with_props(justify="center")
    return group.with_props(align="center")


class CounterStacks(BaseNormalizer):
    """Center Stacks holding increment/decrement button groups."""

    def __init__(self) -> None:
        super().__init__(name=PassName.COUNTER_STACKS)

    def run(self, tree: UITree) -> UITree:
        """Center every counter Stack and its button group."""
        updated: dict[str, UIElement] = {}
        for stack in tree:
            if stack.type != STACK:
                continue
            groups = [g for g in child_elements(tree, stack) if _is_counter_group(tree, g)]
            if not groups:
                continue
            updated[stack.key] = updated.get(stack.key, stack).with_props(align="center")
            for group in groups:
                updated[group.key] = _centered(updated.get(group.key, group))
        return tree.with_elements(*updated.values())


normalize_counter_stacks = CounterStacks()
