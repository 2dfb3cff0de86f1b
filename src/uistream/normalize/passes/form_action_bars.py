# topmark:header:start
#
#   project      : UIStream
#   file         : form_action_bars.py
#   file_relpath : src/uistream/normalize/passes/form_action_bars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Right-align the trailing submit control of a form.

In a Stack that contains a form control, the last child is the form's action
area. A submit Button there gets full width on small screens and aligns to
the end otherwise; a trailing Cluster holding a submit Button is justified to
the end and takes the full width.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.normalize.utils import child_elements, is_submit_button, merge_class_names
from uistream.vocabulary import (
    ACTION_BAR_CLASSES,
    CLUSTER,
    LABELLED_CONTROL_TYPES,
    STACK,
    SUBMIT_BUTTON_CLASSES,
)

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree


def _aligned(tree: UITree, trailing: UIElement) -> UIElement:
    if is_submit_button(trailing):
        return trailing.with_props(
            className=merge_class_names(trailing.props.get("className"), SUBMIT_BUTTON_CLASSES)
        )
    if trailing.type == CLUSTER and any(
        is_submit_button(b) for b in child_elements(tree, trailing)
    ):
        return trailing.with_props(
            justify="end",
            className=merge_class_names(trailing.props.get("className"), ACTION_BAR_CLASSES),
        )
    return trailing


class FormActionBars(BaseNormalizer):
    """Align the submit control at the end of form Stacks."""

    def __init__(self) -> None:
        super().__init__(name=PassName.FORM_ACTION_BARS)

    def run(self, tree: UITree) -> UITree:
        """Align the trailing submit control of every form Stack."""
        updated: dict[str, UIElement] = {}
        for stack in tree:
            if stack.type != STACK:
                continue
            children = child_elements(tree, stack)
            if len(children) < 2 or not any(c.type in LABELLED_CONTROL_TYPES for c in children):
                continue
            trailing = updated.get(children[-1].key, children[-1])
            aligned = _aligned(tree, trailing)
            if aligned is not trailing:
                updated[aligned.key] = aligned
        return tree.with_elements(*updated.values())


normalize_form_action_bars = FormActionBars()
