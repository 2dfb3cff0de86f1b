# topmark:header:start
#
#   project      : UIStream
#   file         : duplicate_labels.py
#   file_relpath : src/uistream/normalize/passes/duplicate_labels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Drop a Text that repeats the label of the control right after it.

Generators often emit a Text caption followed by an Input whose own ``label``
says the same thing, so the label is rendered twice. The Text is removed from
its parent's children and, when no other element references it, from the
tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.vocabulary import HEADING_VARIANTS, LABELLED_CONTROL_TYPES, TEXT

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree


def _plain_text(element: UIElement | None) -> str | None:
    """Return the caption of a non-heading Text, else None."""
    if element is None or element.type != TEXT:
        return None
    if element.props.get("variant") in HEADING_VARIANTS:
        return None
    text = element.prop_str("children")
    return text.strip() if text else None


def _control_label(element: UIElement | None) -> str | None:
    if element is None or element.type not in LABELLED_CONTROL_TYPES:
        return None
    label = element.prop_str("label")
    return label.strip() if label else None


class DuplicateFieldLabels(BaseNormalizer):
    """Remove Text captions duplicating the next control's label."""

    def __init__(self) -> None:
        super().__init__(name=PassName.DUPLICATE_FIELD_LABELS)

    def run(self, tree: UITree) -> UITree:
        """Drop duplicate captions parent by parent."""
        updated: list[UIElement] = []
        dropped: set[str] = set()
        for parent in tree:
            # Right to left so a caption is compared with the child that
            # follows it once earlier duplicates are gone.
            kept: list[str] = []
            for key in reversed(parent.child_keys):
                caption = _plain_text(tree.get(key))
                if caption is not None and kept and caption == _control_label(tree.get(kept[0])):
                    dropped.add(key)
                    continue
                kept.insert(0, key)
            if len(kept) != len(parent.child_keys):
                updated.append(parent.with_children(kept))
        if not updated:
            return tree

        updated_keys = {u.key for u in updated}
        still_referenced = {k for e in tree if e.key not in updated_keys for k in e.child_keys}
        still_referenced.update(k for u in updated for k in u.child_keys)
        removed = [k for k in dropped if k not in still_referenced and k != tree.root]
        return tree.edit(updated=updated, removed=sorted(removed))


normalize_duplicate_field_labels = DuplicateFieldLabels()
