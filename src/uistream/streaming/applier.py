# topmark:header:start
#
#   project      : UIStream
#   file         : applier.py
#   file_relpath : src/uistream/streaming/applier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure application of patch operations to an immutable `UITree`.

``add`` and ``replace`` both mean "set at key": neither requires the target
to exist or not exist, and list indices are overwritten rather than shifted.
``remove`` deletes an element without touching any parent's ``children``.

Field paths below an element edit the element's wire record (``props``,
``children``, ``action``, ...) copy-on-write and re-read it through
`UIElement.from_value`. A trailing ``-`` segment appends to a list, creating
it when absent.

Operations that address nothing (unknown path, missing element or missing
intermediate object, wrong value type) return the input tree unchanged, by
reference. Nothing here raises on malformed input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

from uistream.config.logging import get_logger
from uistream.constants import APPEND_SEGMENT
from uistream.streaming.patch import PatchOpKind, parse_path
from uistream.tree.model import UIElement

if TYPE_CHECKING:
    from collections.abc import Iterable

    from uistream.config.logging import UIStreamLogger
    from uistream.streaming.patch import PatchOp, PatchTarget
    from uistream.tree.model import UITree

logger: UIStreamLogger = get_logger(__name__)


class _NoChange:
    pass


NO_CHANGE: Final = _NoChange()


def apply_patch(tree: UITree, op: PatchOp) -> UITree:
    """Apply one operation and return the resulting tree.

    Args:
        tree (UITree): The current snapshot. Never modified.
        op (PatchOp): The operation to apply.

    Returns:
        UITree: The new snapshot, or ``tree`` itself when the op is a no-op.
    """
    target = parse_path(op.path)
    if target is None:
        logger.debug("Ignoring %s on unsupported path %r", op.op.value, op.path)
        return tree

    if target.is_root:
        result = _apply_root(tree, op)
    elif not target.field_path:
        result = _apply_element(tree, target, op)
    else:
        result = _apply_field(tree, target, op)

    if result is tree:
        logger.trace("No-op %s %s", op.op.value, op.path)
    else:
        logger.trace("Applied %s %s", op.op.value, op.path)
    return result


def apply_patches(tree: UITree, ops: Iterable[PatchOp]) -> UITree:
    """Fold ``ops`` over ``tree`` in order."""
    for op in ops:
        tree = apply_patch(tree, op)
    return tree


def _apply_root(tree: UITree, op: PatchOp) -> UITree:
    if op.op is PatchOpKind.REMOVE:
        return tree.with_root("")
    if not isinstance(op.value, str):
        return tree
    return tree.with_root(op.value)


def _apply_element(tree: UITree, target: PatchTarget, op: PatchOp) -> UITree:
    key = cast("str", target.element_key)
    if op.op is PatchOpKind.REMOVE:
        return tree.without_elements(key)
    element = UIElement.from_value(op.value, key=key)
    if element is None or tree.elements.get(key) == element:
        return tree
    return tree.with_elements(element)


def _apply_field(tree: UITree, target: PatchTarget, op: PatchOp) -> UITree:
    key = cast("str", target.element_key)
    existing = tree.elements.get(key)
    if existing is None:
        return tree

    record = _edit(existing.to_dict(), target.field_path, op)
    if record is NO_CHANGE:
        return tree
    updated = UIElement.from_value(record, key=key)
    if updated is None or updated == existing:
        return tree
    return tree.with_elements(updated)


def _list_index(segment: str, size: int) -> int | None:
    if not segment.isdigit() or (len(segment) > 1 and segment.startswith("0")):
        return None
    index = int(segment)
    return index if index < size else None


def _edit(container: Any, segments: tuple[str, ...], op: PatchOp) -> Any:
    """Return a copy of ``container`` with the op applied at ``segments``.

    Returns `NO_CHANGE` when the path does not resolve.
    """
    head, rest = segments[0], segments[1:]
    remove = op.op is PatchOpKind.REMOVE

    if isinstance(container, dict):
        obj = cast("dict[str, Any]", container)
        if rest == (APPEND_SEGMENT,) and not remove:
            current = obj.get(head)
            items = list(cast("list[Any]", current)) if isinstance(current, list) else []
            return {**obj, head: [*items, op.value]}
        if not rest:
            if remove:
                if head not in obj:
                    return NO_CHANGE
                return {k: v for k, v in obj.items() if k != head}
            return {**obj, head: op.value}
        if head not in obj:
            return NO_CHANGE
        child = _edit(obj[head], rest, op)
        if child is NO_CHANGE:
            return NO_CHANGE
        return {**obj, head: child}

    if isinstance(container, list):
        items = list(cast("list[Any]", container))
        if head == APPEND_SEGMENT:
            if rest or remove:
                return NO_CHANGE
            return [*items, op.value]
        index = _list_index(head, len(items))
        if index is None:
            return NO_CHANGE
        if not rest:
            if remove:
                del items[index]
            else:
                items[index] = op.value
            return items
        child = _edit(items[index], rest, op)
        if child is NO_CHANGE:
            return NO_CHANGE
        items[index] = child
        return items

    return NO_CHANGE
