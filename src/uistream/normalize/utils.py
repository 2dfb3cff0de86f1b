# topmark:header:start
#
#   project      : UIStream
#   file         : utils.py
#   file_relpath : src/uistream/normalize/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small element predicates and prop helpers shared by the passes."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from uistream.vocabulary import (
    BUTTON,
    GRID,
    GRID_COLS_CLASS_PREFIX,
    SUBMIT_ACTION,
    TWO_COL_GRID_VARIANTS,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from uistream.tree.model import UIElement, UITree

_GRID_COLS_RE = re.compile(r"\b" + re.escape(GRID_COLS_CLASS_PREFIX))


def child_elements(tree: UITree, element: UIElement) -> list[UIElement]:
    """Return the existing children of ``element``, in order."""
    return [c for c in (tree.get(k) for k in element.child_keys) if c is not None]


def merge_class_names(existing: object, classes: Iterable[str]) -> str:
    """Append the missing ``classes`` to a ``className`` value.

    Returns the existing string unchanged when every class is already present.
    """
    current = existing if isinstance(existing, str) else ""
    tokens = current.split()
    missing = [c for c in classes if c not in tokens]
    if not missing:
        return current
    return " ".join([*tokens, *missing])


def action_name(element: UIElement) -> str | None:
    """Return the action name of ``element``, if any."""
    return element.action.name if element.action is not None else None


def is_submit_button(element: UIElement) -> bool:
    """Return True for a Button that submits a form."""
    if element.type != BUTTON:
        return False
    return action_name(element) == SUBMIT_ACTION or element.props.get("type") == "submit"


def is_two_col_row_grid(element: UIElement | None) -> bool:
    """Return True for a two-child Grid laid out as two columns.

    A Grid with an explicit ``grid-cols-*`` class is left to the generator.
    """
    if element is None or element.type != GRID or len(element.child_keys) != 2:
        return False
    variant = element.props.get("variant")
    if variant is not None and not isinstance(variant, str):
        return False
    if isinstance(variant, str) and variant not in TWO_COL_GRID_VARIANTS:
        return False
    class_name = element.props.get("className")
    return not (isinstance(class_name, str) and _GRID_COLS_RE.search(class_name))

