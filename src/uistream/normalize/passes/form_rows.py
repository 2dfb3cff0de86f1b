# topmark:header:start
#
#   project      : UIStream
#   file         : form_rows.py
#   file_relpath : src/uistream/normalize/passes/form_rows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unify the column variants of sibling two-column form rows.

When a form section is emitted as several two-column Grid rows that mix
variants (``"side-by-side"`` next to ``"2-1"``), column widths jump between
rows. Within one parent, two or more such rows whose cells are form controls
and whose variants disagree are all set to the canonical ``"2up"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.normalize.utils import is_two_col_row_grid
from uistream.vocabulary import CANONICAL_TWO_COL_VARIANT, FORM_ROW_CONTROL_TYPES

if TYPE_CHECKING:
    from uistream.tree.model import UIElement, UITree


def _is_form_row(tree: UITree, element: UIElement | None) -> bool:
    if element is None or not is_two_col_row_grid(element):
        return False
    cells = [tree.get(k) for k in element.child_keys]
    return all(c is not None and c.type in FORM_ROW_CONTROL_TYPES for c in cells)


class SiblingFormRowGrids(BaseNormalizer):
    """Set mismatched sibling form-row Grids to the canonical variant."""

    def __init__(self) -> None:
        super().__init__(name=PassName.SIBLING_FORM_ROW_GRIDS)

    def run(self, tree: UITree) -> UITree:
        """Unify row variants parent by parent."""
        updated: dict[str, UIElement] = {}
        # A row shared by several parents can unbalance a parent already
        # visited, so repeat until no row changes.
        changed = True
        while changed:
            changed = False
            for parent in tree:
                rows = [
                    updated.get(row.key, row)
                    for row in (tree.get(k) for k in dict.fromkeys(parent.child_keys))
                    if row is not None and _is_form_row(tree, row)
                ]
                if len(rows) < 2:
                    continue
                variants = {
                    v for v in (r.props.get("variant") for r in rows) if isinstance(v, str)
                }
                if len(variants) <= 1:
                    continue
                for row in rows:
                    fixed = row.with_props(variant=CANONICAL_TWO_COL_VARIANT)
                    if fixed is not row:
                        updated[row.key] = fixed
                        changed = True
        return tree.with_elements(*updated.values())


normalize_sibling_form_row_grids = SiblingFormRowGrids()
