# topmark:header:start
#
#   project      : UIStream
#   file         : pipeline.py
#   file_relpath : src/uistream/normalize/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The default normalization pipeline (immutable, ordered pass sequence).

Overview
--------
1. props-children-to-structural
2. nested-surfaces
3. empty-selects
4. duplicate-field-labels
5. checkbox-group-grids
6. sibling-form-row-grids
7. surface-orphans
8. counter-stacks
9. form-action-bars

Each pass runs once per cycle; later passes observe earlier passes' output.
Surface orphans are wrapped before the counter and action-bar passes run, so
those passes see the synthesized Stack in the same cycle.

Notes:
* Pipelines are immutable (``Final[tuple[BaseNormalizer, ...]]``) and passes
  are instantiated objects.
* Every pass is idempotent on its own. Passes are not re-run when a later
  pass creates work for an earlier one, so a cycle is not guaranteed to be a
  fixpoint of the whole pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from uistream.config.logging import get_logger

from .passes import (
    checkbox_groups,
    counter_stacks,
    duplicate_labels,
    empty_selects,
    form_action_bars,
    form_rows,
    nested_surfaces,
    props_children,
    surface_orphans,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from uistream.config.logging import UIStreamLogger
    from uistream.normalize.base import BaseNormalizer
    from uistream.normalize.names import PassName
    from uistream.tree.model import UITree

logger: UIStreamLogger = get_logger(__name__)

DEFAULT_PASSES: Final[tuple[BaseNormalizer, ...]] = (
    props_children.normalize_props_children_to_structural,
    nested_surfaces.normalize_nested_surfaces,
    empty_selects.normalize_empty_selects,
    duplicate_labels.normalize_duplicate_field_labels,
    checkbox_groups.normalize_checkbox_group_grids,
    form_rows.normalize_sibling_form_row_grids,
    surface_orphans.normalize_surface_orphans,
    counter_stacks.normalize_counter_stacks,
    form_action_bars.normalize_form_action_bars,
)


def select_passes(
    disabled: Iterable[PassName] = (),
    passes: Sequence[BaseNormalizer] = DEFAULT_PASSES,
) -> tuple[BaseNormalizer, ...]:
    """Return ``passes`` without the disabled ones, order preserved."""
    skip = set(disabled)
    return tuple(p for p in passes if p.name not in skip)


def normalize_tree(
    tree: UITree,
    passes: Sequence[BaseNormalizer] = DEFAULT_PASSES,
    *,
    disabled: Iterable[PassName] = (),
) -> UITree:
    """Run each pass once, in order.

    Args:
        tree (UITree): The input tree (never mutated).
        passes (Sequence[BaseNormalizer]): Passes to run, in order.
        disabled (Iterable[PassName]): Pass names to skip.

    Returns:
        UITree: The normalized tree, or ``tree`` itself when no pass changed it.
    """
    result = tree
    for normalizer in select_passes(disabled, passes):
        result = normalizer(result)
    if result is not tree:
        logger.debug("Normalized tree %r (%d elements)", result.root, len(result))
    return result
