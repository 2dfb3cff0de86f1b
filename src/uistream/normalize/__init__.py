# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/normalize/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Idempotent tree rewrites fixing known generation anti-patterns.

Every pass is a pure ``UITree -> UITree`` callable that returns its input
unchanged (same reference) when there is nothing to fix.

Note: this package must not import from `uistream.config` beyond its logging
module (`uistream.config.model` imports `uistream.normalize.names`).
"""

from __future__ import annotations

from uistream.normalize.base import BaseNormalizer
from uistream.normalize.names import PassName
from uistream.normalize.passes.checkbox_groups import normalize_checkbox_group_grids
from uistream.normalize.passes.counter_stacks import normalize_counter_stacks
from uistream.normalize.passes.duplicate_labels import normalize_duplicate_field_labels
from uistream.normalize.passes.empty_selects import normalize_empty_selects
from uistream.normalize.passes.form_action_bars import normalize_form_action_bars
from uistream.normalize.passes.form_rows import normalize_sibling_form_row_grids
from uistream.normalize.passes.nested_surfaces import normalize_nested_surfaces
from uistream.normalize.passes.props_children import normalize_props_children_to_structural
from uistream.normalize.passes.surface_orphans import normalize_surface_orphans
from uistream.normalize.pipeline import DEFAULT_PASSES, normalize_tree, select_passes

__all__ = [
    "DEFAULT_PASSES",
    "BaseNormalizer",
    "PassName",
    "normalize_checkbox_group_grids",
    "normalize_counter_stacks",
    "normalize_duplicate_field_labels",
    "normalize_empty_selects",
    "normalize_form_action_bars",
    "normalize_nested_surfaces",
    "normalize_props_children_to_structural",
    "normalize_sibling_form_row_grids",
    "normalize_surface_orphans",
    "normalize_tree",
    "select_passes",
]
