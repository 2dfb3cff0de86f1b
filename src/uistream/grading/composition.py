# topmark:header:start
#
#   project      : UIStream
#   file         : composition.py
#   file_relpath : src/uistream/grading/composition.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Composition grader: layout quality rules complementing the structural ones.

Same report shape as `grade_tree`, evaluated independently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.constants import SIMPLE_LAYOUT_MAX_ELEMENTS, TRAVERSAL_LIMIT
from uistream.grading.report import CompositionRule, GradeReport, GradeResult
from uistream.tree.walk import walk_tree
from uistream.vocabulary import GRID, HEADING_VARIANTS, SURFACE, TEXT

if TYPE_CHECKING:
    from uistream.tree.model import UITree

NO_HEADING = "no Text element with a heading variant (heading1, heading2, heading3) found"
FLAT_HIERARCHY = "heading1 exists but no heading2 (consider adding sub-headings)"
GRID_WITHOUT_VARIANT = (
    "Grid element exists but has no variant prop (always specify variant, e.g. 2up, 3up, 4up)"
)
NO_RESPONSIVE_GRID = (
    "no Grid element with variant prop found (complex layouts need responsive grid columns)"
)


def grade_composition(
    tree: UITree,
    *,
    simple_layout_max_elements: int = SIMPLE_LAYOUT_MAX_ELEMENTS,
    traversal_limit: int = TRAVERSAL_LIMIT,
) -> GradeReport:
    """Grade ``tree`` against the composition rules.

    Args:
        tree (UITree): The tree to grade.
        simple_layout_max_elements (int): Trees with at most this many reachable
            elements do not need a responsive Grid.
        traversal_limit (int): Depth past which the walk stops descending.

    Returns:
        GradeReport: One result per `CompositionRule`, in rule order.
    """
    headings: set[str] = set()
    grid_with_variant = False
    grid_without_variant = False
    surfaces: list[str] = []
    count = 0

    for visit in walk_tree(tree, limit=traversal_limit):
        count += 1
        element = visit.element
        if element.type == TEXT:
            variant = element.prop_str("variant")
            if variant in HEADING_VARIANTS:
                headings.add(variant)
        elif element.type == GRID:
            if element.prop_str("variant"):
                grid_with_variant = True
            else:
                grid_without_variant = True
        elif element.type == SURFACE and visit.parent_key is not None:
            parent = tree.get(visit.parent_key)
            if parent is not None and parent.type == SURFACE:
                surfaces.append(
                    f'Surface "{element.key}" is a direct child of Surface '
                    f'"{visit.parent_key}"; insert a layout element (Stack, Grid) between them'
                )

    hierarchy: list[str] = []
    if not headings:
        hierarchy.append(NO_HEADING)
    elif "heading1" in headings and "heading2" not in headings:
        hierarchy.append(FLAT_HIERARCHY)

    layout: list[str] = []
    if grid_without_variant:
        layout.append(GRID_WITHOUT_VARIANT)
    elif count > simple_layout_max_elements and not grid_with_variant:
        layout.append(NO_RESPONSIVE_GRID)

    return GradeReport(
        results=(
            GradeResult.of(CompositionRule.HAS_VISUAL_HIERARCHY.key, hierarchy),
            GradeResult.of(CompositionRule.HAS_RESPONSIVE_LAYOUT.key, layout),
            GradeResult.of(CompositionRule.SURFACE_HIERARCHY_CORRECT.key, surfaces),
        )
    )
