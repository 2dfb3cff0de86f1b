# topmark:header:start
#
#   project      : UIStream
#   file         : test_composition.py
#   file_relpath : tests/grading/test_composition.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the composition grader."""

from __future__ import annotations

from tests.conftest import el, parametrize, tree_of
from uistream.grading.composition import (
    FLAT_HIERARCHY,
    GRID_WITHOUT_VARIANT,
    NO_HEADING,
    NO_RESPONSIVE_GRID,
    grade_composition,
)
from uistream.grading.report import CompositionRule, GradeReport
from uistream.tree.model import UIElement, UITree


def page(*children: UIElement) -> UITree:
    return tree_of(
        "main",
        el("main", "Surface", ["stack"]),
        el("stack", "Stack", [c.key for c in children]),
        *children,
    )


def violations(report: GradeReport, rule: CompositionRule) -> tuple[str, ...]:
    result = report.get(rule.key)
    assert result is not None
    return result.violations


def heading(key: str, variant: str) -> UIElement:
    return el(key, "Text", children=key, variant=variant)


def test_rules_in_order() -> None:
    report = grade_composition(page(heading("h", "heading2")))
    assert [r.rule for r in report] == [rule.key for rule in CompositionRule]
    assert report.all_pass


def test_no_heading() -> None:
    report = grade_composition(page(el("t", "Text", children="plain")))
    assert violations(report, CompositionRule.HAS_VISUAL_HIERARCHY) == (NO_HEADING,)


def test_heading1_without_heading2_is_flat() -> None:
    report = grade_composition(page(heading("h1", "heading1"), heading("h3", "heading3")))
    assert violations(report, CompositionRule.HAS_VISUAL_HIERARCHY) == (FLAT_HIERARCHY,)


def test_heading1_with_heading2_passes() -> None:
    report = grade_composition(page(heading("h1", "heading1"), heading("h2", "heading2")))
    assert report.all_pass


def test_grid_without_variant_always_fails() -> None:
    report = grade_composition(
        page(heading("h", "heading2"), el("g", "Grid", []), el("g2", "Grid", [], variant="2up"))
    )
    assert violations(report, CompositionRule.HAS_RESPONSIVE_LAYOUT) == (GRID_WITHOUT_VARIANT,)


@parametrize(("count", "passes"), [(10, True), (11, False)])
def test_large_trees_need_a_responsive_grid(count: int, passes: bool) -> None:
    # Surface + Stack + ``count`` Texts; the threshold is 12 reachable elements
    texts = [el(f"t{i}", "Text", children="x", variant="heading2") for i in range(count)]
    report = grade_composition(page(*texts))
    result = report.get(CompositionRule.HAS_RESPONSIVE_LAYOUT.key)
    assert result is not None
    assert result.passed is passes
    if not passes:
        assert result.violations == (NO_RESPONSIVE_GRID,)


def test_large_tree_with_variant_grid_passes() -> None:
    texts = [el(f"t{i}", "Text", children="x", variant="heading2") for i in range(12)]
    grid = el("g", "Grid", [t.key for t in texts], variant="3up")
    report = grade_composition(page(grid, *texts))
    assert report.all_pass


def test_threshold_is_configurable() -> None:
    report = grade_composition(page(heading("h", "heading2")), simple_layout_max_elements=2)
    assert violations(report, CompositionRule.HAS_RESPONSIVE_LAYOUT) == (NO_RESPONSIVE_GRID,)


def test_surface_directly_inside_surface() -> None:
    tree = tree_of(
        "outer",
        el("outer", "Surface", ["inner"]),
        el("inner", "Surface", ["t"]),
        heading("t", "heading2"),
    )
    report = grade_composition(tree)
    assert violations(report, CompositionRule.SURFACE_HIERARCHY_CORRECT) == (
        'Surface "inner" is a direct child of Surface "outer"; '
        "insert a layout element (Stack, Grid) between them",
    )


def test_surface_separated_by_stack_passes() -> None:
    report = grade_composition(page(heading("h", "heading2"), el("card", "Surface", [])))
    assert violations(report, CompositionRule.SURFACE_HIERARCHY_CORRECT) == ()
