# topmark:header:start
#
#   project      : UIStream
#   file         : structural.py
#   file_relpath : src/uistream/grading/structural.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural grader: eight static, deterministic rules over a `UITree`.

Every rule is evaluated on every call (no short-circuiting). Rules that look
at individual elements only consider elements reachable from the root; the
orphan rule looks at the whole arena because orphans are unreachable by
definition. The grader never mutates its input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from uistream.config.logging import get_logger
from uistream.constants import MAX_DEPTH, TRAVERSAL_LIMIT
from uistream.grading.report import GradeReport, GradeResult, StructuralRule
from uistream.tree.walk import parent_index, walk_tree
from uistream.validation.validator import ElementValidator
from uistream.vocabulary import A11Y_LABEL_TYPES, LABEL_PROPS, STACK, SURFACE, TEXT

if TYPE_CHECKING:
    from collections.abc import Iterable

    from uistream.config.logging import UIStreamLogger
    from uistream.tree.model import UIElement, UITree

logger: UIStreamLogger = get_logger(__name__)


def has_label(element: UIElement) -> bool:
    """Return True when ``element`` declares ``label`` or ``aria-label``."""
    return any(element.props.get(name) is not None for name in LABEL_PROPS)


def grade_tree(
    tree: UITree,
    *,
    validator: ElementValidator | None = None,
    custom_types: Iterable[str] = (),
    max_depth: int = MAX_DEPTH,
    traversal_limit: int = TRAVERSAL_LIMIT,
) -> GradeReport:
    """Grade ``tree`` against the structural rules.

    Args:
        tree (UITree): The tree to grade.
        validator (ElementValidator | None): Validator providing the schema
            registry and coercions; the packaged defaults when None.
        custom_types (Iterable[str]): Extra component types accepted as known.
        max_depth (int): Deepest allowed nesting level (root is 0).
        traversal_limit (int): Depth past which the walk stops descending.

    Returns:
        GradeReport: One result per `StructuralRule`, in rule order.
    """
    validator = validator or ElementValidator()
    known = validator.registry.known_types | frozenset(custom_types)

    unknown_types: list[str] = []
    invalid_props: list[str] = []
    missing_required: list[str] = []
    layout: list[str] = []
    orphans: list[str] = []
    a11y: list[str] = []
    too_deep: list[str] = []
    redundant_children: list[str] = []

    for visit in walk_tree(tree, limit=traversal_limit):
        element, depth = visit.element, visit.depth
        key, type_ = element.key, element.type

        if type_ not in known:
            unknown_types.append(f'{key}: unknown type "{type_}"')

        result = validator.validate(element)
        if not result.valid:
            invalid_props.append(f"{key} ({type_}): {result.summary()}")

        if type_ == TEXT and element.props.get("children") is None:
            missing_required.append(f"{key}: Text missing children")
        if type_ in A11Y_LABEL_TYPES and not has_label(element):
            missing_required.append(f"{key}: {type_} missing label or aria-label")
            a11y.append(f"{key}: {type_} missing label/aria-label")

        if depth == 0 and type_ == SURFACE and element.child_keys:
            children = element.child_keys
            only = tree.get(children[0]) if len(children) == 1 else None
            if only is None or only.type != STACK:
                layout.append(f"{key}: root Surface should wrap children in a single Stack")

        if depth > max_depth:
            too_deep.append(f"{key}: depth {depth} exceeds max {max_depth}")

        if isinstance(element.props.get("children"), list):
            redundant_children.append(
                f"{key}: props.children is an array "
                "(use UIElement.children for structural children)"
            )

    parents = parent_index(tree)
    for key in tree.elements:
        if key == tree.root:
            continue
        referrers = parents.get(key, [])
        if not referrers:
            orphans.append(f"{key}: not referenced by any parent's children")
        elif len(referrers) > 1:
            orphans.append(f"{key}: referenced by multiple parents ({', '.join(referrers)})")

    report = GradeReport(
        results=(
            GradeResult.of(StructuralRule.VALID_COMPONENT_TYPES.key, unknown_types),
            GradeResult.of(StructuralRule.VALID_PROP_VALUES.key, invalid_props),
            GradeResult.of(StructuralRule.REQUIRED_PROPS.key, missing_required),
            GradeResult.of(StructuralRule.CANONICAL_LAYOUT.key, layout),
            GradeResult.of(StructuralRule.NO_ORPHAN_NODES.key, orphans),
            GradeResult.of(StructuralRule.A11Y_LABELS.key, a11y),
            GradeResult.of(StructuralRule.DEPTH_LIMIT.key, too_deep),
            GradeResult.of(StructuralRule.NO_REDUNDANT_CHILDREN.key, redundant_children),
        )
    )
    logger.debug("Structural grade: failed rules %s", list(report.failed_rules))
    return report
