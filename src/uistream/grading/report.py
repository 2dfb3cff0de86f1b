# topmark:header:start
#
#   project      : UIStream
#   file         : report.py
#   file_relpath : src/uistream/grading/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grade report model shared by the structural and composition graders.

Presentation-free: reports carry rule keys and violation strings only. The CLI
layers color on top through `Verdict`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from yachalk import chalk

from uistream.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum
from uistream.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class StructuralRule(EnumIntrospectionMixin, KeyedStrEnum):
    """Structural rules, in evaluation order."""

    VALID_COMPONENT_TYPES = (
        "valid-component-types",
        "Every element type is part of the known vocabulary",
    )
    VALID_PROP_VALUES = (
        "valid-prop-values",
        "Every element passes schema validation",
    )
    REQUIRED_PROPS = (
        "required-props",
        "Text has content and labelled controls have a label",
    )
    CANONICAL_LAYOUT = (
        "canonical-layout",
        "A root Surface wraps its children in a single Stack",
    )
    NO_ORPHAN_NODES = (
        "no-orphan-nodes",
        "Every non-root element has exactly one parent",
        ("orphans",),
    )
    A11Y_LABELS = (
        "a11y-labels",
        "Form controls declare label or aria-label",
        ("a11y",),
    )
    DEPTH_LIMIT = (
        "depth-limit",
        "Nesting depth stays within the limit",
        ("depth",),
    )
    NO_REDUNDANT_CHILDREN = (
        "no-redundant-children",
        "props.children is never an array",
    )


class CompositionRule(EnumIntrospectionMixin, KeyedStrEnum):
    """Composition rules, in evaluation order."""

    HAS_VISUAL_HIERARCHY = (
        "has-visual-hierarchy",
        "Headings exist and heading1 is followed by heading2",
        ("hierarchy",),
    )
    HAS_RESPONSIVE_LAYOUT = (
        "has-responsive-layout",
        "Grids declare a variant and larger trees use one",
        ("responsive",),
    )
    SURFACE_HIERARCHY_CORRECT = (
        "surface-hierarchy-correct",
        "A Surface is never the direct child of a Surface",
        ("surfaces",),
    )


class Verdict(ColoredStrEnum):
    """Human-facing verdict of one rule."""

    PASS = ("pass", chalk.green)
    FAIL = ("fail", chalk.red_bright)


@dataclass(frozen=True)
class GradeResult:
    """Result of one rule.

    Attributes:
        rule (str): Rule key (the `.key` of a `StructuralRule` or `CompositionRule`).
        passed (bool): True when no violation was found.
        violations (tuple[str, ...]): Human-readable violations, in discovery order.
    """

    rule: str
    passed: bool
    violations: tuple[str, ...] = ()

    @classmethod
    def of(cls, rule: str, violations: Iterable[str]) -> GradeResult:
        """Build a result whose pass flag follows from ``violations``."""
        found = tuple(violations)
        return cls(rule=rule, passed=not found, violations=found)

    @property
    def verdict(self) -> Verdict:
        """`Verdict.PASS` or `Verdict.FAIL`."""
        return Verdict.PASS if self.passed else Verdict.FAIL

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible representation."""
        return {
            "rule": self.rule,
            "pass": self.passed,
            "violations": list(self.violations),
        }


@dataclass(frozen=True)
class GradeReport:
    """Ordered rule results of one grader run."""

    results: tuple[GradeResult, ...] = ()

    @property
    def all_pass(self) -> bool:
        """True when every rule passed."""
        return all(r.passed for r in self.results)

    @property
    def failed_rules(self) -> tuple[str, ...]:
        """Keys of the rules that failed, in evaluation order."""
        return tuple(r.rule for r in self.results if not r.passed)

    def get(self, rule: str) -> GradeResult | None:
        """Return the result of ``rule`` or None when it was not evaluated."""
        for result in self.results:
            if result.rule == rule:
                return result
        return None

    def __iter__(self) -> Iterator[GradeResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def merged(self, other: GradeReport) -> GradeReport:
        """Return a report holding this report's results followed by ``other``'s."""
        return GradeReport(results=(*self.results, *other.results))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible representation."""
        return {
            "allPass": self.all_pass,
            "results": [r.to_dict() for r in self.results],
        }
