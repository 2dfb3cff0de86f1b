# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/grading/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule-based graders scoring the quality of a UI tree."""

from __future__ import annotations

from uistream.grading.composition import grade_composition
from uistream.grading.report import (
    CompositionRule,
    GradeReport,
    GradeResult,
    StructuralRule,
    Verdict,
)
from uistream.grading.structural import grade_tree, has_label

__all__ = [
    "CompositionRule",
    "GradeReport",
    "GradeResult",
    "StructuralRule",
    "Verdict",
    "grade_composition",
    "grade_tree",
    "has_label",
]
