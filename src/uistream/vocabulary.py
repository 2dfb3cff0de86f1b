# topmark:header:start
#
#   project      : UIStream
#   file         : vocabulary.py
#   file_relpath : src/uistream/vocabulary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Component type names and prop values the graders and passes reason about.

The schema catalog is the source of truth for which types exist. The names here
are the small subset whose *roles* (layout root, row container, form control,
...) drive the rule-based graders and normalization passes.
"""

from __future__ import annotations

from typing import Final

SURFACE: Final[str] = "Surface"
STACK: Final[str] = "Stack"
GRID: Final[str] = "Grid"
CLUSTER: Final[str] = "Cluster"
TEXT: Final[str] = "Text"
BUTTON: Final[str] = "Button"
INPUT: Final[str] = "Input"
SELECT: Final[str] = "Select"
DIV: Final[str] = "Div"

# Types that must carry a `label` or `aria-label`
A11Y_LABEL_TYPES: Final[frozenset[str]] = frozenset(
    {"Input", "Textarea", "InputArea", "Select", "Checkbox", "Switch", "RadioGroup"}
)
LABEL_PROPS: Final[tuple[str, ...]] = ("label", "aria-label")

HEADING_VARIANTS: Final[frozenset[str]] = frozenset({"heading1", "heading2", "heading3"})

# Grid variants that lay out exactly two columns
TWO_COL_GRID_VARIANTS: Final[frozenset[str]] = frozenset({"2up", "side-by-side", "2-1", "1-2"})
CANONICAL_TWO_COL_VARIANT: Final[str] = "2up"
GRID_COLS_CLASS_PREFIX: Final[str] = "grid-cols-"

# Controls that may share a two-column form row
FORM_ROW_CONTROL_TYPES: Final[frozenset[str]] = frozenset({"Input", "Select", "Textarea"})

# Controls whose `label` duplicates a preceding Text
LABELLED_CONTROL_TYPES: Final[frozenset[str]] = frozenset(
    {"Input", "Select", "Textarea", "InputArea", "RadioGroup", "Switch", "Checkbox"}
)

CHECKABLE_TYPES: Final[frozenset[str]] = frozenset({"Checkbox", "Switch", "RadioItem"})

# Props that only make sense on a Select
SELECT_ONLY_PROPS: Final[frozenset[str]] = frozenset({"options", "multiple"})

# Column props dropped when a Grid is turned into a Stack
GRID_ONLY_PROPS: Final[frozenset[str]] = frozenset({"variant", "columns", "cols"})

SUBMIT_ACTION: Final[str] = "submit_form"
INCREMENT_ACTION: Final[str] = "increment"
DECREMENT_ACTION: Final[str] = "decrement"

SUBMIT_BUTTON_CLASSES: Final[tuple[str, ...]] = ("w-full", "sm:w-auto", "sm:self-end")
ACTION_BAR_CLASSES: Final[tuple[str, ...]] = ("w-full",)

AUTO_STACK_GAP: Final[str] = "lg"
