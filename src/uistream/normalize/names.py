# topmark:header:start
#
#   project      : UIStream
#   file         : names.py
#   file_relpath : src/uistream/normalize/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable names of the normalization passes, in pipeline order."""

from __future__ import annotations

from uistream.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum


class PassName(EnumIntrospectionMixin, KeyedStrEnum):
    """Normalization pass identifiers used in configuration and on the CLI."""


    PROPS_CHILDREN_TO_STRUCTURAL = (
        "props-children-to-structural",
        "Move element keys from props.children into children",
        ("props-children",),
    )
    NESTED_SURFACES = (
        "nested-surfaces",
        "Lift the children of a Surface nested as sole child of a Surface",
    )
    EMPTY_SELECTS = (
        "empty-selects",
        "Turn a Select without options into an Input",
    )
    DUPLICATE_FIELD_LABELS = (
        "duplicate-field-labels",
        "Drop a Text repeating the label of the following control",
    )
    CHECKBOX_GROUP_GRIDS = (
        "checkbox-group-grids",
        "Stack a label and checkbox list laid out as a Grid",
    )
    SIBLING_FORM_ROW_GRIDS = (
        "sibling-form-row-grids",
        "Unify column variants of sibling two-column form rows",
        ("form-rows",),
    )
    SURFACE_ORPHANS = (
        "surface-orphans",
        "Wrap loose Surface children in a synthesized Stack",
    )
    COUNTER_STACKS = (
        "counter-stacks",
        "Center increment/decrement control clusters",
    )
    FORM_ACTION_BARS = (
        "form-action-bars",
        "Right-align the trailing submit control of a form",
    )
