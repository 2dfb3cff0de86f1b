# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/validation/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema-driven validation, coercion and repair of UI elements.

Per element: coerce known-invalid enum values, resolve the schema (aliases,
sub-components), validate, then strip failing direct props when possible.
"""

from __future__ import annotations

from uistream.validation.coercion import (
    CoercionTable,
    coerce_element_props,
    default_coercions,
)
from uistream.validation.schema import (
    ComponentSchema,
    PropConstraint,
    PropKind,
    SchemaRegistry,
    SubComponentRef,
    ValidationIssue,
    default_registry,
)
from uistream.validation.validator import (
    VALID,
    ElementCheck,
    ElementOutcome,
    ElementValidator,
    ValidationResult,
    repair_element,
    validate_element,
)

__all__ = [
    "VALID",
    "CoercionTable",
    "ComponentSchema",
    "ElementCheck",
    "ElementOutcome",
    "ElementValidator",
    "PropConstraint",
    "PropKind",
    "SchemaRegistry",
    "SubComponentRef",
    "ValidationIssue",
    "ValidationResult",
    "coerce_element_props",
    "default_coercions",
    "default_registry",
    "repair_element",
    "validate_element",
]
