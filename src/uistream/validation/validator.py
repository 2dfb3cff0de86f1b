# topmark:header:start
#
#   project      : UIStream
#   file         : validator.py
#   file_relpath : src/uistream/validation/validator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Element validation and shallow repair.

`validate_element` checks an element's props against the schema its type
resolves to; `repair_element` strips the failing direct props so the
presentation layer falls back to defaults. `ElementValidator` runs the whole
per-element pipeline (coerce, resolve, validate, repair) against injected
registries and reports an `ElementCheck`.

Nothing in this module raises for malformed elements: every outcome is a
returned value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from yachalk import chalk

from uistream.config.logging import get_logger
from uistream.rendering.colored_enum import ColoredStrEnum
from uistream.validation.coercion import CoercionTable, default_coercions
from uistream.validation.schema import default_registry

if TYPE_CHECKING:
    from uistream.config.logging import UIStreamLogger
    from uistream.tree.model import UIElement
    from uistream.validation.schema import SchemaRegistry, ValidationIssue

logger: UIStreamLogger = get_logger(__name__)

# Memoized checks kept per validator before the cache is reset
CHECK_CACHE_SIZE: int = 4096


class ElementOutcome(ColoredStrEnum):
    """Outcome of the per-element pipeline."""

    VALID = ("valid", chalk.green)
    REPAIRED = ("repaired", chalk.yellow)
    INVALID = ("invalid", chalk.red_bright)


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating one element.

    Attributes:
        valid (bool): True when the props conform (or no schema applies).
        element_key (str): Key of the validated element ("" for `VALID`).
        element_type (str): Type of the validated element ("" for `VALID`).
        issues (tuple[ValidationIssue, ...]): Ordered issues; empty when valid.
    """

    valid: bool
    element_key: str = ""
    element_type: str = ""
    issues: tuple[ValidationIssue, ...] = ()

    def summary(self) -> str:
        """Return ``"path: message; ..."`` for the issues."""
        return "; ".join(str(issue) for issue in self.issues)


# Shared result for elements that pass or have no schema
VALID: ValidationResult = ValidationResult(valid=True)


@dataclass(frozen=True)
class ElementCheck:
    """Outcome of `ElementValidator.check`.

    Attributes:
        outcome (ElementOutcome): VALID, REPAIRED or INVALID.
        element (UIElement): The element to render: coerced and, when
            REPAIRED, stripped of its failing props. For INVALID, the
            coerced element.
        result (ValidationResult): Validation result of the coerced element.
        stripped (tuple[str, ...]): Props removed by repair.
    """

    outcome: ElementOutcome
    element: UIElement
    result: ValidationResult = VALID
    stripped: tuple[str, ...] = ()

    @property
    def renderable(self) -> bool:
        """True unless the element is unrepairably invalid."""
        return self.outcome is not ElementOutcome.INVALID


def validate_element(
    element: UIElement, registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate ``element`` against the schema its type resolves to.

    An array under ``props.children`` is ignored: structural children live in
    ``element.children``. Callers should coerce the element first (see
    `coerce_element_props`).

    Args:
        element (UIElement): The element to validate.
        registry (SchemaRegistry | None): Schema registry; the packaged
            catalog when None.

    Returns:
        ValidationResult: `VALID`, or an invalid result with ordered issues.
    """
    if registry is None:
        registry = default_registry()
    schema = registry.resolve(element.type)
    if schema is None:
        return VALID

    props = element.props
    if isinstance(props.get("children"), list):
        props = {k: v for k, v in props.items() if k != "children"}

    issues = schema.validate_props(props)
    if not issues:
        return VALID
    return ValidationResult(
        valid=False,
        element_key=element.key,
        element_type=element.type,
        issues=tuple(issues),
    )


def strippable_props(element: UIElement, result: ValidationResult) -> tuple[str, ...]:
    """Return the present direct props named by ``result``'s issues, in issue order."""
    names: list[str] = []
    for issue in result.issues:
        if not issue.is_top_level:
            continue
        name = str(issue.segments[0])
        if name in element.props and name not in names:
            names.append(name)
    return tuple(names)


def repair_element(element: UIElement, result: ValidationResult) -> UIElement | None:
    """Strip the failing direct props of ``element``.

    Only issues exactly one segment deep that name a prop present on the
    element qualify. Nested failures are left alone.

    Returns:
        UIElement | None: The repaired copy, or None when nothing can be
            stripped (the element stays invalid).
    """
    if result.valid:
        return element
    names = strippable_props(element, result)
    if not names:
        return None
    return element.without_props(names)


@dataclass
class ElementValidator:
    """Per-element validation pipeline bound to injected registries.

    Checks are memoized per element instance (by identity) so that replaying
    the same tree snapshot does not re-validate or re-log unchanged elements.

    Attributes:
        registry (SchemaRegistry): Schemas used for validation.
        coercions (CoercionTable): Coercions applied before validation.
    """

    registry: SchemaRegistry = field(default_factory=default_registry)
    coercions: CoercionTable = field(default_factory=default_coercions)
    _cache: dict[int, tuple[UIElement, ElementCheck]] = field(
        default_factory=lambda: {}, init=False, repr=False
    )

    def check(self, element: UIElement) -> ElementCheck:
        """Run coerce, validate and repair on ``element``.

        Repairs and unrepairable failures are logged once per element instance.
        """
        cached = self._cache.get(id(element))
        if cached is not None and cached[0] is element:
            return cached[1]

        result = self._check(element)
        if len(self._cache) >= CHECK_CACHE_SIZE:
            self._cache.clear()
        self._cache[id(element)] = (element, result)
        return result

    def validate(self, element: UIElement) -> ValidationResult:
        """Coerce then validate ``element`` (no repair)."""
        return validate_element(self.coercions.coerce(element), self.registry)

    def _check(self, element: UIElement) -> ElementCheck:
        coerced = self.coercions.coerce(element)
        result = validate_element(coerced, self.registry)
        if result.valid:
            return ElementCheck(ElementOutcome.VALID, coerced)

        repaired = repair_element(coerced, result)
        if repaired is None:
            logger.warning(
                "Validation failed for element %r (%s): %s",
                result.element_key,
                result.element_type,
                result.summary(),
            )
            return ElementCheck(ElementOutcome.INVALID, coerced, result)

        stripped = strippable_props(coerced, result)
        logger.warning(
            "Repaired element %r (%s): stripped invalid props [%s]",
            result.element_key,
            result.element_type,
            ", ".join(stripped),
        )
        return ElementCheck(ElementOutcome.REPAIRED, repaired, result, stripped)
