# topmark:header:start
#
#   project      : UIStream
#   file         : test_validator.py
#   file_relpath : tests/validation/test_validator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for element validation, repair and the per-element pipeline."""

from __future__ import annotations

import logging

import pytest

from tests.conftest import el
from uistream.validation.schema import ComponentSchema, PropConstraint, PropKind, SchemaRegistry
from uistream.validation.validator import (
    VALID,
    ElementOutcome,
    ElementValidator,
    repair_element,
    validate_element,
)


def test_unknown_and_synthetic_types_are_valid() -> None:
    assert validate_element(el("x", "Blink", anything=1)) is VALID
    assert validate_element(el("d", "Div", className=3)) is VALID


def test_invalid_result_carries_key_type_and_issues() -> None:
    result = validate_element(el("b", "Badge", variant="bogus"))
    assert not result.valid
    assert result.element_key == "b"
    assert result.element_type == "Badge"
    assert result.summary().startswith("variant: Invalid enum value.")


def test_props_children_array_is_ignored() -> None:
    registry = SchemaRegistry.from_components(
        [ComponentSchema("Card", props={"children": PropConstraint(PropKind.STRING)})]
    )
    assert validate_element(el("c", "Card", children=["a", "b"]), registry).valid
    assert not validate_element(el("c", "Card", children=3), registry).valid


def test_repair_strips_failing_direct_props() -> None:
    element = el("b", "Button", variant="huge", size="lg", disabled="no")
    result = validate_element(element)
    repaired = repair_element(element, result)
    assert repaired is not None
    assert dict(repaired.props) == {"size": "lg"}
    assert validate_element(repaired).valid


def test_repair_returns_element_when_valid() -> None:
    element = el("b", "Button", variant="primary")
    assert repair_element(element, VALID) is element


def test_missing_required_prop_cannot_be_repaired() -> None:
    element = el("l", "Link", variant="inline")
    result = validate_element(element)
    assert [str(i) for i in result.issues] == ["href: Required"]
    assert repair_element(element, result) is None


def test_nested_failure_cannot_be_repaired() -> None:
    element = el("s", "Select", label="Pick", options=[{"label": 1, "value": "a"}])
    result = validate_element(element)
    assert repair_element(element, result) is None


def test_pipeline_coerces_before_validating() -> None:
    check = ElementValidator().check(el("b", "Badge", variant="success"))
    assert check.outcome is ElementOutcome.VALID
    assert check.element.props["variant"] == "primary"


def test_pipeline_repairs_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        check = ElementValidator().check(el("b", "Badge", variant="sparkly"))
    assert check.outcome is ElementOutcome.REPAIRED
    assert check.stripped == ("variant",)
    assert "variant" not in check.element.props
    assert check.renderable
    assert "Repaired element 'b' (Badge)" in caplog.text


def test_pipeline_reports_unrepairable_elements() -> None:
    check = ElementValidator().check(el("m", "Meter", label="CPU"))
    assert check.outcome is ElementOutcome.INVALID
    assert not check.renderable
    assert not check.result.valid


def test_checks_are_memoized_per_instance(caplog: pytest.LogCaptureFixture) -> None:
    validator = ElementValidator()
    element = el("b", "Badge", variant="sparkly")
    with caplog.at_level(logging.WARNING):
        first = validator.check(element)
        second = validator.check(element)
    assert first is second
    assert caplog.text.count("Repaired element") == 1
    assert validator.check(el("b", "Badge", variant="sparkly")) is not first


def test_validate_uses_injected_registry() -> None:
    registry = SchemaRegistry.from_components([ComponentSchema("Badge", required=("text",))])
    validator = ElementValidator(registry=registry)
    assert not validator.validate(el("b", "Badge")).valid
    assert ElementValidator().validate(el("b", "Badge")).valid


def test_injected_empty_registry_is_not_replaced_by_the_default() -> None:
    empty = SchemaRegistry.from_components([])
    assert validate_element(el("b", "Badge", variant="bogus"), empty) is VALID
    assert not validate_element(el("b", "Badge", variant="bogus")).valid
