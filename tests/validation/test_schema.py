# topmark:header:start
#
#   project      : UIStream
#   file         : test_schema.py
#   file_relpath : tests/validation/test_schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for component schemas and the schema registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from uistream.config.errors import CatalogError
from uistream.validation.schema import (
    ComponentSchema,
    PropConstraint,
    PropKind,
    SchemaRegistry,
    SubComponentRef,
    ValidationIssue,
    default_registry,
    json_type_name,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_enum_issue_message_lists_allowed_values() -> None:
    constraint = PropConstraint(PropKind.ENUM, values=("a", "b"))
    (issue,) = constraint.check("c", ("variant",))
    assert issue.message == "Invalid enum value. Expected 'a' | 'b', received 'c'"
    assert str(issue) == "variant: Invalid enum value. Expected 'a' | 'b', received 'c'"


@parametrize(
    ("kind", "value", "expected"),
    [
        (PropKind.STRING, 3, "Expected string, received number"),
        (PropKind.NUMBER, True, "Expected number, received boolean"),
        (PropKind.BOOLEAN, "yes", "Expected boolean, received string"),
        (PropKind.ARRAY, {}, "Expected array, received object"),
        (PropKind.OBJECT, [], "Expected object, received array"),
    ],
)
def test_type_mismatch_messages(kind: PropKind, value: object, expected: str) -> None:
    (issue,) = PropConstraint(kind).check(value, ("p",))
    assert issue.message == expected


def test_dynamic_reference_satisfies_scalar_constraints() -> None:
    ref = {"path": "/state/title"}
    assert PropConstraint(PropKind.STRING).check(ref, ("t",)) == []
    assert PropConstraint(PropKind.ENUM, values=("x",)).check(ref, ("t",)) == []
    assert PropConstraint(PropKind.OBJECT).check({"path": 1}, ("t",)) == []


def test_nested_issue_paths() -> None:
    schema = default_registry().resolve("Select")
    assert schema is not None
    issues = schema.validate_props({"options": [{"label": "ok"}, {"label": 5}]})
    assert [i.path for i in issues] == ["options.1.label"]
    assert not issues[0].is_top_level


def test_required_and_null_props() -> None:
    schema = default_registry().resolve("Link")
    assert schema is not None
    issues = schema.validate_props({"href": None, "variant": None})
    assert issues == [ValidationIssue(("href",), "Required")]
    assert schema.validate_props({"href": "/x"}) == []


def test_undeclared_props_are_accepted() -> None:
    schema = default_registry().resolve("Badge")
    assert schema is not None
    assert schema.validate_props({"whatever": [1, 2]}) == []


def test_root_issue_path() -> None:
    assert ValidationIssue((), "bad").path == "(root)"


def test_alias_and_sub_component_resolution() -> None:
    registry = default_registry()
    textarea = registry.resolve("Textarea")
    assert textarea is not None
    assert textarea.name == "InputArea"
    # Radio declares no Item part: the compound type has no schema
    assert registry.resolve("RadioItem") is None
    assert registry.resolve("Div") is None
    assert registry.resolve("Blink") is None


def test_known_types_include_every_table() -> None:
    known = default_registry().known_types
    assert {"Stack", "Textarea", "RadioItem", "Div", "TableCell"} <= known
    assert "Blink" not in known
    assert default_registry().is_known("Surface")


def test_registry_in_code_with_parts() -> None:
    item = ComponentSchema("Menu.Item", required=("label",))
    menu = ComponentSchema("Menu", parts={"Item": item})
    registry = SchemaRegistry.from_components(
        [menu],
        aliases={"Dropdown": "Menu"},
        sub_components={"MenuItem": SubComponentRef("Menu", "Item")},
    )
    assert registry.resolve("MenuItem") is item
    assert registry.resolve("Dropdown") is menu
    assert registry.known_types == frozenset({"Menu", "Dropdown", "MenuItem", "Div"})


def test_from_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.toml"
    path.write_text(
        '[components.Card]\nrequired = ["title"]\n\n'
        '[components.Card.props.title]\nkind = "string"\n\n'
        '[coercions."Card.tone"]\nloud = "strong"\n',
        encoding="utf-8",
    )
    registry = SchemaRegistry.from_file(path)
    card = registry.resolve("Card")
    assert card is not None
    assert card.required == ("title",)
    assert dict(registry.coercions["Card.tone"]) == {"loud": "strong"}


@parametrize(
    "text",
    [
        'components = "nope"\n',
        '[components.Card.props.x]\nkind = "color"\n',
        '[components.Card.props.x]\nkind = "enum"\n',
        '[components.Card]\nrequired = "title"\n',
        "[aliases]\nA = 1\n",
        '[sub_components]\nX = { parent = "Card" }\n',
        '[coercions.Cardtone]\nloud = "strong"\n',
    ],
)
def test_invalid_catalogs_raise(tmp_path: Path, text: str) -> None:
    path = tmp_path / "catalog.toml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(CatalogError):
        SchemaRegistry.from_file(path)


def test_json_type_name() -> None:
    assert [json_type_name(v) for v in (None, True, 1, 1.5, "", [], {})] == [
        "null",
        "boolean",
        "number",
        "number",
        "string",
        "array",
        "object",
    ]
