# topmark:header:start
#
#   project      : UIStream
#   file         : test_structure_passes.py
#   file_relpath : tests/normalize/test_structure_passes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the passes that restructure children lists.

Covers props-children-to-structural, nested-surfaces and surface-orphans.
"""

from __future__ import annotations

from tests.conftest import el, tree_of
from uistream.normalize.passes.nested_surfaces import normalize_nested_surfaces
from uistream.normalize.passes.props_children import normalize_props_children_to_structural
from uistream.normalize.passes.surface_orphans import normalize_surface_orphans

# --- props-children-to-structural ---


def test_props_children_keys_move_to_children() -> None:
    tree = tree_of(
        "sel",
        el("sel", "Select", ["o1"], label="Pick", children=["o1", "o2", "ghost"]),
        el("o1", "SelectOption"),
        el("o2", "SelectOption"),
    )
    out = normalize_props_children_to_structural(tree)
    sel = out.get("sel")
    assert sel is not None
    assert sel.children == ("o1", "o2")
    assert "children" not in sel.props
    assert sel.props["label"] == "Pick"


def test_props_children_text_is_left_alone() -> None:
    tree = tree_of("t", el("t", "Text", children="Hello"), el("u", "Text", children=["nope"]))
    assert normalize_props_children_to_structural(tree) is tree


# --- nested-surfaces ---


def test_sole_nested_surface_is_lifted() -> None:
    tree = tree_of(
        "page",
        el("page", "Stack", ["outer"]),
        el("outer", "Surface", ["inner"], className="p-4"),
        el("inner", "Surface", ["a", "b"]),
        el("a", "Text", parent="inner", children="x"),
        el("b", "Text", children="y"),
    )
    out = normalize_nested_surfaces(tree)
    outer = out.get("outer")
    a = out.get("a")
    assert outer is not None
    assert a is not None
    assert "inner" not in out
    assert outer.children == ("a", "b")
    assert outer.props["className"] == "p-4"
    assert a.parent_key == "outer"


def test_surface_chains_collapse_in_one_pass() -> None:
    tree = tree_of(
        "s1",
        el("s1", "Surface", ["s2"]),
        el("s2", "Surface", ["s3"]),
        el("s3", "Surface", ["t"]),
        el("t", "Text", children="deep"),
    )
    out = normalize_nested_surfaces(tree)
    s1 = out.get("s1")
    assert s1 is not None
    assert s1.children == ("t",)
    assert sorted(out.elements) == ["s1", "t"]


def test_surface_with_several_children_is_kept() -> None:
    tree = tree_of(
        "s1",
        el("s1", "Surface", ["s2", "t"]),
        el("s2", "Surface", []),
        el("t", "Text", children="x"),
    )
    assert normalize_nested_surfaces(tree) is tree


def test_root_surface_is_never_removed() -> None:
    tree = tree_of("s2", el("s1", "Surface", ["s2"]), el("s2", "Surface", ["s1"]))
    out = normalize_nested_surfaces(tree)
    assert "s2" in out


# --- surface-orphans ---


def test_loose_surface_children_are_wrapped() -> None:
    tree = tree_of(
        "card",
        el("card", "Surface", ["a", "b"]),
        el("a", "Text", parent="card", children="x"),
        el("b", "Button", parent="card", children="Go"),
    )
    out = normalize_surface_orphans(tree)
    card = out.get("card")
    stack = out.get("auto-stack-card")
    a = out.get("a")
    assert card is not None
    assert stack is not None
    assert a is not None
    assert card.children == ("auto-stack-card",)
    assert stack.type == "Stack"
    assert dict(stack.props) == {"gap": "lg"}
    assert stack.children == ("a", "b")
    assert stack.parent_key == "card"
    assert a.parent_key == "auto-stack-card"


def test_single_non_stack_child_is_wrapped() -> None:
    tree = tree_of("card", el("card", "Surface", ["t"]), el("t", "Text", children="x"))
    out = normalize_surface_orphans(tree)
    card = out.get("card")
    assert card is not None
    assert card.children == ("auto-stack-card",)


def test_single_stack_child_or_pending_child_is_left_alone() -> None:
    tree = tree_of(
        "card",
        el("card", "Surface", ["s"]),
        el("s", "Stack", []),
        el("pending", "Surface", ["not-yet"]),
        el("empty", "Surface", []),
    )
    assert normalize_surface_orphans(tree) is tree


def test_synthesized_key_avoids_collisions() -> None:
    tree = tree_of(
        "card",
        el("card", "Surface", ["a", "b"]),
        el("auto-stack-card", "Text", children="taken"),
        el("a", "Div"),
        el("b", "Div"),
    )
    out = normalize_surface_orphans(tree)
    card = out.get("card")
    assert card is not None
    assert card.children == ("auto-stack-card-2",)
    taken = out.get("auto-stack-card")
    assert taken is not None
    assert taken.type == "Text"
