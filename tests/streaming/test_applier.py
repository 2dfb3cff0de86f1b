# topmark:header:start
#
#   project      : UIStream
#   file         : test_applier.py
#   file_relpath : tests/streaming/test_applier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for applying patch operations to immutable trees."""

from __future__ import annotations

from typing import Any

from tests.conftest import el, tree_of
from uistream.streaming.applier import apply_patch, apply_patches
from uistream.streaming.patch import MISSING, PatchOp, PatchOpKind, element_path
from uistream.tree.model import EMPTY_TREE, UITree


def add(path: str, value: Any) -> PatchOp:
    return PatchOp(PatchOpKind.ADD, path, value)


def replace(path: str, value: Any) -> PatchOp:
    return PatchOp(PatchOpKind.REPLACE, path, value)


def remove(path: str) -> PatchOp:
    return PatchOp(PatchOpKind.REMOVE, path, MISSING)


def base_tree() -> UITree:
    return tree_of(
        "root",
        el("root", "Stack", ["title", "body"], gap="lg"),
        el("title", "Text", parent="root", children="Hello", variant="heading1"),
        el("body", "Text", parent="root", children="World"),
    )


def test_set_root_and_insert_element() -> None:
    tree = apply_patches(
        EMPTY_TREE,
        [
            add("/root", "main"),
            add("/elements/main", {"type": "Surface", "props": {}, "children": []}),
        ],
    )
    assert tree.root == "main"
    main = tree.get("main")
    assert main is not None
    assert main.type == "Surface"
    assert main.children == ()


def test_add_and_replace_both_overwrite() -> None:
    tree = base_tree()
    added = apply_patch(tree, add("/elements/body", {"type": "Badge", "props": {}}))
    replaced = apply_patch(tree, replace("/elements/body", {"type": "Badge", "props": {}}))
    assert added == replaced
    body = added.get("body")
    assert body is not None
    assert body.type == "Badge"


def test_replace_on_missing_element_inserts_it() -> None:
    tree = apply_patch(base_tree(), replace("/elements/new", {"type": "Div"}))
    assert "new" in tree


def test_path_key_wins_over_record_key() -> None:
    tree = apply_patch(EMPTY_TREE, add("/elements/real", {"key": "fake", "type": "Div"}))
    assert list(tree.elements) == ["real"]
    element = tree.get("real")
    assert element is not None
    assert element.key == "real"


def test_remove_element_leaves_parent_children_dangling() -> None:
    tree = apply_patch(base_tree(), remove("/elements/body"))
    assert "body" not in tree
    root = tree.get("root")
    assert root is not None
    assert root.children == ("title", "body")


def test_remove_root_clears_root_key() -> None:
    tree = apply_patch(base_tree(), remove("/root"))
    assert tree.root == ""
    assert len(tree) == 3


def test_non_string_root_value_is_a_no_op() -> None:
    tree = base_tree()
    assert apply_patch(tree, add("/root", 42)) is tree


def test_non_object_element_value_is_a_no_op() -> None:
    tree = base_tree()
    assert apply_patch(tree, add("/elements/body", "oops")) is tree


def test_set_prop_through_field_path() -> None:
    tree = base_tree()
    updated = apply_patch(tree, replace("/elements/title/props/variant", "heading2"))
    title = updated.get("title")
    assert title is not None
    assert title.props["variant"] == "heading2"
    assert title.props["children"] == "Hello"


def test_field_edit_does_not_mutate_the_input_tree() -> None:
    tree = base_tree()
    before = tree.to_dict()
    apply_patch(tree, replace("/elements/title/props/variant", "heading2"))
    apply_patch(tree, remove("/elements/body"))
    assert tree.to_dict() == before


def test_remove_prop() -> None:
    updated = apply_patch(base_tree(), remove("/elements/root/props/gap"))
    root = updated.get("root")
    assert root is not None
    assert "gap" not in root.props


def test_remove_missing_prop_returns_same_tree() -> None:
    tree = base_tree()
    assert apply_patch(tree, remove("/elements/root/props/nope")) is tree


def test_field_edit_on_missing_element_returns_same_tree() -> None:
    tree = base_tree()
    assert apply_patch(tree, add("/elements/ghost/props/x", 1)) is tree


def test_missing_intermediate_object_returns_same_tree() -> None:
    tree = base_tree()
    assert apply_patch(tree, add("/elements/root/props/style/color", "red")) is tree


def test_append_child_with_dash_segment() -> None:
    updated = apply_patch(base_tree(), add("/elements/root/children/-", "footer"))
    root = updated.get("root")
    assert root is not None
    assert root.children == ("title", "body", "footer")


def test_append_creates_absent_list() -> None:
    updated = apply_patch(base_tree(), add("/elements/title/children/-", "x"))
    title = updated.get("title")
    assert title is not None
    assert title.children == ("x",)


def test_list_index_is_overwritten_not_shifted() -> None:
    updated = apply_patch(base_tree(), add("/elements/root/children/0", "intro"))
    root = updated.get("root")
    assert root is not None
    assert root.children == ("intro", "body")


def test_out_of_range_index_is_a_no_op() -> None:
    tree = base_tree()
    assert apply_patch(tree, add(element_path("root", "children", "7"), "x")) is tree
    assert apply_patch(tree, add(element_path("root", "children", "01"), "x")) is tree


def test_replace_whole_props_object() -> None:
    updated = apply_patch(base_tree(), replace("/elements/root/props", {"gap": "sm"}))
    root = updated.get("root")
    assert root is not None
    assert dict(root.props) == {"gap": "sm"}


def test_identical_element_returns_same_tree() -> None:
    tree = base_tree()
    body = tree.get("body")
    assert body is not None
    assert apply_patch(tree, add("/elements/body", body.to_dict())) is tree


def test_unsupported_path_is_a_no_op() -> None:
    tree = base_tree()
    assert apply_patch(tree, add("/meta/x", 1)) is tree
