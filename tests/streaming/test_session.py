# topmark:header:start
#
#   project      : UIStream
#   file         : test_session.py
#   file_relpath : tests/streaming/test_session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for streaming sessions."""

from __future__ import annotations

from tests.conftest import add_line, el, stream_for, tree_of
from uistream.streaming.session import StreamSession, parse_jsonl_to_tree
from uistream.tree.model import EMPTY_TREE, is_renderable_tree

DOCUMENT = (
    add_line("/root", "main")
    + add_line("/elements/main", {"type": "Surface", "children": ["stack"]})
    + add_line("/elements/stack", {"type": "Stack", "props": {"gap": "lg"}, "children": []})
    + add_line("/elements/stack/children/-", "title")
    + add_line("/elements/title", {"type": "Text", "props": {"children": "Hi"}})
)


def test_feed_updates_the_snapshot_incrementally() -> None:
    session = StreamSession()
    assert session.tree is EMPTY_TREE

    session.feed(add_line("/root", "main"))
    assert session.tree.root == "main"
    assert not is_renderable_tree(session.tree)

    session.feed(add_line("/elements/main", {"type": "Surface"}))
    assert is_renderable_tree(session.tree)
    assert session.ops_applied == 2


def test_snapshots_are_never_mutated_by_later_ops() -> None:
    session = StreamSession()
    session.feed(add_line("/root", "main") + add_line("/elements/main", {"type": "Surface"}))
    snapshot = session.tree
    session.feed(add_line("/elements/main/props/className", "p-4"))
    main = snapshot.get("main")
    assert main is not None
    assert "className" not in main.props
    assert session.tree is not snapshot


def test_finish_recovers_trailing_record() -> None:
    session = StreamSession()
    session.feed('{"op":"add","path":"/root","value":"main"}')
    assert session.tree.root == ""
    tree = session.finish()
    assert tree.root == "main"
    assert session.finalized


def test_run_matches_expected_tree() -> None:
    tree = StreamSession().run([DOCUMENT])
    stack = tree.get("stack")
    assert stack is not None
    assert stack.children == ("title",)
    assert tree.root == "main"
    assert len(tree) == 3


def test_cancel_then_finish_keeps_partial_tree() -> None:
    session = StreamSession()
    half = len(DOCUMENT) // 2
    session.feed(DOCUMENT[:half])
    tree = session.finish()
    assert tree.root == "main"
    assert len(tree) < 3


def test_reset_discards_state() -> None:
    session = StreamSession()
    session.run([DOCUMENT, "garbage\n"])
    assert session.decoder.records_dropped == 1
    session.reset()
    assert session.tree is EMPTY_TREE
    assert session.ops_applied == 0
    assert session.decoder.records_dropped == 0
    assert not session.finalized


def test_sessions_are_independent() -> None:
    first, second = StreamSession(), StreamSession()
    first.feed('{"op":"add","path":"/root",')
    second.feed(add_line("/root", "other"))
    first.feed('"value":"mine"}\n')
    assert first.tree.root == "mine"
    assert second.tree.root == "other"


def test_parse_jsonl_to_tree_rebuilds_a_tree() -> None:
    tree = tree_of(
        "root",
        el("root", "Stack", ["a"]),
        el("a", "Text", parent="root", children="x"),
    )
    assert parse_jsonl_to_tree(stream_for(tree)) == tree


def test_byte_chunks_are_accepted() -> None:
    data = DOCUMENT.encode("utf-8")
    chunks = [data[i : i + 7] for i in range(0, len(data), 7)]
    assert StreamSession().run(chunks) == parse_jsonl_to_tree(DOCUMENT)
