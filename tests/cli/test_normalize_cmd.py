# topmark:header:start
#
#   project      : UIStream
#   file         : test_normalize_cmd.py
#   file_relpath : tests/cli/test_normalize_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `uistream normalize`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import el, stream_for, tree_of
from uistream.cli.exit_codes import ExitCode
from uistream.normalize.names import PassName

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli

STREAM = stream_for(
    tree_of(
        "card",
        el("card", "Surface", ["cap", "email"]),
        el("cap", "Text", children="Email"),
        el("email", "Input", label="Email"),
    )
)


def test_list_passes_in_pipeline_order() -> None:
    result = run_cli(["normalize", "--list-passes"])

    assert_SUCCESS(result)
    keys = [line.split()[0] for line in result.output.splitlines()]
    assert keys == [name.key for name in PassName]


def test_normalized_tree_is_printed_as_json(isolation: Path) -> None:
    result = run_cli(["normalize"], input_text=STREAM)

    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    assert data["root"] == "card"
    assert "cap" not in data["elements"]
    assert data["elements"]["card"]["children"] == ["auto-stack-card"]
    assert data["elements"]["auto-stack-card"]["children"] == ["email"]


def test_skip_pass_accepts_aliases(isolation: Path) -> None:
    result = run_cli(
        ["normalize", "--skip-pass", "surface-orphans", "--skip-pass", "duplicate_field_labels"],
        input_text=STREAM,
    )

    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    assert data["elements"]["card"]["children"] == ["cap", "email"]


def test_passes_disabled_in_config_are_skipped(isolation: Path) -> None:
    (isolation / "uistream.toml").write_text(
        "root = true\n[normalize]\ndisabled_passes = ['surface-orphans']\n", encoding="utf-8"
    )

    result = run_cli(["normalize", "-"], input_text=STREAM)

    assert_SUCCESS(result)
    assert json.loads(result.stdout)["elements"]["card"]["children"] == ["email"]


def test_unknown_pass_name_is_rejected(isolation: Path) -> None:
    result = run_cli(["normalize", "--skip-pass", "nope"], input_text=STREAM)

    assert result.exit_code == 2


def test_file_argument(isolation: Path) -> None:
    (isolation / "in.jsonl").write_text(STREAM, encoding="utf-8")

    assert_SUCCESS(run_cli(["normalize", "in.jsonl"]))
    assert run_cli(["normalize", "missing.jsonl"]).exit_code == ExitCode.FILE_NOT_FOUND
