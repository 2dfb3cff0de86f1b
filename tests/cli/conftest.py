# topmark:header:start
#
#   project      : UIStream
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running UIStream in a controlled working directory.

`run_cli_in()` changes the process working directory to the given
``tmp_path`` before invoking the Click CLI, so that relative input paths and
configuration discovery are anchored in the temporary test directory.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from tests.conftest import el, stream_for, tree_of
from uistream.cli.exit_codes import ExitCode
from uistream.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["grade", "a.jsonl"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g. ``--help``, ``version`` or STDIN input with
    ``--no-config``).

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1): a rule failed."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def passing_stream() -> str:
    """Return a patch stream whose tree passes every structural rule."""
    return stream_for(
        tree_of(
            "main",
            el("main", "Surface", ["stack"]),
            el("stack", "Stack", ["title", "name", "send"], gap="lg"),
            el("title", "Text", children="Contact", variant="heading1"),
            el("name", "Input", label="Name"),
            el("send", "Button", children="Send", variant="primary"),
        )
    )


def failing_stream() -> str:
    """Return a patch stream with an orphan element and an unlabelled Input."""
    return stream_for(
        tree_of(
            "main",
            el("main", "Surface", ["stack"]),
            el("stack", "Stack", ["name"]),
            el("name", "Input"),
            el("lost", "Text", children="?"),
        )
    )
