# topmark:header:start
#
#   project      : UIStream
#   file         : normalize.py
#   file_relpath : src/uistream/cli/commands/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UIStream `normalize` command.

Folds a JSONL patch stream into a tree, runs the normalization passes and
prints the resulting tree as JSON.

Examples:
  Normalize a recorded stream:

    $ uistream normalize session.jsonl

  Skip a pass (names, member names and aliases are accepted):

    $ uistream normalize --skip-pass surface-orphans - < session.jsonl
"""

from __future__ import annotations

import json

import click

from uistream.cli.cli_types import KeyedEnumParam
from uistream.cli.cmd_common import STDIN_SENTINEL, build_engine, get_console, load_stream
from uistream.normalize.names import PassName
from uistream.normalize.pipeline import normalize_tree


@click.command(
    name="normalize",
    help="Normalize a JSONL patch stream and print the resulting tree as JSON.",
)
@click.argument("file", required=False, default=STDIN_SENTINEL, type=str)
@click.option(
    "--skip-pass",
    "skip_passes",
    multiple=True,
    type=KeyedEnumParam(PassName),
    help="Skip a normalization pass (repeatable).",
)
@click.option(
    "--list-passes",
    is_flag=True,
    default=False,
    help="List the normalization passes in pipeline order and exit.",
)
def normalize_command(
    *,
    file: str,
    skip_passes: tuple[PassName, ...],
    list_passes: bool,
) -> None:
    """Normalize one input stream.

    Args:
        file (str): Input path, ``-`` for STDIN.
        skip_passes (tuple[PassName, ...]): Passes to skip in addition to the
            ones disabled by configuration.
        list_passes (bool): Print the pass names and exit.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)

    if list_passes:
        width = next(iter(PassName)).value_length
        for name in PassName:
            console.print(f"{name.key:<{width}}  {name.label}")
        return

    engine = build_engine(ctx)
    loaded = load_stream(ctx, engine, file)
    tree = normalize_tree(loaded.tree, engine.passes, disabled=skip_passes)
    console.print(json.dumps(tree.to_dict(), indent=2))
