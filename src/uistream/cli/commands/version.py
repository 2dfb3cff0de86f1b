# topmark:header:start
#
#   project      : UIStream
#   file         : version.py
#   file_relpath : src/uistream/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UIStream `version` command.

Prints the current UIStream version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from uistream.cli.cli_types import EnumChoiceParam, OutputFormat
from uistream.cli.cmd_common import get_console
from uistream.constants import UISTREAM_VERSION


@click.command(
    name="version",
    help="Show the current version of UIStream.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of UIStream.

    Args:
        output_format (OutputFormat | None): Plain text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": UISTREAM_VERSION}))
    else:
        console.print(UISTREAM_VERSION)
