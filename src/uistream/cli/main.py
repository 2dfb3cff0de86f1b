# topmark:header:start
#
#   project      : UIStream
#   file         : main.py
#   file_relpath : src/uistream/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UIStream command line entry point.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands build their `Engine` from the merged configuration through the
  helpers in `uistream.cli.cmd_common`.
"""

from __future__ import annotations

import click

from uistream.cli.commands.grade import grade_command
from uistream.cli.commands.normalize import normalize_command
from uistream.cli.commands.version import version_command
from uistream.cli.console import ClickConsole
from uistream.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from uistream.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
) -> None:
    """Initialize shared state (verbosity, color, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Extra config files from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured through the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_paths"] = config_paths
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="UIStream CLI",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the UIStream CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'uistream grade [FILES...]' to grade patch streams.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(grade_command)

cli.add_command(normalize_command)

if __name__ == "__main__":
    cli()
