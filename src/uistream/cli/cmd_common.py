# topmark:header:start
#
#   project      : UIStream
#   file         : cmd_common.py
#   file_relpath : src/uistream/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the CLI commands.

Commands stay thin: they read inputs, build an `Engine` from the merged
configuration, and render results. Exceptions raised by the core for
misconfiguration and by the filesystem are translated here into CLI errors
carrying an `ExitCode`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

import click

from uistream.cli.errors import (
    UIStreamConfigError,
    UIStreamEncodingError,
    UIStreamFileNotFoundError,
    UIStreamIOError,
)
from uistream.cli.options import is_quiet, is_verbose
from uistream.config.errors import ConfigError
from uistream.config.logging import get_logger
from uistream.config.model import MutableConfig
from uistream.engine import Engine

if TYPE_CHECKING:
    from uistream.cli.console import ClickConsole
    from uistream.config.logging import UIStreamLogger
    from uistream.config.model import Config
    from uistream.diagnostic.model import DiagnosticLog
    from uistream.tree.model import UITree

logger: UIStreamLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console installed by the group callback."""
    return cast("ClickConsole", ctx.obj["console"])


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved from ``-v``/``-q``."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def build_config(ctx: click.Context) -> Config:
    """Merge defaults, discovered project files and ``--config`` files, then freeze.

    Configuration warnings are echoed to stderr unless ``-q`` was given.

    Raises:
        UIStreamConfigError: If a configuration file is invalid.
    """
    try:
        draft = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in ctx.obj.get("config_paths", ())],
            no_config=bool(ctx.obj.get("no_config", False)),
        )
        config = draft.freeze()
    except ConfigError as exc:
        raise UIStreamConfigError(str(exc)) from exc

    if not is_quiet(get_effective_verbosity(ctx)):
        console = get_console(ctx)
        for diagnostic in config.diagnostics:
            console.warn(diagnostic.render())
    return config


def build_engine(ctx: click.Context) -> Engine:
    """Build the engine for this invocation from the merged configuration.

    Raises:
        UIStreamConfigError: If the configuration or the schema catalog is invalid.
    """
    config = build_config(ctx)
    try:
        return Engine.from_config(config)
    except ConfigError as exc:
        raise UIStreamConfigError(str(exc)) from exc


def read_input_text(source: str) -> str:
    """Read a UTF-8 document from a path or from STDIN (``-``).

    Raises:
        UIStreamFileNotFoundError: If the path does not exist or is a directory.
        UIStreamIOError: If the path cannot be read.
        UIStreamEncodingError: If the content is not valid UTF-8.
    """
    try:
        if source == STDIN_SENTINEL:
            data = click.get_binary_stream("stdin").read()
        else:
            data = Path(source).read_bytes()
    except (FileNotFoundError, IsADirectoryError) as exc:
        logger.error("Cannot open %s: %s", source, exc)
        raise UIStreamFileNotFoundError(f"File not found: {source}") from exc
    except OSError as exc:
        logger.error("Cannot read %s: %s", source, exc)
        raise UIStreamIOError(f"Cannot read {source}: {exc}") from exc

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UIStreamEncodingError(f"Encoding error in {source}: {exc}") from exc


@dataclass(frozen=True)
class LoadedStream:
    """A patch stream folded into a tree.

    Attributes:
        source (str): Input path, or ``-`` for STDIN.
        tree (UITree): The final tree.
        ops_applied (int): Operations decoded and applied.
        records_dropped (int): Malformed records skipped by the decoder.
    """

    source: str
    tree: UITree
    ops_applied: int
    records_dropped: int


def load_stream(ctx: click.Context, engine: Engine, source: str) -> LoadedStream:
    """Read ``source`` and fold it into a tree through a fresh session.

    Dropped records are reported at ``-v`` and above.
    """
    session = engine.session()
    tree = session.run([read_input_text(source)])
    loaded = LoadedStream(
        source=source,
        tree=tree,
        ops_applied=session.ops_applied,
        records_dropped=session.decoder.records_dropped,
    )
    if is_verbose(get_effective_verbosity(ctx)):
        report_diagnostics(get_console(ctx), source, session.decoder.diagnostics)
    return loaded


def report_diagnostics(console: ClickConsole, source: str, log: DiagnosticLog) -> None:
    """Echo decoder diagnostics for ``source`` to stderr."""
    for diagnostic in log:
        console.warn(f"{source}: {diagnostic.render()}")
