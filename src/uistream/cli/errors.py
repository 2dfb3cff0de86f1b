# topmark:header:start
#
#   project      : UIStream
#   file         : errors.py
#   file_relpath : src/uistream/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the UIStream CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from uistream.cli.exit_codes import ExitCode


class UIStreamCliError(click.ClickException):
    """Base class for all UIStream CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class UIStreamUsageError(UIStreamCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class UIStreamConfigError(UIStreamCliError):
    """Error for configuration errors (invalid config file or schema catalog)."""

    exit_code = ExitCode.CONFIG_ERROR


class UIStreamFileNotFoundError(UIStreamCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class UIStreamIOError(UIStreamCliError):
    """Error for I/O errors reading an input."""

    exit_code = ExitCode.IO_ERROR


class UIStreamEncodingError(UIStreamCliError):
    """Error for inputs that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
