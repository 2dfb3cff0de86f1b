# topmark:header:start
#
#   project      : UIStream
#   file         : errors.py
#   file_relpath : src/uistream/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised for host-side misconfiguration.

Malformed *stream input* never raises; it is dropped, repaired or reported.
These exceptions cover problems the host can fix: unreadable configuration
files, invalid limits, and schema catalogs that do not describe a registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class UIStreamError(Exception):
    """Base class for all UIStream errors."""


class ConfigError(UIStreamError):
    """Invalid or unreadable configuration.

    Attributes:
        path (Path | None): The offending file, when known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class CatalogError(ConfigError):
    """A schema catalog that cannot be turned into a registry."""
