# topmark:header:start
#
#   project      : UIStream
#   file         : loaders.py
#   file_relpath : src/uistream/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration and catalog sources.

This module reads:
- the packaged default configuration (``uistream-default.toml``),
- the packaged default schema catalog (``default-catalog.toml``),
- on-disk TOML files (``uistream.toml``, ``pyproject.toml``, catalog files).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from uistream.config.errors import ConfigError
from uistream.config.keys import Toml
from uistream.config.logging import get_logger
from uistream.constants import (
    DEFAULT_CATALOG_NAME,
    DEFAULT_CATALOG_PACKAGE,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path

    from uistream.config.logging import UIStreamLogger
    from uistream.config.io.types import TomlTable

logger: UIStreamLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: Path | None = None) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): The TOML document.
        source (Path | None): Origin used in error messages.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path=source) from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem (UTF-8).

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read file: {exc.strerror or exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"not valid UTF-8: {exc.reason}", path=path) from exc
    logger.debug("Loaded TOML from %s", path)
    return parse_toml_text(text, source=path)


def _read_packaged_text(package: str, name: str) -> str:
    return files(package).joinpath(name).read_text(encoding="utf-8")


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a fresh dict."""
    return parse_toml_text(load_default_config_text())


def load_default_config_text() -> str:
    """Return the annotated packaged default configuration as text."""
    return _read_packaged_text(DEFAULT_TOML_CONFIG_PACKAGE, DEFAULT_TOML_CONFIG_NAME)


def load_default_catalog_dict() -> TomlTable:
    """Return the packaged default schema catalog as a fresh dict."""
    text = _read_packaged_text(DEFAULT_CATALOG_PACKAGE, DEFAULT_CATALOG_NAME)
    return parse_toml_text(text)


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.uistream]`` table of a pyproject document, if any."""
    tool = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    section = cast("dict[str, Any]", tool).get(Toml.SECTION_TOOL_UISTREAM)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def load_config_file(path: Path) -> TomlTable | None:
    """Load the UIStream configuration table from a config file.

    For ``pyproject.toml`` the ``[tool.uistream]`` table is returned, or None
    when the file does not have one.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        return extract_tool_section(data)
    return data
