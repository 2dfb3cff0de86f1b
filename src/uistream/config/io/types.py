# topmark:header:start
#
#   project      : UIStream
#   file         : types.py
#   file_relpath : src/uistream/config/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared TOML-related type aliases for configuration and catalog loading."""

from __future__ import annotations

from typing import Any

TomlTable = dict[str, Any]
TomlTableMap = dict[str, TomlTable]
