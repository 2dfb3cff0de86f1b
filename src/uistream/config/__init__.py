# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration, logging setup and configuration errors.

Build a `MutableConfig` (from defaults, files or code), then `freeze()` it
into the immutable `Config` passed to the engine. Do not mutate a `Config`;
`thaw()` it, edit, and freeze again.
"""

from __future__ import annotations

from uistream.config.errors import CatalogError, ConfigError, UIStreamError
from uistream.config.model import Config, MutableConfig

__all__ = [
    "CatalogError",
    "Config",
    "ConfigError",
    "MutableConfig",
    "UIStreamError",
]
