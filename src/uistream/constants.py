# topmark:header:start
#
#   project      : UIStream
#   file         : constants.py
#   file_relpath : src/uistream/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UIStream Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

UISTREAM_VERSION: str = get_version("uistream")

# Packaged resources
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "uistream.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "uistream-default.toml"
DEFAULT_CATALOG_PACKAGE: Final[str] = "uistream.catalog"
DEFAULT_CATALOG_NAME: Final[str] = "default-catalog.toml"

# Project-level configuration files, in increasing precedence
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
UISTREAM_TOML_NAME: Final[str] = "uistream.toml"

# Tree limits
MAX_DEPTH: Final[int] = 8
TRAVERSAL_LIMIT: Final[int] = 50
SIMPLE_LAYOUT_MAX_ELEMENTS: Final[int] = 12

# Patch path grammar
ROOT_PATH: Final[str] = "/root"
ELEMENTS_SEGMENT: Final[str] = "elements"
APPEND_SEGMENT: Final[str] = "-"

# Wire name of the parent back-reference on an element record
PARENT_KEY_FIELD: Final[str] = "parentKey"

# Prefix of the Stack synthesized around orphaned Surface children
AUTO_STACK_PREFIX: Final[str] = "auto-stack-"

# Issue path reported for failures on the props object itself
ROOT_ISSUE_PATH: Final[str] = "(root)"
