# topmark:header:start
#
#   project      : UIStream
#   file         : keys.py
#   file_relpath : src/uistream/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names.

Keys defined here are the external configuration API as it appears in
``uistream.toml``, in ``[tool.uistream]`` inside ``pyproject.toml``, and in
schema catalog files. Renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Section names and keys of the configuration files.

    The ordering mirrors ``uistream-default.toml``.
    """

    KEY_ROOT: Final[str] = "root"

    # [limits]
    SECTION_LIMITS: Final[str] = "limits"
    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_TRAVERSAL_LIMIT: Final[str] = "traversal_limit"
    KEY_SIMPLE_LAYOUT_MAX_ELEMENTS: Final[str] = "simple_layout_max_elements"

    # [catalog]
    SECTION_CATALOG: Final[str] = "catalog"
    KEY_CATALOG_PATH: Final[str] = "path"
    KEY_CUSTOM_TYPES: Final[str] = "custom_types"

    # [normalize]
    SECTION_NORMALIZE: Final[str] = "normalize"
    KEY_DISABLED_PASSES: Final[str] = "disabled_passes"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_UISTREAM: Final[str] = "uistream"


class CatalogToml:
    """Section names and keys of schema catalog files."""

    SECTION_COMPONENTS: Final[str] = "components"
    SECTION_ALIASES: Final[str] = "aliases"
    SECTION_SUB_COMPONENTS: Final[str] = "sub_components"
    SECTION_COERCIONS: Final[str] = "coercions"
    SECTION_SYNTHETIC: Final[str] = "synthetic"

    KEY_REQUIRED: Final[str] = "required"
    KEY_PROPS: Final[str] = "props"
    KEY_PARTS: Final[str] = "parts"

    KEY_KIND: Final[str] = "kind"
    KEY_VALUES: Final[str] = "values"
    KEY_ITEMS: Final[str] = "items"
    KEY_FIELDS: Final[str] = "fields"

    KEY_PARENT: Final[str] = "parent"
    KEY_PART: Final[str] = "part"
    KEY_TYPES: Final[str] = "types"
