# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers shared by the CLI and the report types."""

from __future__ import annotations

from uistream.rendering.colored_enum import Colorizer, ColoredStrEnum

__all__ = [
    "ColoredStrEnum",
    "Colorizer",
]
