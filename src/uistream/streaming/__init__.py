# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/streaming/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Streaming patch decoding and application."""

from __future__ import annotations

from uistream.streaming.applier import apply_patch, apply_patches
from uistream.streaming.decoder import PatchDecoder
from uistream.streaming.patch import (
    MISSING,
    PatchOp,
    PatchOpKind,
    PatchTarget,
    element_path,
    parse_patch_line,
    parse_path,
)
from uistream.streaming.session import StreamSession, parse_jsonl_to_tree

__all__ = [
    "MISSING",
    "PatchDecoder",
    "PatchOp",
    "PatchOpKind",
    "PatchTarget",
    "StreamSession",
    "apply_patch",
    "apply_patches",
    "element_path",
    "parse_jsonl_to_tree",
    "parse_patch_line",
    "parse_path",
]
