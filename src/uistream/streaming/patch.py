# topmark:header:start
#
#   project      : UIStream
#   file         : patch.py
#   file_relpath : src/uistream/streaming/patch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Patch operations and their path grammar.

A patch line is one JSON object ``{"op": ..., "path": ..., "value"?: ...}``
using the RFC 6902 vocabulary restricted to three op kinds and map-like paths:

    /root                               set or clear the root key
    /elements/<key>                     insert, overwrite or delete a whole element
    /elements/<key>/<field>[/...]       set or unset a field of an element record

Path segments use RFC 6901 escaping (``~1`` for ``/``, ``~0`` for ``~``).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

from uistream.constants import ELEMENTS_SEGMENT, ROOT_PATH


class PatchOpKind(str, Enum):
    """Supported patch operation kinds."""

    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"


class _Missing:
    """Sentinel type for an absent ``value`` (distinct from JSON ``null``)."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class PatchOp:
    """One decoded patch operation.

    Attributes:
        op (PatchOpKind): The operation kind.
        path (str): The raw JSON pointer path.
        value (Any): The payload; `MISSING` for ``remove``.
    """

    op: PatchOpKind
    path: str
    value: Any = MISSING

    @property
    def has_value(self) -> bool:
        """Return True when the op carries a value (``null`` included)."""
        return self.value is not MISSING

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible wire representation."""
        out: dict[str, Any] = {"op": self.op.value, "path": self.path}
        if self.has_value:
            out["value"] = self.value
        return out

    def to_line(self) -> str:
        """Return the op serialized as one JSONL line (without newline)."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class PatchTarget:
    """A parsed patch path.

    Attributes:
        element_key (str | None): Target element key, None for ``/root``.
        field_path (tuple[str, ...]): Field segments below the element (may be empty).
    """

    element_key: str | None
    field_path: tuple[str, ...] = ()

    @property
    def is_root(self) -> bool:
        """Return True for the ``/root`` target."""
        return self.element_key is None


ROOT_TARGET = PatchTarget(element_key=None)


def unescape_segment(segment: str) -> str:
    """Decode one RFC 6901 path segment (``~1`` then ``~0``)."""
    return segment.replace("~1", "/").replace("~0", "~")


def escape_segment(segment: str) -> str:
    """Encode one path segment per RFC 6901."""
    return segment.replace("~", "~0").replace("/", "~1")


def parse_path(path: str) -> PatchTarget | None:
    """Parse ``path`` against the supported grammar.

    Args:
        path (str): A JSON pointer such as ``/elements/card/props/title``.

    Returns:
        PatchTarget | None: The parsed target, or None when the path is outside
            the grammar (unknown top-level segment, empty element key, ...).
    """
    if path == ROOT_PATH:
        return ROOT_TARGET
    if not path.startswith("/"):
        return None
    segments = [unescape_segment(s) for s in path[1:].split("/")]
    if len(segments) < 2 or segments[0] != ELEMENTS_SEGMENT or not segments[1]:
        return None
    return PatchTarget(element_key=segments[1], field_path=tuple(segments[2:]))


def element_path(key: str, *fields: str) -> str:
    """Build an ``/elements/<key>[/field...]`` path with proper escaping."""
    parts = [ELEMENTS_SEGMENT, key, *fields]
    return "/" + "/".join(escape_segment(p) for p in parts)


def parse_patch_line(line: str) -> PatchOp | None:
    """Parse one JSONL record into a `PatchOp`.

    A record is accepted when it is a JSON object with a known string ``op``, a
    string ``path`` inside the supported grammar, and (for ``add``/``replace``)
    a ``value`` key. Anything else yields None.

    Args:
        line (str): One line of input, without its terminator.

    Returns:
        PatchOp | None: The operation, or None when the record is malformed.
    """
    try:
        data: Any = json.loads(line)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    record = cast("dict[str, Any]", data)

    raw_op = record.get("op")
    path = record.get("path")
    if not isinstance(raw_op, str) or not isinstance(path, str):
        return None
    try:
        kind = PatchOpKind(raw_op)
    except ValueError:
        return None
    if parse_path(path) is None:
        return None

    if kind is PatchOpKind.REMOVE:
        return PatchOp(op=kind, path=path)
    if "value" not in record:
        return None
    return PatchOp(op=kind, path=path, value=record["value"])
