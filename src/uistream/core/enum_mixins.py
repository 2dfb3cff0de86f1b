# topmark:header:start
#
#   project      : UIStream
#   file         : enum_mixins.py
#   file_relpath : src/uistream/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities (typing-friendly, UI-agnostic).

Provided:
    - ``EnumIntrospectionMixin``: adds a cached ``value_length`` used to align
      rule names and pass names in CLI output.
    - ``KeyedStrEnum``: string enum with a stable machine key, a human label and
      parse aliases. Normalization pass names and grade rule names use it so
      configuration files and ``--skip-pass`` options accept loose spellings.
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


class EnumIntrospectionMixin:
    """Mixin adding introspection conveniences to Enums."""

    @cached_property
    def value_length(self) -> int:
        """Maximum length of the enum's ``.value`` strings."""
        # Pyright doesn't know 'self' is an Enum member; runtime guarantees it.
        return max(len(member.value) for member in type(self))  # type: ignore[attr-defined]


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string for key and alias matching."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label.
            aliases (Iterable[str]): Optional aliases for parsing.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return self._value_

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches the key, the member name and any alias, case-insensitively,
        treating '-', ' ' and '_' as equivalent.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        for m in cls:
            if token in (_norm_token(m.value), _norm_token(m.name)):
                return m
            if any(token == _norm_token(a) for a in m.aliases):
                return m
        return None
