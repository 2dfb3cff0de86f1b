# topmark:header:start
#
#   project      : UIStream
#   file         : cli_types.py
#   file_relpath : src/uistream/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types for UIStream.

`EnumChoiceParam` converts an option value to an Enum member (case-insensitive)
and `KeyedEnumParam` accepts any spelling understood by `KeyedStrEnum.parse`
(keys, member names and aliases).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from uistream.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)
K = TypeVar("K", bound=KeyedStrEnum)


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      TEXT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
    """

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", e.value) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return cast("E | None", value)
        lookup: dict[str, E] = {
            cast("str", choice.value).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )


class KeyedEnumParam(ParamTypeBase, Generic[K]):
    """A Click parameter type resolving keys, names and aliases of a `KeyedStrEnum`."""

    enum_cls: type[K]
    name: str

    def __init__(self, enum_cls: type[K]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> K | None:
        """Convert a token to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return cast("K | None", value)
        member = self.enum_cls.parse(str(value))
        if member is None:
            keys = ", ".join(m.key for m in self.enum_cls)
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {keys}", param=param, ctx=ctx
            )
        return member
