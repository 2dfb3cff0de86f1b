# topmark:header:start
#
#   project      : UIStream
#   file         : model.py
#   file_relpath : src/uistream/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic records collected while decoding streams and loading configuration.

Diagnostics never influence control flow. The patch decoder records one entry
per dropped record, and the configuration loaders record unknown keys or
suspicious values. Hosts may inspect them, and the CLI prints them when
running verbosely.

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable payload (level + message).
    * DiagnosticLog: mutable collection owned by a single decoder or loader.
    * FrozenDiagnosticLog: immutable snapshot stored on frozen objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from uistream.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from uistream.config.logging import UIStreamLogger


logger: UIStreamLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels."""

    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self) -> str:
        """Return a one-line human representation, e.g. ``[warning] msg``."""
        return f"[{self.level.value}] {self.message}"


@dataclass
class DiagnosticLog:
    """Mutable, per-owner collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self.items.append(Diagnostic(DiagnosticLevel.WARNING, message))
        logger.trace("Adding [warning]: %r", message)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics collected elsewhere, keeping their order."""
        self.items.extend(diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`, stored on frozen `Config` objects."""

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
