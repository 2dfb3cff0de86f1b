# topmark:header:start
#
#   project      : UIStream
#   file         : __init__.py
#   file_relpath : src/uistream/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives.

Design:
    - Diagnostics are immutable `Diagnostic` instances.
    - Decoders and loaders accumulate them in a mutable `DiagnosticLog`.
    - Frozen snapshots (e.g. `Config`) store a `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from uistream.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "FrozenDiagnosticLog",
]
