# topmark:header:start
#
#   project      : UIStream
#   file         : test_diagnostic_log.py
#   file_relpath : tests/diagnostic/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for diagnostic collection."""

from __future__ import annotations

from uistream.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog


def test_warnings_are_collected_in_order() -> None:
    log = DiagnosticLog()
    log.add_warning("unknown key")
    log.add_warning("unknown section")

    assert len(log) == 2
    assert [d.message for d in log] == ["unknown key", "unknown section"]
    assert all(d.level is DiagnosticLevel.WARNING for d in log)


def test_frozen_log_is_a_snapshot() -> None:
    log = DiagnosticLog()
    log.add_warning("first")
    frozen = log.freeze()
    log.add_warning("second")

    assert [d.message for d in frozen] == ["first"]
    assert len(frozen) == 1


def test_extend_keeps_order() -> None:
    log = DiagnosticLog()
    log.add_warning("a")
    other = DiagnosticLog()
    other.add_warning("b")
    other.add_warning("c")

    log.extend(other.freeze())

    assert [d.message for d in log] == ["a", "b", "c"]


def test_render() -> None:
    diagnostic = Diagnostic(DiagnosticLevel.WARNING, "unknown key")
    assert diagnostic.render() == "[warning] unknown key"
