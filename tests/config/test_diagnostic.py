# doxlate:header:start
#
#   project      : Doxlate
#   file         : test_diagnostic.py
#   file_relpath : tests/config/test_diagnostic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Tests for the diagnostic log."""

from __future__ import annotations

from doxlate.diagnostic import DiagnosticLevel, DiagnosticLog, WarningKind


def test_log_collects_in_order() -> None:
    """Warnings are kept in insertion order with their codes."""
    log = DiagnosticLog()
    log.add_warning("unknown command \\foo", WarningKind.UNKNOWN_COMMAND)
    log.add_warning("bad html")

    assert [d.message for d in log] == ["unknown command \\foo", "bad html"]
    assert [d.kind for d in log] == [WarningKind.UNKNOWN_COMMAND, None]
    assert all(d.level is DiagnosticLevel.WARNING for d in log)
    assert len(log) == 2


def test_summary_counts_per_level() -> None:
    """The summary pluralizes and is empty for an empty log."""
    log = DiagnosticLog()
    assert log.summary() == ""
    log.add_warning("one")
    assert log.summary() == "1 warning"
    log.add_warning("two")
    assert log.summary() == "2 warnings"


def test_diagnostic_text_includes_warning_code() -> None:
    """Parser warnings show their numeric code when they have one."""
    log = DiagnosticLog()
    log.add_warning("unexpected end", WarningKind.UNEXPECTED_END_OF_COMMENT)
    log.add_warning("plain")
    first, second = list(log)
    assert str(first) == "[warning 561] unexpected end"
    assert str(second) == "[warning] plain"


def test_level_colour_wraps_text() -> None:
    """Each level has a colour function that keeps the text."""
    for level in DiagnosticLevel:
        assert "msg" in level.color("msg")
