# doxlate:header:start
#
#   project      : Doxlate
#   file         : test_tags_command.py
#   file_relpath : tests/cli/test_tags_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""CLI tests: `tags` registry listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _rows(result: Result) -> list[list[str]]:
    return [line.split() for line in result.output.splitlines()]


@mark_cli
def test_tags_lists_builtin_registry(tmp_path: Path) -> None:
    """One row per command with its handler kind and argument."""
    result: Result = run_cli_in(tmp_path, ["tags"])
    assert_SUCCESS(result)
    rows: list[list[str]] = _rows(result)
    assert ["b", "HTML_WRAP", "b"] in rows
    assert ["param", "PARAM"] in rows
    assert ["sa", "CREF", "seealso"] in rows
    assert all(row[0] != "code" for row in rows)


@mark_cli
def test_tags_rows_are_sorted(tmp_path: Path) -> None:
    """Rows are sorted by command name."""
    names: list[str] = [row[0] for row in _rows(run_cli_in(tmp_path, ["tags"]))]
    assert names == sorted(names)


@mark_cli
def test_tags_with_config_overlay(tmp_path: Path) -> None:
    """Configured entries show up in the listing; disabled ones disappear."""
    (tmp_path / "extra.toml").write_text(
        '[tags]\ncode = { handler = "extended", arg = "code" }\ntodo = false\n',
        encoding="utf-8",
    )
    result: Result = run_cli_in(tmp_path, ["tags", "--config", "extra.toml"])
    assert_SUCCESS(result)
    rows: list[list[str]] = _rows(result)
    assert ["code", "EXTENDED", "code"] in rows
    assert all(row[0] != "todo" for row in rows)
