# doxlate:header:start
#
#   project      : Doxlate
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""CLI test helpers for running Doxlate in a controlled working directory.

`run_cli_in()` changes the process working directory to ``tmp_path`` before
invoking the Click CLI, so that relative document paths resolve there and no
``doxlate.toml`` or ``pyproject.toml`` from the repository is discovered.
"""

from __future__ import annotations

import json
import logging
import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from doxlate.cli.exit_codes import ExitCode
from doxlate.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Restore the root logger after a command reconfigured it.

    The group callback installs a handler bound to the runner's captured
    stderr, which is closed once the invocation returns.
    """
    root: logging.Logger = logging.getLogger()
    handlers: list[logging.Handler] = root.handlers[:]
    level: int = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["render", "add.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def write_document(tmp_path: Path, name: str, payload: Any) -> Path:
    """Write ``payload`` as a JSON document named ``name`` under ``tmp_path``."""
    path: Path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
