# doxlate:header:start
#
#   project      : Doxlate
#   file         : errors.py
#   file_relpath : src/doxlate/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Click exceptions of the Doxlate CLI.

Each class carries the `ExitCode` Click exits with when it is raised from a
command. Library errors (`doxlate.errors`) are translated into these at the
command boundary.
"""

from __future__ import annotations

from typing import IO, Any

import click

from doxlate.cli.exit_codes import ExitCode


class DoxlateCliError(click.ClickException):
    """Base class for all Doxlate CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message in bright red on stderr."""
        click.secho(f"Error: {self.format_message()}", file=file, err=True, fg="bright_red")


class DoxlateUsageError(DoxlateCliError):
    """Invalid command-line invocation."""

    exit_code = ExitCode.USAGE_ERROR


class DoxlateDataError(DoxlateCliError):
    """Malformed declaration document."""

    exit_code = ExitCode.DATA_ERROR


class DoxlateFileNotFoundError(DoxlateCliError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DoxlateConfigError(DoxlateCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR
