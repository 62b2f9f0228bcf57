# doxlate:header:start
#
#   project      : Doxlate
#   file         : version.py
#   file_relpath : src/doxlate/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Doxlate `version` command.

Prints the Doxlate version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from doxlate.constants import DOXLATE_VERSION


@click.command(
    name="version",
    help="Show the current version of Doxlate.",
)
def version_command() -> None:
    """Show the current version of Doxlate."""
    click.echo(DOXLATE_VERSION)
