# doxlate:header:start
#
#   project      : Doxlate
#   file         : tags.py
#   file_relpath : src/doxlate/cli/commands/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Doxlate `tags` command: list the effective tag handler table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from doxlate.cli.config_resolver import resolve_config_from_click
from doxlate.cli.options import config_option

if TYPE_CHECKING:
    from collections.abc import Mapping

    from doxlate.config.model import Config
    from doxlate.registry.handlers import TagHandler
    from doxlate.registry.tags import TagRegistry


@click.command(
    name="tags",
    help="List the translatable commands and their handlers.",
)
@config_option
@click.option(
    "--no-config",
    is_flag=True,
    help="Ignore doxlate.toml and pyproject.toml in the working directory.",
)
def tags_command(*, config_paths: tuple[str, ...] = (), no_config: bool = False) -> None:
    """Print one ``name  KIND  arg`` line per registry entry, sorted by name."""
    config: Config = resolve_config_from_click(config_paths=config_paths, no_config=no_config)
    registry: TagRegistry = config.registry()

    entries: Mapping[str, TagHandler] = registry.as_mapping()
    width: int = max((len(name) for name in entries), default=0)
    for name in registry.names():
        handler: TagHandler = entries[name]
        line: str = f"{name:<{width}}  {handler.kind.name}"
        if handler.arg:
            line += f"  {handler.arg}"
        click.echo(line)
