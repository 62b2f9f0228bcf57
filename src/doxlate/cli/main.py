# doxlate:header:start
#
#   project      : Doxlate
#   file         : main.py
#   file_relpath : src/doxlate/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Click entry point of the ``doxlate`` console script.

Group-level options configure logging once; the subcommands live in
`doxlate.cli.commands`.
"""

from __future__ import annotations

import click

from doxlate.cli.commands.render import render_command
from doxlate.cli.commands.tags import tags_command
from doxlate.cli.commands.version import version_command
from doxlate.cli.options import common_verbose_options, resolve_verbosity
from doxlate.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Store the log level on the context and configure logging.

    ``DOXLATE_LOG_LEVEL`` takes precedence over the ``-v``/``-q`` flags.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is set to a dict.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.ensure_object(dict)
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Translate Doxygen comment trees into C# XML documentation comments.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the Doxlate CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(render_command)

cli.add_command(tags_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
