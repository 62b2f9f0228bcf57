# doxlate:header:start
#
#   project      : Doxlate
#   file         : render.py
#   file_relpath : src/doxlate/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Doxlate `render` command.

Reads JSON declaration documents and prints the C# XML documentation comment
of every declaration. Parser warnings attached to the run are printed to
stderr after the comments.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from doxlate.cli.config_resolver import resolve_config_from_click
from doxlate.cli.errors import DoxlateCliError, DoxlateDataError, DoxlateFileNotFoundError
from doxlate.cli.io import load_declarations
from doxlate.cli.options import config_option
from doxlate.config.logging import get_logger, setup_logging
from doxlate.errors import DocumentError
from doxlate.pipeline.converter import CommentConverter

if TYPE_CHECKING:
    from doxlate.config.logging import DoxlateLogger
    from doxlate.config.model import Config
    from doxlate.declaration import Declaration
    from doxlate.diagnostic import DiagnosticLog

logger: DoxlateLogger = get_logger(__name__)


def read_declarations(files: tuple[Path, ...]) -> list[Declaration]:
    """Load the declarations of every input file, in order.

    Raises:
        DoxlateFileNotFoundError: If an input file does not exist.
        DoxlateDataError: If an input file is not a valid declaration document.
        DoxlateCliError: If an input file cannot be read.
    """
    declarations: list[Declaration] = []
    for path in files:
        if not path.is_file():
            raise DoxlateFileNotFoundError(f"No such file: {path}")
        try:
            declarations.extend(load_declarations(path))
        except DocumentError as exc:
            raise DoxlateDataError(str(exc)) from exc
        except OSError as exc:
            raise DoxlateCliError(f"Cannot read {path}: {exc}") from exc
    return declarations



def echo_diagnostics(diagnostics: DiagnosticLog) -> None:
    """Echo each diagnostic, then a per-level summary line, to stderr."""
    if not diagnostics:
        return
    for diagnostic in diagnostics:
        click.echo(diagnostic.level.color(str(diagnostic)), err=True)
    click.echo(f"Doxygen parser reported {diagnostics.summary()}.", err=True)

@click.command(
    name="render",
    help="Render C# XML documentation comments from JSON declaration documents.",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@config_option
@click.option(
    "--no-config",
    is_flag=True,
    help="Ignore doxlate.toml and pyproject.toml in the working directory.",
)
@click.option(
    "--no-translate",
    is_flag=True,
    help="Emit every comment verbatim (as with doxygen:notranslate).",
)
@click.option(
    "--keep-params",
    is_flag=True,
    help="Keep param blocks naming unknown parameters.",
)
@click.option(
    "--line-prefix",
    default=None,
    help="Continuation prefix of generated lines (default: ' /// ').",
)
@click.option(
    "--debug-translator",
    is_flag=True,
    help="Log the intermediate trees at DEBUG level.",
)
def render_command(
    *,
    files: tuple[Path, ...],
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
    no_translate: bool = False,
    keep_params: bool = False,
    line_prefix: str | None = None,
    debug_translator: bool = False,
) -> None:
    """Render the documentation comments of the given documents.

    Args:
        files (tuple[Path, ...]): JSON declaration documents.
        config_paths (tuple[str, ...]): Extra config files (later wins).
        no_config (bool): Skip config discovery in the working directory.
        no_translate (bool): Force verbatim output for every declaration.
        keep_params (bool): Disable parameter stripping.
        line_prefix (str | None): Override of the continuation prefix.
        debug_translator (bool): Trace the conversion stages.
    """
    config: Config = resolve_config_from_click(
        config_paths=config_paths,
        no_config=no_config,
        keep_params=keep_params,
        line_prefix=line_prefix,
        debug_translator=debug_translator,
    )
    if config.debug_translator and logging.getLogger().getEffectiveLevel() > logging.DEBUG:
        setup_logging(level=logging.DEBUG)

    declarations: list[Declaration] = read_declarations(files)
    if no_translate:
        declarations = [dataclasses.replace(d, no_translate=True) for d in declarations]

    converter = CommentConverter(config)
    show_names: bool = len(declarations) > 1
    for declaration in declarations:
        logger.info("Rendering %s", declaration.name)
        text: str = converter.make_documentation(declaration)
        if show_names:
            click.echo(f"// {declaration.name}")
        click.echo(text, nl=False)

    echo_diagnostics(converter.diagnostics)
