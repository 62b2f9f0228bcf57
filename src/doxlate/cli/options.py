# doxlate:header:start
#
#   project      : Doxlate
#   file         : options.py
#   file_relpath : src/doxlate/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Reusable Click options and their resolution.

Keeps the commands thin: verbosity flags map to a logging level here, and
`config_option` declares the ``--config`` path option shared by commands.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

import click

from doxlate.cli.errors import DoxlateUsageError
from doxlate.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``TRACE`` for ``-vvv``, ``DEBUG`` for ``-vv``, ``INFO`` for ``-v``,
        ``ERROR`` for ``-q``, ``WARNING`` otherwise.

    Raises:
        DoxlateUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DoxlateUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Repeat up to three times.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a repeatable ``--config PATH`` option (later files win)."""
    return click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="Configuration file (doxlate.toml or pyproject.toml). May be repeated.",
    )(f)
