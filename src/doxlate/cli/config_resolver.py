# doxlate:header:start
#
#   project      : Doxlate
#   file         : config_resolver.py
#   file_relpath : src/doxlate/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Build the runtime `Config` from Click parameters.

Resolution order (lowest to highest precedence):

1. Built-in defaults.
2. ``pyproject.toml`` (``[tool.doxlate]``) in the working directory.
3. ``doxlate.toml`` in the working directory.
4. Files passed with ``--config``, in order.
5. Command-line flags.

Steps 2 and 3 are skipped with ``--no-config``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from doxlate.cli.errors import DoxlateConfigError, DoxlateFileNotFoundError
from doxlate.config.logging import get_logger
from doxlate.config.model import MutableConfig
from doxlate.constants import DOXLATE_TOML_NAME
from doxlate.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from doxlate.config.logging import DoxlateLogger
    from doxlate.config.model import Config

logger: DoxlateLogger = get_logger(__name__)


def discover_config_files(cwd: Path) -> list[Path]:
    """Return the project config files present in ``cwd``, lowest precedence first."""
    found: list[Path] = []
    for name in ("pyproject.toml", DOXLATE_TOML_NAME):
        candidate: Path = cwd / name
        if candidate.is_file():
            found.append(candidate)
    return found


def resolve_config_from_click(
    *,
    config_paths: Sequence[str],
    no_config: bool = False,
    keep_params: bool = False,
    line_prefix: str | None = None,
    debug_translator: bool = False,
) -> Config:
    """Merge the configuration layers into a frozen `Config`.

    Args:
        config_paths (Sequence[str]): Explicit ``--config`` files.
        no_config (bool): Skip discovery in the working directory.
        keep_params (bool): ``--keep-params``; disables parameter stripping.
        line_prefix (str | None): ``--line-prefix`` override.
        debug_translator (bool): ``--debug-translator``.

    Returns:
        Config: The frozen configuration.

    Raises:
        DoxlateFileNotFoundError: If an explicit config file does not exist.
        DoxlateConfigError: If a config file holds invalid values.
    """
    sources: list[Path] = [] if no_config else discover_config_files(Path.cwd())
    for raw in config_paths:
        path = Path(raw)
        if not path.is_file():
            raise DoxlateFileNotFoundError(f"Config file not found: {path}")
        sources.append(path)

    draft: MutableConfig = MutableConfig.from_defaults()
    try:
        for path in sources:
            logger.info("Reading configuration from %s", path)
            draft = draft.merge_with(MutableConfig.from_toml_file(path))
    except ConfigError as exc:
        raise DoxlateConfigError(str(exc)) from exc

    overrides = MutableConfig(
        line_prefix=line_prefix,
        strip_params=False if keep_params else None,
        debug_translator=True if debug_translator else None,
    )
    return draft.merge_with(overrides).freeze()
