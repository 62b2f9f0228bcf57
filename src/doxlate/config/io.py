# doxlate:header:start
#
#   project      : Doxlate
#   file         : io.py
#   file_relpath : src/doxlate/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Load TOML configuration sources and read typed values from them.

Sources are either a dedicated ``doxlate.toml`` (settings at the top level)
or a ``pyproject.toml`` (settings under ``[tool.doxlate]``). Parsing is done
with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from doxlate.config.keys import Toml
from doxlate.config.logging import get_logger
from doxlate.constants import PYPROJECT_TOOL_SECTION
from doxlate.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from doxlate.config.logging import DoxlateLogger

TomlTable = dict[str, Any]

logger: DoxlateLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_doxlate_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the Doxlate settings table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.doxlate]`` (empty when absent);
    any other file is taken to be a dedicated config with settings at the top.
    """
    if path.name != "pyproject.toml":
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        logger.warning("[tool.%s] in %s is not a table; ignoring", PYPROJECT_TOOL_SECTION, path)
        return {}
    return cast("TomlTable", section)


def warn_unknown_keys(table: TomlTable, source: str) -> None:
    """Log a warning for every section or key the schema does not know."""
    for key, value in table.items():
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            logger.warning("%s: unknown config section '%s' ignored", source, key)
            continue
        allowed: frozenset[str] | None = Toml.ALLOWED_SECTION_KEYS.get(key)
        if allowed is None or not isinstance(value, dict):
            continue
        for sub in cast("TomlTable", value):
            if sub not in allowed:
                logger.warning("%s: unknown key '%s.%s' ignored", source, key, sub)


def get_table(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` (empty when missing).

    Raises:
        ConfigError: If the value exists but is not a table.
    """
    value: Any = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return a string value, ``None`` when missing.

    Raises:
        ConfigError: If the value is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return value


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return a boolean value, ``None`` when missing.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got {value!r}")
    return value
