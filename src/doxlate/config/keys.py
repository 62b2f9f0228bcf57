# doxlate:header:start
#
#   project      : Doxlate
#   file         : keys.py
#   file_relpath : src/doxlate/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Canonical TOML section and key names for Doxlate configuration.

These names are the external configuration schema as it appears in
``doxlate.toml`` and in ``[tool.doxlate]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Doxlate configuration."""

    # [formatting]
    SECTION_FORMATTING: Final[str] = "formatting"

    KEY_LINE_PREFIX: Final[str] = "line_prefix"

    # [translation]
    SECTION_TRANSLATION: Final[str] = "translation"

    KEY_STRIP_PARAMS: Final[str] = "strip_params"
    KEY_DEBUG: Final[str] = "debug"

    # [tags]: command = { handler = "...", arg = "..." } or command = false
    SECTION_TAGS: Final[str] = "tags"

    KEY_HANDLER: Final[str] = "handler"
    KEY_ARG: Final[str] = "arg"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_FORMATTING,
            SECTION_TRANSLATION,
            SECTION_TAGS,
        }
    )

    # [tags] is omitted: its keys are arbitrary command names.
    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMATTING: frozenset({KEY_LINE_PREFIX}),
        SECTION_TRANSLATION: frozenset({KEY_STRIP_PARAMS, KEY_DEBUG}),
    }

    ALLOWED_TAG_KEYS: Final[frozenset[str]] = frozenset({KEY_HANDLER, KEY_ARG})
