# doxlate:header:start
#
#   project      : Doxlate
#   file         : constants.py
#   file_relpath : src/doxlate/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Doxlate Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    DOXLATE_VERSION: str = get_version("doxlate")
except PackageNotFoundError:  # running from a source checkout
    DOXLATE_VERSION = "0.0.0"

# Config discovery
DOXLATE_TOML_NAME: Final[str] = "doxlate.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "doxlate"

# Tags produced by the upstream comment parser
PLAIN_STRING_TAG: Final[str] = "plainstd::string"
ENDLINE_TAG: Final[str] = "plainstd::endl"
PARAM_TAG: Final[str] = "param"

# Synthetic tags created while assembling a comment
ROOT_TAG: Final[str] = "root"
SUMMARY_TAG: Final[str] = "summary"

# Top-level nodes whose children are pooled into the summary block
SUMMARY_SOURCE_TAGS: Final[frozenset[str]] = frozenset({"brief", "partofdescription"})

# Commands that may carry a sub-qualifier, e.g. ``param[in]`` or ``code{.py}``
QUALIFIED_COMMANDS: Final[tuple[str, ...]] = ("param", "code")

# Continuation prefix of a C# XML documentation comment line
DEFAULT_LINE_PREFIX: Final[str] = " /// "

# Verbatim (untranslated) comment delimiters
VERBATIM_OPEN: Final[str] = "/**"
VERBATIM_CLOSE: Final[str] = "*/"
VERBATIM_LINE_MARKER: Final[str] = "*"
