# doxlate:header:start
#
#   project      : Doxlate
#   file         : errors.py
#   file_relpath : src/doxlate/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Exceptions raised outside the translation core.

The translator never raises for malformed comment trees; these errors cover
invalid configuration and unreadable declaration documents only.
"""

from __future__ import annotations


class DoxlateError(Exception):
    """Base class for Doxlate errors."""


class ConfigError(DoxlateError, ValueError):
    """Invalid configuration value or shape."""


class DocumentError(DoxlateError, ValueError):
    """Malformed JSON declaration document."""
