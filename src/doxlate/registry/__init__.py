# doxlate:header:start
#
#   project      : Doxlate
#   file         : __init__.py
#   file_relpath : src/doxlate/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Tag handler registry.

Most callers only need `get_tag_registry()`; `TagRegistry.with_overlay()` is
meant for configuration-driven tables and tests.
"""

from __future__ import annotations

from doxlate.registry.handlers import HandlerKind, TagHandler
from doxlate.registry.tags import TagRegistry, builtin_entries, get_tag_registry

__all__ = [
    "HandlerKind",
    "TagHandler",
    "TagRegistry",
    "builtin_entries",
    "get_tag_registry",
]
