# doxlate:header:start
#
#   project      : Doxlate
#   file         : __init__.py
#   file_relpath : src/doxlate/tree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Entity tree model for parsed documentation comments."""

from __future__ import annotations

from doxlate.tree.entity import Entity, entities_from_list, format_tree, get_base_command

__all__ = [
    "Entity",
    "entities_from_list",
    "format_tree",
    "get_base_command",
]
