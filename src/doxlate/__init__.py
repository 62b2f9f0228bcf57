# doxlate:header:start
#
#   project      : Doxlate
#   file         : __init__.py
#   file_relpath : src/doxlate/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Doxlate package.

Doxlate translates parsed Doxygen comment trees into C# XML documentation
comments, as emitted in front of generated C# declarations. It exposes a
small typed API (`CommentConverter`, `convert`) and the ``doxlate`` CLI.
"""

from __future__ import annotations

from doxlate.config.model import Config, MutableConfig, load_config
from doxlate.constants import DOXLATE_VERSION
from doxlate.declaration import CommentParser, Declaration, DeclarationLike, PrebuiltTreeParser
from doxlate.pipeline.converter import CommentConverter, convert
from doxlate.tree.entity import Entity

__version__: str = DOXLATE_VERSION

__all__ = [
    "CommentConverter",
    "CommentParser",
    "Config",
    "Declaration",
    "DeclarationLike",
    "Entity",
    "MutableConfig",
    "PrebuiltTreeParser",
    "convert",
    "load_config",
]
