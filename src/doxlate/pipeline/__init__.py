# doxlate:header:start
#
#   project      : Doxlate
#   file         : __init__.py
#   file_relpath : src/doxlate/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Conversion pipeline: normalization passes, translator and orchestrator."""

from __future__ import annotations

from doxlate.pipeline.converter import CommentConverter, convert
from doxlate.pipeline.translator import TreeTranslator, reflow_line
from doxlate.pipeline.verbatim import indent_and_insert_asterisks

__all__ = [
    "CommentConverter",
    "TreeTranslator",
    "convert",
    "indent_and_insert_asterisks",
    "reflow_line",
]
