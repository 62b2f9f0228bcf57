# doxlate:header:start
#
#   project      : Doxlate
#   file         : handlers.py
#   file_relpath : src/doxlate/registry/handlers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Handler kinds and table entries of the tag registry.

A registry entry pairs a `HandlerKind` with a configuration argument. The
argument means different things per kind: an HTML tag name for
``HTML_WRAP``, a renamed output tag for ``SAME``/``CREF``, an escape for
``CHAR``, an entity code for ``HTML_ENTITY``. The rendering itself lives in
`doxlate.pipeline.translator.TreeTranslator`, which matches on the kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HandlerKind(Enum):
    """Closed set of rendering behaviours a tag can be bound to.

    Members:
        HTML_WRAP: Wrap translated children in ``<arg>...</arg>``.
        CHAR: Emit ``arg`` or, when empty, the tag text itself.
        SAME: Emit the (optionally renamed) tag around translated children.
        CREF: Emit a self-closing ``cref`` reference to the single child.
        HTML_TAG: Pass an inline HTML start or end tag through.
        HTML_ENTITY: Pass an HTML entity through.
        NEWLINE: Emit a line break plus the continuation prefix.
        PLAIN_STRING: Emit the node's literal data.
        SUMMARY: Emit the ``<summary>`` block.
        VERBATIM: Emit ``arg`` plus the children's raw data (formulas).
        EXTENDED: Wrap translated children in ``<arg>...</arg>`` as a paragraph.
        PAR: Emit a titled ``<para>``.
        PARAM: Emit a ``<param>`` block for an existing parameter.
        REF: Emit a hyperlink to an in-document anchor.
        LINK: Emit the display name of an inline link.
        ANCHOR: Emit an anchor element.
    """

    HTML_WRAP = "html_wrap"
    CHAR = "char"
    SAME = "same"
    CREF = "cref"
    HTML_TAG = "html_tag"
    HTML_ENTITY = "html_entity"
    NEWLINE = "newline"
    PLAIN_STRING = "plain_string"
    SUMMARY = "summary"
    VERBATIM = "verbatim"
    EXTENDED = "extended"
    PAR = "par"
    PARAM = "param"
    REF = "ref"
    LINK = "link"
    ANCHOR = "anchor"

    @classmethod
    def parse(cls, value: str) -> HandlerKind:
        """Return the kind named ``value`` (case-insensitive, ``-`` or ``_``).

        Raises:
            ValueError: If no kind has that name.
        """
        key: str = value.strip().lower().replace("-", "_")
        for kind in cls:
            if kind.value == key:
                return kind
        raise ValueError(f"Unknown handler kind: {value!r}")


@dataclass(frozen=True)
class TagHandler:
    """A registry entry: how to render one base command."""

    kind: HandlerKind
    arg: str = ""
