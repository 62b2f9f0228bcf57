# doxlate:header:start
#
#   project      : Doxlate
#   file         : tags.py
#   file_relpath : src/doxlate/registry/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Tag handler registry for Doxygen to C# XML documentation translation.

The registry maps a base command to a `TagHandler`. Commands without an
entry are not translatable and are silently dropped by the translator; there
are many of them and warning about each one would bury actionable warnings.

Notes:
    * The built-in table is assembled lazily on first access and then shared
      read-only by every translation. Construction is guarded by a lock so
      that it happens exactly once, even when first accessed from several
      threads; lookups afterwards take no lock.
    * `TagRegistry.with_overlay()` derives a new registry (overrides minus
      removals) without touching the shared one. Configured tag overrides go
      through this path.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from doxlate.config.logging import get_logger
from doxlate.constants import ENDLINE_TAG, PARAM_TAG, PLAIN_STRING_TAG, SUMMARY_TAG
from doxlate.registry.handlers import HandlerKind, TagHandler
from doxlate.tree.entity import get_base_command

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from doxlate.config.logging import DoxlateLogger

logger: DoxlateLogger = get_logger(__name__)


# Doxygen commands rendered as inline HTML (command -> HTML tag)
_HTML_WRAP: Final[dict[str, str]] = {
    "a": "i",
    "arg": "li",
    "b": "b",
    "c": "code",
    "cite": "i",
    "e": "i",
    "em": "i",
    "li": "li",
    "p": "code",
}

# Single characters; an empty escape means "print the character itself"
_CHARS: Final[dict[str, str]] = {
    "$": "",
    "@": "",
    "\\": "",
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "#": "",
    "%": "",
    "~": "",
    '"': "&quot;",
    ".": "",
    # C++ namespace separator
    "::": ".",
}

# Commands C# documentation supports under the same (or a renamed) element
_SAME: Final[dict[str, str]] = {
    "author": "",
    "authors": "author",
    "deprecated": "",
    "result": "return",
    "return": "returns",
    "returns": "",
    "since": "",
    "throws": "",
    "throw": "throws",
    "version": "",
    "note": "remarks",
    "remark": "remarks",
    # Already a C# element; rendered as <remarks> without a "Remarks: " label
    "remarks": "",
    "todo": "",
    "warning": "remarks",
}

_CREF: Final[dict[str, str]] = {
    "see": "see",
    "sa": "seealso",
}

_SPECIAL: Final[dict[str, HandlerKind]] = {
    PARAM_TAG: HandlerKind.PARAM,
    "ref": HandlerKind.REF,
    "link": HandlerKind.LINK,
    "par": HandlerKind.PAR,
    SUMMARY_TAG: HandlerKind.SUMMARY,
    PLAIN_STRING_TAG: HandlerKind.PLAIN_STRING,
    ENDLINE_TAG: HandlerKind.NEWLINE,
    "n": HandlerKind.NEWLINE,
}

# \f commands print the literal LaTeX formula
_FORMULAS: Final[tuple[str, ...]] = ("f$", "f[", "f{")

_HTML_TAGS: Final[tuple[str, ...]] = (
    "a", "b", "blockquote", "body", "br", "center", "caption", "code", "dd", "dfn",
    "div", "dl", "dt", "em", "form", "hr", "h1", "h2", "h3", "i", "input", "img", "li",
    "meta", "multicol", "ol", "p", "pre", "small", "span", "strong", "sub", "sup",
    "table", "td", "th", "tr", "tt", "kbd", "ul", "var",
)  # fmt: skip

_HTML_ENTITIES: Final[tuple[str, ...]] = (
    "copy", "trade", "reg", "lt", "gt", "amp", "apos", "quot", "lsquo", "rsquo",
    "ldquo", "rdquo", "ndash", "mdash", "nbsp", "times", "minus", "sdot", "sim",
    "le", "ge", "larr", "rarr",
)  # fmt: skip


def builtin_entries() -> dict[str, TagHandler]:
    """Return a fresh copy of the built-in tag table."""
    table: dict[str, TagHandler] = {}
    for name, html in _HTML_WRAP.items():
        table[name] = TagHandler(HandlerKind.HTML_WRAP, html)
    for name, escaped in _CHARS.items():
        table[name] = TagHandler(HandlerKind.CHAR, escaped)
    for name, renamed in _SAME.items():
        table[name] = TagHandler(HandlerKind.SAME, renamed)
    for name, renamed in _CREF.items():
        table[name] = TagHandler(HandlerKind.CREF, renamed)
    for name, kind in _SPECIAL.items():
        table[name] = TagHandler(kind)
    for name in _FORMULAS:
        table[name] = TagHandler(HandlerKind.VERBATIM)
    for html_tag in _HTML_TAGS:
        table[f"<{html_tag}"] = TagHandler(HandlerKind.HTML_TAG, f"<{html_tag}")
    for entity in _HTML_ENTITIES:
        table[f"&{entity}"] = TagHandler(HandlerKind.HTML_ENTITY, f"&{entity}")
    return table


class TagRegistry:
    """Immutable mapping from base command to `TagHandler`."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, TagHandler]) -> None:
        self._entries: Mapping[str, TagHandler] = MappingProxyType(dict(entries))

    def lookup(self, tag: str) -> TagHandler | None:
        """Return the handler for ``tag``'s base command, or ``None``.

        Args:
            tag (str): A tag name, possibly qualified (``param[in]``).

        Returns:
            TagHandler | None: The entry, or ``None`` for untranslatable commands.
        """
        return self._entries.get(get_base_command(tag))

    def supports(self, tag: str) -> bool:
        """Return True if ``tag``'s base command has an entry."""
        return get_base_command(tag) in self._entries

    def names(self) -> tuple[str, ...]:
        """Return all registered command names (sorted)."""
        return tuple(sorted(self._entries))

    def as_mapping(self) -> Mapping[str, TagHandler]:
        """Return a read-only view of the table."""
        return self._entries

    def with_overlay(
        self,
        overrides: Mapping[str, TagHandler] | None = None,
        removals: Iterable[str] = (),
    ) -> TagRegistry:
        """Return a new registry with ``overrides`` applied and ``removals`` dropped.

        Args:
            overrides (Mapping[str, TagHandler] | None): Entries to add or replace.
            removals (Iterable[str]): Command names to remove.

        Returns:
            TagRegistry: The derived registry; ``self`` is unchanged.
        """
        composed: dict[str, TagHandler] = dict(self._entries)
        composed.update(overrides or {})
        for name in removals:
            if composed.pop(name, None) is None:
                logger.debug("Tag '%s' is not registered; nothing to remove", name)
        logger.debug(
            "Derived tag registry: %d overrides, %d entries",
            len(overrides or {}),
            len(composed),
        )
        return TagRegistry(composed)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"TagRegistry({len(self._entries)} entries)"


_default_registry: TagRegistry | None = None
_default_registry_lock = threading.Lock()


def get_tag_registry() -> TagRegistry:
    """Return the process-wide built-in registry, building it on first use."""
    global _default_registry
    registry: TagRegistry | None = _default_registry
    if registry is None:
        with _default_registry_lock:
            registry = _default_registry
            if registry is None:
                registry = TagRegistry(builtin_entries())
                logger.debug("Built tag registry with %d entries", len(registry))
                _default_registry = registry
    return registry
