# doxlate:header:start
#
#   project      : Doxlate
#   file         : translator.py
#   file_relpath : src/doxlate/pipeline/translator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Recursive translation of an entity tree into C# XML documentation text.

`TreeTranslator.translate()` visits the children of a node and dispatches
each one on the `HandlerKind` of its registry entry. The handler alone
decides whether to descend into the child's own children, so a command
without an entry contributes nothing and its subtree is never visited.

Handlers do not mutate the tree. A malformed node (for example a ``param``
without children) renders as the empty string instead of raising, so that
one bad command never loses the rest of a declaration's documentation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from doxlate.config.logging import get_logger
from doxlate.constants import DEFAULT_LINE_PREFIX
from doxlate.registry.handlers import HandlerKind

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from doxlate.config.logging import DoxlateLogger
    from doxlate.registry.handlers import TagHandler
    from doxlate.registry.tags import TagRegistry
    from doxlate.tree.entity import Entity

logger: DoxlateLogger = get_logger(__name__)

_TRAILING_WHITESPACE: str = "\n\t "


def reflow_line(line: str, indent: int = 0) -> str:
    """Return ``line`` unchanged.

    Wrapping long lines is disabled: original comments keep their own line
    breaks, and re-wrapping them on top of those produced ragged short lines.
    This is the single seam where a wrapping algorithm would be plugged in.

    Args:
        line (str): Rendered text.
        indent (int): Indentation level continuation lines would receive.

    Returns:
        str: ``line`` as given.
    """
    return line


class TreeTranslator:
    """Renders entity trees with a tag registry.

    Args:
        registry (TagRegistry): Table of tag handlers.
        param_exists (Callable[[str], bool]): Tells whether a parameter name
            exists on the declaration being documented (already accounting for
            disabled stripping).
        line_prefix (str): Continuation prefix used by line breaks and the
            summary block.
    """

    def __init__(
        self,
        registry: TagRegistry,
        param_exists: Callable[[str], bool] = lambda _name: True,
        line_prefix: str = DEFAULT_LINE_PREFIX,
    ) -> None:
        self.registry = registry
        self.param_exists = param_exists
        self.line_prefix = line_prefix

    def translate(self, entity: Entity) -> str:
        """Translate the children of ``entity``; leaves render nothing."""
        if entity.is_leaf:
            return ""
        return self.translate_children(entity.children)

    def translate_children(self, children: Sequence[Entity]) -> str:
        """Translate a sequence of sibling entities and concatenate the results."""
        return "".join(self.translate_entity(child) for child in children)

    def translate_entity(self, entity: Entity) -> str:
        """Render a single entity through its registry handler."""
        handler: TagHandler | None = self.registry.lookup(entity.tag)
        if handler is None:
            # Untranslatable commands are dropped without a warning.
            logger.trace("No handler for '%s'; dropping subtree", entity.tag)
            return ""
        return self._dispatch(entity, handler)

    def _dispatch(self, entity: Entity, handler: TagHandler) -> str:
        arg: str = handler.arg
        match handler.kind:
            case HandlerKind.HTML_WRAP:
                return self._html_wrap(entity, arg)
            case HandlerKind.CHAR:
                return arg or entity.tag
            case HandlerKind.SAME:
                return self._same(entity, arg)
            case HandlerKind.CREF:
                return self._cref(entity, arg)
            case HandlerKind.HTML_TAG:
                return self._html_tag(entity, arg)
            case HandlerKind.HTML_ENTITY:
                return arg + ";"
            case HandlerKind.NEWLINE:
                return " \n" + self.line_prefix
            case HandlerKind.PLAIN_STRING:
                return entity.data
            case HandlerKind.SUMMARY:
                return self._summary(entity)
            case HandlerKind.VERBATIM:
                return arg + " " + "".join(child.data for child in entity.children)
            case HandlerKind.EXTENDED:
                return f"<{arg}>{self._paragraph(entity.children)}</{arg}>"
            case HandlerKind.PAR:
                return self._par(entity)
            case HandlerKind.PARAM:
                return self._param(entity)
            case HandlerKind.REF:
                return self._ref(entity)
            case HandlerKind.LINK:
                return self._link(entity)
            case HandlerKind.ANCHOR:
                return f'<a id="{self.translate(entity)}"></a>'

    # --- handlers ------------------------------------------------------------

    def _paragraph(self, children: Sequence[Entity]) -> str:
        return reflow_line(self.translate_children(children), 0)

    def _html_wrap(self, entity: Entity, html: str) -> str:
        if not entity.children:
            return ""
        content: list[Entity] = list(entity.children)
        markers: list[Entity] = []
        while content and content[-1].is_endline:
            markers.insert(0, content.pop())
        tail: str = self.translate_children(markers)
        inner: str = self.translate_children(content)
        body: str = inner.rstrip(_TRAILING_WHITESPACE)
        if not body:
            return f"<{html}>{inner}</{html}> {tail}"
        # Trailing whitespace and blank-line markers go after the closing tag
        return f"<{html}>{body}</{html}>{inner[len(body) :]}{tail}"

    def _same(self, entity: Entity, renamed: str) -> str:
        name: str = renamed or entity.tag
        return reflow_line(f"<{name}>{self.translate(entity)}</{name}>", 2)

    def _cref(self, entity: Entity, renamed: str) -> str:
        if len(entity.children) != 1:
            return ""
        name: str = renamed or entity.tag
        return reflow_line(f'<{name} cref="{entity.children[0].data}"/>', 2)

    def _html_tag(self, entity: Entity, html: str) -> str:
        if entity.data == "/":
            return f"</{html[1:]}>"
        return f"{html}{entity.data}>"

    def _summary(self, entity: Entity) -> str:
        prefix: str = self.line_prefix
        return f"{prefix}<summary>\n{prefix}{self._paragraph(entity.children)}\n{prefix}</summary>"

    def _par(self, entity: Entity) -> str:
        if not entity.children:
            return ""
        caption, *rest = entity.children
        return f'<para alt="{caption.data}">{self._paragraph(rest)}</para>'

    def _param(self, entity: Entity) -> str:
        if not entity.children:
            return ""
        name_node, *rest = entity.children
        if not self.param_exists(name_node.data):
            logger.debug("Skipping documentation of unknown parameter '%s'", name_node.data)
            return ""
        return f'<param name="{name_node.data}">{self._paragraph(rest)}</param>'

    def _ref(self, entity: Entity) -> str:
        # \page is unknown to C# docs, but a link still tells the reader where
        # to look, and it works for an \anchor on the same page.
        if not entity.children:
            return ""
        anchor: str = entity.children[0].data
        text: str = entity.children[1].data if len(entity.children) > 1 else anchor
        return f'<a href="#{anchor}">{text}</a>'

    def _link(self, entity: Entity) -> str:
        # C# docs have no inline link; keep the display name and the text.
        if not entity.children:
            return ""
        link_object, *rest = entity.children
        _target, _sep, name = link_object.data.partition(" ")
        return name + self._paragraph(rest)
