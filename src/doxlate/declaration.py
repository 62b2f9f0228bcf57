# doxlate:header:start
#
#   project      : Doxlate
#   file         : declaration.py
#   file_relpath : src/doxlate/declaration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Collaborator interfaces: documented declarations and comment parsers.

The converter never inspects a declaration directly. It asks four questions
through `DeclarationLike` (raw comment, parameter lookup and two per-declaration
features) and obtains the entity tree from a `CommentParser`. `Declaration` and
`PrebuiltTreeParser` are simple concrete implementations for callers that
already hold the parsed tree, such as the CLI and the tests.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from doxlate.diagnostic import WarningKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from doxlate.tree.entity import Entity

    WarningHook = Callable[[WarningKind, str], None]


class DeclarationLike(Protocol):
    """What the converter needs to know about a documented declaration."""

    def get_raw_comment(self) -> str | None:
        """Return the raw documentation comment, or ``None`` when undocumented."""
        ...

    def has_parameter(self, name: str) -> bool:
        """Return True if the declaration has a parameter called ``name``."""
        ...

    def verbatim_requested(self) -> bool:
        """Return True to bypass translation (``doxygen:notranslate``)."""
        ...

    def strip_params_disabled(self) -> bool:
        """Return True to keep unknown ``param`` blocks (``doxygen:nostripparams``)."""
        ...


class CommentParser(Protocol):
    """Turns the raw comment of a declaration into top-level entities."""

    def create_tree(
        self,
        declaration: DeclarationLike,
        text: str,
        report_warning: WarningHook,
    ) -> list[Entity]:
        """Parse ``text`` and return the top-level entity list.

        Malformed input is reported through ``report_warning`` rather than raised.
        """
        ...


@dataclass
class Declaration:
    """A documented declaration with an optional pre-parsed comment tree.

    Attributes:
        name (str): Declaration name, used in logs and CLI output.
        comment (str | None): Raw documentation comment.
        parameters (tuple[str, ...]): Parameter names of the declaration.
        no_translate (bool): Emit the raw comment verbatim.
        no_strip_params (bool): Keep ``param`` blocks for unknown parameters.
        tree (list[Entity]): Entities as produced by an upstream parser.
    """

    name: str
    comment: str | None = None
    parameters: tuple[str, ...] = ()
    no_translate: bool = False
    no_strip_params: bool = False
    tree: list[Entity] = field(default_factory=lambda: [])

    def get_raw_comment(self) -> str | None:
        return self.comment

    def has_parameter(self, name: str) -> bool:
        return name in self.parameters

    def verbatim_requested(self) -> bool:
        return self.no_translate

    def strip_params_disabled(self) -> bool:
        return self.no_strip_params


class PrebuiltTreeParser:
    """Parser for declarations that already carry their entity tree.

    Returns a copy of `Declaration.tree` so the conversion can transform it
    without touching the declaration. Any other `DeclarationLike` has no tree
    to offer: a warning is reported and the comment is documented as empty.
    """

    def create_tree(
        self,
        declaration: DeclarationLike,
        text: str,
        report_warning: WarningHook,
    ) -> list[Entity]:
        tree: list[Entity] | None = getattr(declaration, "tree", None)
        if tree is None:
            report_warning(
                WarningKind.COMMAND_ERROR,
                f"{type(declaration).__name__} carries no pre-parsed tree",
            )
            return []
        return copy.deepcopy(tree)
