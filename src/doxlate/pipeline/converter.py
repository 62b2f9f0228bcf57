# doxlate:header:start
#
#   project      : Doxlate
#   file         : converter.py
#   file_relpath : src/doxlate/pipeline/converter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Assemble the C# XML documentation comment of one declaration.

`CommentConverter.make_documentation()` runs the full conversion: raw comment
lookup, optional verbatim formatting, parsing, summary synthesis, filtering,
endline normalization and translation. A conversion either returns the whole
comment or the empty string for an undocumented declaration; there is no
partial output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from doxlate.config.logging import get_logger
from doxlate.config.model import Config
from doxlate.constants import ROOT_TAG
from doxlate.declaration import PrebuiltTreeParser
from doxlate.diagnostic import DiagnosticLog
from doxlate.pipeline.normalize import (
    collect_summary,
    filter_unsupported,
    shift_endlines_up_tree,
    strip_leading_endlines,
    strip_trailing_endlines,
)
from doxlate.pipeline.translator import TreeTranslator
from doxlate.pipeline.verbatim import indent_and_insert_asterisks
from doxlate.tree.entity import Entity, format_tree

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from doxlate.config.logging import DoxlateLogger
    from doxlate.declaration import CommentParser, DeclarationLike
    from doxlate.diagnostic import WarningKind
    from doxlate.registry.tags import TagRegistry

logger: DoxlateLogger = get_logger(__name__)


class CommentConverter:
    """Converts parsed Doxygen comments into C# XML documentation comments.

    A converter can be reused for any number of declarations. Each call owns
    the tree it converts; the registry is shared read-only.

    Args:
        config (Config | None): Runtime configuration (defaults when ``None``).
        parser (CommentParser | None): Parser collaborator. Defaults to
            `PrebuiltTreeParser`, which reads the tree attached to a `Declaration`.
        registry (TagRegistry | None): Tag table; defaults to ``config.registry()``.

    Attributes:
        diagnostics (DiagnosticLog): Warnings reported by the parser collaborator.
    """

    def __init__(
        self,
        config: Config | None = None,
        parser: CommentParser | None = None,
        registry: TagRegistry | None = None,
    ) -> None:
        self.config: Config = config if config is not None else Config()
        self.parser: CommentParser = parser if parser is not None else PrebuiltTreeParser()
        self.registry: TagRegistry = registry if registry is not None else self.config.registry()
        self.diagnostics: DiagnosticLog = DiagnosticLog()

    def report_warning(self, kind: WarningKind, message: str) -> None:
        """Record a warning raised by the parser collaborator."""
        logger.warning("Doxygen parser warning: %s.", message)
        self.diagnostics.add_warning(message, kind)

    def param_checker(self, declaration: DeclarationLike) -> Callable[[str], bool]:
        """Return the parameter check used for ``declaration``.

        Every name is accepted when stripping is disabled, either globally
        (``strip_params = false``) or by the declaration itself.
        """
        if not self.config.strip_params or declaration.strip_params_disabled():
            return lambda _name: True
        return declaration.has_parameter

    def make_documentation(self, declaration: DeclarationLike) -> str:
        """Return the documentation comment for ``declaration``.

        Args:
            declaration (DeclarationLike): The declaration to document.

        Returns:
            str: The comment text ending with a line break, or ``""`` when the
            declaration has no comment.
        """
        raw: str | None = declaration.get_raw_comment()
        if raw is None:
            return ""

        if declaration.verbatim_requested():
            logger.debug("Translation disabled; formatting comment verbatim")
            return indent_and_insert_asterisks(raw)

        param_exists: Callable[[str], bool] = self.param_checker(declaration)
        entities: list[Entity] = self.parser.create_tree(declaration, raw, self.report_warning)

        entities = strip_leading_endlines(entities)
        entities = collect_summary(entities)
        self._trace("LIST WITH SUMMARY", entities)

        entities = filter_unsupported(entities, self.registry, param_exists)
        self._trace("LIST FILTERED", entities)

        root: Entity = Entity.node(ROOT_TAG, entities)
        self._trace("LIST WITH ROOT UNSHIFTED", [root])

        root = shift_endlines_up_tree(root)
        root.children = strip_trailing_endlines(strip_leading_endlines(root.children))
        self._trace("LIST WITH ROOT", [root])

        translator = TreeTranslator(self.registry, param_exists, self.config.line_prefix)
        result: str = translator.translate(root) + "\n"
        if self.config.debug_translator:
            logger.debug("---RESULT IN C# XML DOC---\n%s", result)
        return result

    def _trace(self, stage: str, entities: Iterable[Entity]) -> None:
        if self.config.debug_translator and logger.isEnabledFor(logging.DEBUG):
            logger.debug("---%s---\n%s", stage, format_tree(entities))


def convert(declaration: DeclarationLike, config: Config | None = None) -> str:
    """Convert one declaration with a throwaway `CommentConverter`."""
    return CommentConverter(config).make_documentation(declaration)
