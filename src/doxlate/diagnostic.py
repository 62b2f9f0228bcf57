# doxlate:header:start
#
#   project      : Doxlate
#   file         : diagnostic.py
#   file_relpath : src/doxlate/diagnostic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Diagnostics reported while converting documentation comments.

The translator itself never reports anything: unsupported commands and
malformed nodes simply render nothing. Diagnostics originate from the comment
parser collaborator, which surfaces malformed input through the warning hook
of `doxlate.pipeline.converter.CommentConverter`.

Sections:
    * WarningKind: Doxygen warning codes understood by the hook.
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable payload (level + message + optional kind).
    * DiagnosticLog: mutable collection with a per-level summary.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from doxlate.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from doxlate.config.logging import DoxlateLogger

logger: DoxlateLogger = get_logger(__name__)


class WarningKind(IntEnum):
    """Doxygen parser warning codes."""

    UNKNOWN_COMMAND = 560
    UNEXPECTED_END_OF_COMMENT = 561
    COMMAND_EXPECTED = 562
    HTML_ERROR = 563
    COMMAND_ERROR = 564
    UNKNOWN_CHARACTER = 565
    UNEXPECTED_ITERATOR_VALUE = 566


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics.

    Parser collaborators only report warnings; conversion itself never fails.
    """

    WARNING = "warning"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.WARNING: chalk.yellow,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str
    kind: WarningKind | None = None

    def __str__(self) -> str:
        code: str = f" {int(self.kind)}" if self.kind is not None else ""
        return f"[{self.level.value}{code}] {self.message}"


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics, in insertion order."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str, kind: WarningKind | None = None) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
            kind: Optional Doxygen warning code.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, kind))

    def summary(self) -> str:
        """Return the counts per level, e.g. ``"2 warnings"``.

        Returns:
            str: Comma-separated counts in level order; empty for an empty log.
        """
        counts: Counter[DiagnosticLevel] = Counter(d.level for d in self.items)
        parts: list[str] = []
        for level in DiagnosticLevel:
            n: int = counts[level]
            if n:
                parts.append(f"{n} {level.value}{'' if n == 1 else 's'}")
        return ", ".join(parts)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
