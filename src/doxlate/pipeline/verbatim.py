# doxlate:header:start
#
#   project      : Doxlate
#   file         : verbatim.py
#   file_relpath : src/doxlate/pipeline/verbatim.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Cosmetic formatting of untranslated comments.

Declarations with the ``doxygen:notranslate`` feature keep their raw comment
text. It is only re-wrapped into a ``/** ... */`` block where every line
carries a leading ``*``. Markup is not interpreted.
"""

from __future__ import annotations

from doxlate.constants import VERBATIM_CLOSE, VERBATIM_LINE_MARKER, VERBATIM_OPEN

_BLANKS: str = " \t"


def detect_indent(doc: str) -> int:
    """Return the column of the comment's continuation lines, at least 1.

    The first line follows the comment opener and tells nothing about the
    indentation, so the line after the first line break is measured instead.
    Single-line comments use 1.
    """
    newline: int = doc.find("\n")
    if newline < 0:
        return 1
    after: str = doc[newline + 1 :]
    content: str = after.lstrip(_BLANKS)
    if not content:
        return 1
    return len(after) - len(content) + 1


def indent_and_insert_asterisks(doc: str) -> str:
    """Format a raw comment as a ``/** ... */`` block.

    Lines that do not start with ``*`` (ignoring indentation) get ``"* "``
    inserted before their first character. Blank lines become the indentation
    plus a bare ``*``. The indentation of non-blank lines is kept as is.

    Args:
        doc (str): Raw comment text, without comment delimiters.

    Returns:
        str: The comment block, terminated by a line break.

    Example:
        >>> indent_and_insert_asterisks("line one")
        '/**line one */\\n'
    """
    single_line: bool = "\n" not in doc
    indent: int = detect_indent(doc)
    indent_str: str = " " * (indent - 1)

    opener: str = indent_str + VERBATIM_OPEN
    if indent > 1:
        # Shift left by one so the asterisks line up
        opener = opener[1:]

    first, *rest = doc.split("\n")
    lines: list[str] = [opener + first]
    last: int = len(rest) - 1
    for index, line in enumerate(rest):
        lines.append(_insert_marker(line, indent_str, is_last=index == last))
    text: str = "\n".join(lines)

    trimmed: str = text.rstrip(_BLANKS)
    if trimmed.endswith("\n"):
        text = trimmed
    elif not single_line:
        text += "\n"

    closing_pad: str = " " if single_line else indent_str
    return f"{text}{closing_pad}{VERBATIM_CLOSE}\n"


def _insert_marker(line: str, indent_str: str, *, is_last: bool) -> str:
    content: str = line.lstrip(_BLANKS)
    if not content:
        # A whitespace-only remainder after the last break is left for the tail trim
        return line if is_last else indent_str + VERBATIM_LINE_MARKER
    if content.startswith(VERBATIM_LINE_MARKER):
        return line
    leading: str = line[: len(line) - len(content)]
    return f"{leading}{VERBATIM_LINE_MARKER} {content}"
