# doxlate:header:start
#
#   project      : Doxlate
#   file         : io.py
#   file_relpath : src/doxlate/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Read declaration documents for the ``render`` command.

A document is a JSON object describing one declaration, or a list of them:

```json
{
  "name": "Add",
  "parameters": ["x", "y"],
  "comment": "\\\\brief Adds two numbers.",
  "tree": [
    {"tag": "brief", "children": [{"tag": "plainstd::string", "data": "Adds two numbers."}]}
  ],
  "no_translate": false,
  "no_strip_params": false
}
```

Only ``tree`` (or ``comment`` for verbatim output) is needed to render. When
``comment`` is missing but a tree is given, the declaration counts as
documented.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

from doxlate.config.logging import get_logger
from doxlate.declaration import Declaration
from doxlate.errors import DocumentError
from doxlate.tree.entity import entities_from_list

if TYPE_CHECKING:
    from pathlib import Path

    from doxlate.config.logging import DoxlateLogger

logger: DoxlateLogger = get_logger(__name__)

_KNOWN_KEYS: frozenset[str] = frozenset(
    {"name", "parameters", "comment", "tree", "no_translate", "no_strip_params"}
)


def load_declarations(path: Path) -> list[Declaration]:
    """Load the declarations of a JSON document.

    Args:
        path (Path): The document to read.

    Returns:
        list[Declaration]: Declarations in document order.

    Raises:
        DocumentError: If the file is not valid JSON or does not describe
            declarations.
        OSError: If the file cannot be read.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"{path}: invalid JSON: {exc}") from exc
    return declarations_from_payload(payload, source=str(path))


def declarations_from_payload(payload: Any, source: str = "<document>") -> list[Declaration]:
    """Convert a parsed JSON document into declarations.

    Raises:
        DocumentError: If the document shape is invalid.
    """
    items: list[Any]
    if isinstance(payload, dict):
        items = [payload]
    elif isinstance(payload, list):
        items = cast("list[Any]", payload)
    else:
        raise DocumentError(f"{source}: expected an object or a list of objects")

    declarations: list[Declaration] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise DocumentError(f"{source}: entry {index} is not an object")
        declarations.append(_declaration_from_dict(cast("dict[str, Any]", item), source, index))
    logger.debug("Loaded %d declaration(s) from %s", len(declarations), source)
    return declarations


def _declaration_from_dict(item: dict[str, Any], source: str, index: int) -> Declaration:
    where: str = f"{source}: entry {index}"
    for key in item:
        if key not in _KNOWN_KEYS:
            logger.warning("%s: unknown key '%s' ignored", where, key)

    name: Any = item.get("name", f"declaration{index}")
    if not isinstance(name, str):
        raise DocumentError(f"{where}: 'name' must be a string")

    parameters: Any = item.get("parameters", [])
    if not isinstance(parameters, list) or not all(
        isinstance(p, str) for p in cast("list[Any]", parameters)
    ):
        raise DocumentError(f"{where}: 'parameters' must be a list of strings")

    raw_tree: Any = item.get("tree", [])
    if not isinstance(raw_tree, list):
        raise DocumentError(f"{where}: 'tree' must be a list of entities")
    try:
        tree = entities_from_list(cast("list[Any]", raw_tree))
    except ValueError as exc:
        raise DocumentError(f"{where}: {exc}") from exc

    comment: Any = item.get("comment")
    if comment is None and tree:
        comment = ""
    if comment is not None and not isinstance(comment, str):
        raise DocumentError(f"{where}: 'comment' must be a string")

    flags: dict[str, bool] = {}
    for key in ("no_translate", "no_strip_params"):
        value: Any = item.get(key, False)
        if not isinstance(value, bool):
            raise DocumentError(f"{where}: '{key}' must be a boolean")
        flags[key] = value

    return Declaration(
        name=name,
        comment=comment,
        parameters=tuple(cast("list[str]", parameters)),
        no_translate=flags["no_translate"],
        no_strip_params=flags["no_strip_params"],
        tree=tree,
    )
