# doxlate:header:start
#
#   project      : Doxlate
#   file         : entity.py
#   file_relpath : src/doxlate/tree/entity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Entity tree: the parsed representation of one documentation comment.

An `Entity` is either a *leaf* carrying only literal ``data`` (a text run, an
HTML attribute string, a blank-line marker) or an inner node whose ordered
``children`` are further entities. The upstream comment parser produces a
list of top-level entities; the converter wraps them in synthetic ``summary``
and ``root`` nodes before translation.

Trees are owned by a single conversion. The normalization passes return new
trees (see `dataclasses.replace`) instead of relying on parent references.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from doxlate.constants import ENDLINE_TAG, PLAIN_STRING_TAG, QUALIFIED_COMMANDS


@dataclass
class Entity:
    """A node of the documentation comment tree.

    Attributes:
        tag (str): Command or markup element name, e.g. ``"param"``, ``"<b"``
            or ``"plainstd::string"``.
        data (str): Literal payload; empty when the node carries none.
        children (list[Entity]): Ordered child entities.
        is_leaf (bool): ``True`` for nodes that carry only ``data``. Derived from
            ``children`` when omitted. A leaf never has children.
    """

    tag: str
    data: str = ""
    children: list[Entity] = field(default_factory=lambda: [])
    is_leaf: bool | None = None

    def __post_init__(self) -> None:
        if self.is_leaf is None:
            self.is_leaf = not self.children
        elif self.is_leaf and self.children:
            raise ValueError(f"Leaf entity '{self.tag}' cannot have children")

    @classmethod
    def leaf(cls, tag: str, data: str = "") -> Entity:
        """Return a leaf entity."""
        return cls(tag=tag, data=data, is_leaf=True)

    @classmethod
    def node(cls, tag: str, children: Iterable[Entity] = ()) -> Entity:
        """Return an inner entity; it stays non-leaf even with no children."""
        return cls(tag=tag, children=list(children), is_leaf=False)

    @classmethod
    def text(cls, data: str) -> Entity:
        """Return a plain text run."""
        return cls.leaf(PLAIN_STRING_TAG, data)

    @classmethod
    def endline(cls) -> Entity:
        """Return a blank-line marker."""
        return cls.leaf(ENDLINE_TAG)

    @property
    def is_endline(self) -> bool:
        """Whether this entity is a blank-line marker."""
        return self.tag == ENDLINE_TAG

    @property
    def base_command(self) -> str:
        """The tag with any sub-qualifier stripped (see `get_base_command`)."""
        return get_base_command(self.tag)

    # --- serialization -------------------------------------------------------

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Entity:
        """Build an entity from a JSON-like mapping.

        The mapping has a ``"tag"`` string, an optional ``"data"`` string and an
        optional ``"children"`` list. Entries without ``"children"`` are leaves.

        Args:
            payload (Mapping[str, Any]): The mapping to convert.

        Returns:
            Entity: The reconstructed entity (children converted recursively).

        Raises:
            ValueError: If the mapping does not describe a valid entity.
        """
        tag: Any = payload.get("tag")
        if not isinstance(tag, str) or not tag:
            raise ValueError(f"Entity requires a non-empty string 'tag': {payload!r}")
        data: Any = payload.get("data", "")
        if not isinstance(data, str):
            raise ValueError(f"Entity '{tag}' has non-string 'data': {data!r}")
        if "children" not in payload:
            return cls.leaf(tag, data)
        raw_children: Any = payload["children"]
        if not isinstance(raw_children, list):
            raise ValueError(f"Entity '{tag}' has non-list 'children'")
        children: list[Entity] = []
        for child in raw_children:
            if not isinstance(child, Mapping):
                raise ValueError(f"Entity '{tag}' has a non-object child: {child!r}")
            children.append(cls.from_dict(child))
        return cls(tag=tag, data=data, children=children, is_leaf=False)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping; inverse of `from_dict`."""
        out: dict[str, Any] = {"tag": self.tag}
        if self.data:
            out["data"] = self.data
        if not self.is_leaf:
            out["children"] = [child.to_dict() for child in self.children]
        return out


def get_base_command(tag: str) -> str:
    """Return the dispatch key of a tag.

    ``param[in]`` and ``param[out]`` dispatch as ``param``, ``code{.py}`` as
    ``code``. Every other tag is its own base command.
    """
    for command in QUALIFIED_COMMANDS:
        if tag.startswith(command):
            return command
    return tag


def entities_from_list(payload: Sequence[Mapping[str, Any]]) -> list[Entity]:
    """Convert a JSON list of entity mappings into entities.

    Raises:
        ValueError: If an item is not a mapping or not a valid entity.
    """
    entities: list[Entity] = []
    for item in payload:
        if not isinstance(item, Mapping):
            raise ValueError(f"Expected an entity object, got {item!r}")
        entities.append(Entity.from_dict(item))
    return entities


def format_tree(entities: Iterable[Entity], indent: int = 0) -> str:
    """Render entities as an indented dump, one node per line.

    Used for debug logging of the intermediate trees.
    """
    lines: list[str] = []
    _format_into(lines, entities, indent)
    return "\n".join(lines)


def _format_into(lines: list[str], entities: Iterable[Entity], level: int) -> None:
    for entity in entities:
        pad: str = "    " * level
        if entity.is_leaf:
            suffix: str = f": {entity.data!r}" if entity.data else ""
            lines.append(f"{pad}{entity.tag}{suffix}")
        else:
            lines.append(f"{pad}{entity.tag}")
            _format_into(lines, entity.children, level + 1)
