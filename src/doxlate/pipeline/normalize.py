# doxlate:header:start
#
#   project      : Doxlate
#   file         : normalize.py
#   file_relpath : src/doxlate/pipeline/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Structural passes applied to the entity list before translation.

Each pass takes entities and returns a new list (or tree); input entities are
never modified. The passes run in the order `CommentConverter` calls them:

1. `strip_leading_endlines`
2. `collect_summary`
3. `filter_unsupported`
4. `shift_endlines_up_tree` (on the synthetic root)
5. `strip_leading_endlines` / `strip_trailing_endlines` at root level
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from doxlate.config.logging import get_logger
from doxlate.constants import PARAM_TAG, SUMMARY_SOURCE_TAGS, SUMMARY_TAG
from doxlate.tree.entity import Entity

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from doxlate.config.logging import DoxlateLogger
    from doxlate.registry.tags import TagRegistry

logger: DoxlateLogger = get_logger(__name__)


def strip_leading_endlines(entities: Sequence[Entity]) -> list[Entity]:
    """Return ``entities`` without its leading blank-line markers."""
    start: int = 0
    while start < len(entities) and entities[start].is_endline:
        start += 1
    return list(entities[start:])


def strip_trailing_endlines(entities: Sequence[Entity]) -> list[Entity]:
    """Return ``entities`` without its trailing blank-line markers."""
    end: int = len(entities)
    while end > 0 and entities[end - 1].is_endline:
        end -= 1
    return list(entities[:end])


def collect_summary(entities: Sequence[Entity]) -> list[Entity]:
    """Pool ``brief`` and ``partofdescription`` contents into one summary node.

    The children of every top-level summary source are concatenated in order,
    the sources are removed, and a ``summary`` node holding the pool is put in
    front. The summary node is always added, even when the pool is empty.
    """
    pooled: list[Entity] = []
    rest: list[Entity] = []
    for entity in entities:
        if entity.tag in SUMMARY_SOURCE_TAGS:
            pooled.extend(entity.children)
        else:
            rest.append(entity)
    return [Entity.node(SUMMARY_TAG, pooled), *rest]


def filter_unsupported(
    entities: Sequence[Entity],
    registry: TagRegistry,
    param_exists: Callable[[str], bool],
) -> list[Entity]:
    """Drop top-level entities that cannot be translated.

    An entity is dropped when its base command has no registry entry, or when
    it is a ``param`` block that names no parameter or one the declaration
    does not have. Tags are checked as parsed, before any handler renames them.

    Args:
        entities (Sequence[Entity]): Top-level entities.
        registry (TagRegistry): Table used for the lookup.
        param_exists (Callable[[str], bool]): Parameter check of the declaration
            being documented.

    Returns:
        list[Entity]: The kept entities, in order. Filtering the result again
        returns an equal list.
    """
    kept: list[Entity] = []
    for entity in entities:
        if not registry.supports(entity.tag):
            logger.debug("Dropping unsupported command '%s'", entity.tag)
            continue
        if entity.base_command == PARAM_TAG:
            if not entity.children:
                logger.debug("Dropping '%s' without a parameter name", entity.tag)
                continue
            name: str = entity.children[0].data
            if not param_exists(name):
                logger.debug("Dropping '%s' for missing parameter '%s'", entity.tag, name)
                continue
        kept.append(entity)
    return kept


def shift_endlines_up_tree(root: Entity) -> Entity:
    """Move trailing blank-line markers out of nested nodes.

    Bottom-up, every non-root node loses the markers at the end of its
    children. When a child lost any, exactly one marker is inserted right
    after it in the parent, so runs of markers collapse to one at each level
    they climb. The root keeps its own trailing markers.

    Args:
        root (Entity): The synthetic root node.

    Returns:
        Entity: The normalized tree. Normalizing it again returns an equal tree.
    """
    shifted, _removed = _shift(root, is_root=True)
    return shifted


def _shift(entity: Entity, *, is_root: bool) -> tuple[Entity, int]:
    if entity.is_leaf:
        return entity, 0
    children: list[Entity] = []
    for child in entity.children:
        shifted, removed = _shift(child, is_root=False)
        children.append(shifted)
        if removed > 0:
            children.append(Entity.endline())
    if is_root:
        return replace(entity, children=children), 0
    kept: list[Entity] = strip_trailing_endlines(children)
    return replace(entity, children=kept), len(children) - len(kept)
