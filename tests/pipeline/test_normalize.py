# doxlate:header:start
#
#   project      : Doxlate
#   file         : test_normalize.py
#   file_relpath : tests/pipeline/test_normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Tests for the structural passes run before translation."""

from __future__ import annotations

import copy

from doxlate.pipeline.normalize import (
    collect_summary,
    filter_unsupported,
    shift_endlines_up_tree,
    strip_leading_endlines,
    strip_trailing_endlines,
)
from doxlate.registry.tags import get_tag_registry
from doxlate.tree.entity import Entity
from tests.conftest import endl, mark_pipeline, node, param, text


def _only_x(name: str) -> bool:
    return name == "x"


@mark_pipeline
def test_strip_leading_and_trailing_endlines() -> None:
    """Only markers at the respective end are removed."""
    entities: list[Entity] = [endl(), endl(), text("a"), endl(), text("b"), endl()]
    assert strip_leading_endlines(entities) == [text("a"), endl(), text("b"), endl()]
    assert strip_trailing_endlines(entities) == [endl(), endl(), text("a"), endl(), text("b")]
    assert strip_leading_endlines([endl()]) == []


@mark_pipeline
def test_collect_summary_pools_brief_and_description() -> None:
    """Children of all summary sources are pooled in order into a leading node."""
    entities: list[Entity] = [
        node("brief", text("a")),
        text("b"),
        node("partofdescription", text("c"), text("d")),
    ]
    assert collect_summary(entities) == [
        node("summary", text("a"), text("c"), text("d")),
        text("b"),
    ]


@mark_pipeline
def test_collect_summary_always_adds_summary() -> None:
    """The summary node is present even with nothing to pool."""
    assert collect_summary([text("b")]) == [node("summary"), text("b")]
    assert collect_summary([]) == [node("summary")]


@mark_pipeline
def test_filter_drops_unknown_commands_and_missing_params() -> None:
    """Unsupported commands and params for absent parameters are removed."""
    entities: list[Entity] = [
        node("summary", text("s")),
        node("details", text("dropped")),
        param("x", text("kept")),
        param("y", text("dropped")),
        node("param"),
        Entity.node("param[in]", [text("x")]),
        text("t"),
        endl(),
    ]
    kept: list[Entity] = filter_unsupported(entities, get_tag_registry(), _only_x)
    assert kept == [
        node("summary", text("s")),
        param("x", text("kept")),
        Entity.node("param[in]", [text("x")]),
        text("t"),
        endl(),
    ]


@mark_pipeline
def test_filter_is_idempotent() -> None:
    """Filtering a filtered list changes nothing."""
    entities: list[Entity] = [node("todo"), node("image"), param("y"), param("x"), text("t")]
    once: list[Entity] = filter_unsupported(entities, get_tag_registry(), _only_x)
    assert filter_unsupported(once, get_tag_registry(), _only_x) == once


@mark_pipeline
def test_filter_checks_the_parsed_tag_name() -> None:
    """``result`` is kept under its own entry although it renders as ``return``."""
    registry = get_tag_registry().with_overlay(removals=["return"])
    assert filter_unsupported([node("result", text("r"))], registry, _only_x) == [
        node("result", text("r"))
    ]


@mark_pipeline
def test_shift_collapses_trailing_markers_to_one() -> None:
    """Two trailing markers in a nested node surface as one at the parent level."""
    root: Entity = node("root", node("b", text("x"), endl(), endl()), text("next"))
    assert shift_endlines_up_tree(root) == node("root", node("b", text("x")), endl(), text("next"))


@mark_pipeline
def test_shift_climbs_one_level_at_a_time() -> None:
    """Markers bubble through every non-root ancestor."""
    root: Entity = node("root", node("par", text("T"), node("b", text("y"), endl())))
    assert shift_endlines_up_tree(root) == node(
        "root", node("par", text("T"), node("b", text("y"))), endl()
    )


@mark_pipeline
def test_shift_keeps_root_tail() -> None:
    """The root's own trailing markers are left for the converter."""
    root: Entity = node("root", text("a"), endl(), endl())
    assert shift_endlines_up_tree(root) == root


@mark_pipeline
def test_shift_is_idempotent_and_pure() -> None:
    """A second pass is a no-op and the input tree is not modified."""
    root: Entity = node(
        "root",
        node("summary", text("s"), endl()),
        param("x", text("p"), node("b", text("q"), endl(), endl()), endl()),
    )
    before: Entity = copy.deepcopy(root)
    once: Entity = shift_endlines_up_tree(root)
    assert shift_endlines_up_tree(once) == once
    assert root == before
