# doxlate:header:start
#
#   project      : Doxlate
#   file         : test_entity.py
#   file_relpath : tests/tree/test_entity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Tests for the entity tree model: construction, base commands and JSON mapping."""

from __future__ import annotations

import pytest

from doxlate.tree.entity import Entity, entities_from_list, format_tree, get_base_command
from tests.conftest import endl, node, parametrize, text


def test_leaf_is_derived_from_children() -> None:
    """Entities without children default to leaves; with children they do not."""
    assert Entity(tag="plainstd::string", data="x").is_leaf is True
    assert Entity(tag="b", children=[text("x")]).is_leaf is False


def test_node_stays_inner_without_children() -> None:
    """`Entity.node` builds inner nodes even when the child list is empty."""
    empty: Entity = Entity.node("b")
    assert empty.is_leaf is False
    assert empty.children == []


def test_leaf_with_children_is_rejected() -> None:
    """A leaf never has children."""
    with pytest.raises(ValueError, match="cannot have children"):
        Entity(tag="b", children=[text("x")], is_leaf=True)


def test_endline_marker() -> None:
    """The blank-line marker is a data-free leaf."""
    marker: Entity = endl()
    assert marker.is_endline
    assert marker.is_leaf
    assert marker.data == ""
    assert not text("x").is_endline


@parametrize(
    "tag, expected",
    [
        ("param", "param"),
        ("param[in]", "param"),
        ("param[in,out]", "param"),
        ("code{.py}", "code"),
        ("code", "code"),
        ("b", "b"),
        ("partofdescription", "partofdescription"),
        ("<b", "<b"),
    ],
)
def test_get_base_command(tag: str, expected: str) -> None:
    """Qualified ``param`` and ``code`` tags dispatch on their prefix."""
    assert get_base_command(tag) == expected
    assert Entity.leaf(tag).base_command == expected


def test_from_dict_builds_nested_tree() -> None:
    """Mappings without ``children`` become leaves, others inner nodes."""
    entity: Entity = Entity.from_dict(
        {
            "tag": "param",
            "children": [
                {"tag": "plainstd::string", "data": "x"},
                {"tag": "b", "children": [{"tag": "plainstd::string", "data": "bold"}]},
                {"tag": "c", "children": []},
            ],
        }
    )
    assert entity == node("param", text("x"), node("b", text("bold")), node("c"))
    assert entity.children[0].is_leaf
    assert not entity.children[2].is_leaf


def test_to_dict_omits_empty_fields() -> None:
    """Empty ``data`` is omitted; ``children`` appears on inner nodes only."""
    assert text("x").to_dict() == {"tag": "plainstd::string", "data": "x"}
    assert endl().to_dict() == {"tag": "plainstd::endl"}
    assert node("b").to_dict() == {"tag": "b", "children": []}


def test_dict_mapping_preserves_leaf_shape() -> None:
    """`to_dict` output reads back into an equal entity."""
    original: Entity = node("root", node("summary", text("a"), endl()), node("b"))
    assert Entity.from_dict(original.to_dict()) == original


@parametrize(
    "payload, message",
    [
        ({}, "non-empty string 'tag'"),
        ({"tag": ""}, "non-empty string 'tag'"),
        ({"tag": "b", "data": 3}, "non-string 'data'"),
        ({"tag": "b", "children": "x"}, "non-list 'children'"),
        ({"tag": "b", "children": [1]}, "non-object child"),
    ],
)
def test_from_dict_rejects_bad_shapes(payload: dict[str, object], message: str) -> None:
    """Malformed mappings raise `ValueError` naming the problem."""
    with pytest.raises(ValueError, match=message):
        Entity.from_dict(payload)


def test_entities_from_list_rejects_non_objects() -> None:
    """Every list item must be an entity object."""
    with pytest.raises(ValueError, match="Expected an entity object"):
        entities_from_list([{"tag": "b"}, "oops"])  # type: ignore[list-item]


def test_format_tree_indents_children() -> None:
    """The debug dump prints one node per line, children indented by four spaces."""
    dump: str = format_tree([node("root", node("b", text("bold")), endl())])
    assert dump.splitlines() == [
        "root",
        "    b",
        "        plainstd::string: 'bold'",
        "    plainstd::endl",
    ]
