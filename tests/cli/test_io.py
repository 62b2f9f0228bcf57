# doxlate:header:start
#
#   project      : Doxlate
#   file         : test_io.py
#   file_relpath : tests/cli/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Tests for reading declaration documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from doxlate.cli.io import declarations_from_payload, load_declarations
from doxlate.errors import DocumentError
from tests.cli.conftest import write_document

if TYPE_CHECKING:
    from pathlib import Path

    from doxlate.declaration import Declaration


def test_single_object_document() -> None:
    """An object describes one declaration with every field carried over."""
    payload: dict[str, Any] = {
        "name": "F",
        "parameters": ["a", "b"],
        "comment": "raw",
        "tree": [{"tag": "plainstd::string", "data": "text"}],
        "no_translate": True,
        "no_strip_params": True,
    }
    [decl] = declarations_from_payload(payload)
    assert decl.name == "F"
    assert decl.parameters == ("a", "b")
    assert decl.get_raw_comment() == "raw"
    assert decl.verbatim_requested()
    assert decl.strip_params_disabled()
    assert [entity.data for entity in decl.tree] == ["text"]


def test_tree_without_comment_counts_as_documented() -> None:
    """A tree without a raw comment still renders."""
    [decl] = declarations_from_payload({"tree": [{"tag": "plainstd::string", "data": "x"}]})
    assert decl.get_raw_comment() == ""


def test_empty_entry_is_undocumented() -> None:
    """No comment and no tree means no documentation."""
    [decl] = declarations_from_payload([{}])
    assert decl.get_raw_comment() is None
    assert decl.name == "declaration0"


def test_unknown_keys_are_warned(caplog: pytest.LogCaptureFixture) -> None:
    """Unrecognized keys are logged and ignored."""
    with caplog.at_level("WARNING"):
        declarations_from_payload({"name": "F", "colour": "red"}, source="doc.json")
    assert "unknown key 'colour' ignored" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        "text",
        [1],
        {"name": 3},
        {"parameters": ["a", 1]},
        {"tree": {}},
        {"tree": ["x"]},
        {"comment": 5},
        {"no_translate": "yes"},
    ],
)
def test_invalid_shapes_raise(payload: Any) -> None:
    """Each malformed shape raises `DocumentError`."""
    with pytest.raises(DocumentError):
        declarations_from_payload(payload)


def test_load_declarations_reports_json_errors(tmp_path: Path) -> None:
    """Invalid JSON is reported with the file name."""
    path: Path = tmp_path / "bad.json"
    path.write_text("[", encoding="utf-8")
    with pytest.raises(DocumentError, match="bad.json: invalid JSON"):
        load_declarations(path)


def test_load_declarations_reads_lists(tmp_path: Path) -> None:
    """A list document yields declarations in order."""
    path: Path = write_document(tmp_path, "two.json", [{"name": "A"}, {"name": "B"}])
    decls: list[Declaration] = load_declarations(path)
    assert [d.name for d in decls] == ["A", "B"]
