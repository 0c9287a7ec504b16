"""Tests for diffable_html.serialization: tree JSON round-trip."""

import json

import pytest

from diffable_html.nodes import Comment, Element, Fragment, Text
from diffable_html.parser import parse_fragment
from diffable_html.renderers.diffable import DiffableRenderer
from diffable_html.serialization import from_dict, from_json, to_dict, to_json

_TREE = Fragment(
    children=(
        Comment(" header "),
        Element(
            "ul",
            attributes=(("id", "main"), ("class", "list"), ("hidden", "")),
            children=(Text("\n  "), Element("li", children=(Text("One"),))),
        ),
    )
)


class TestToDict:
    def test_type_discriminator(self) -> None:
        data = to_dict(_TREE)
        assert data["_type"] == "Fragment"
        assert data["children"][0] == {"_type": "Comment", "data": " header "}

    def test_attributes_as_pairs(self) -> None:
        element = to_dict(_TREE)["children"][1]
        assert element["attributes"] == [["id", "main"], ["class", "list"], ["hidden", ""]]


class TestRoundTrip:
    def test_dict_round_trip(self) -> None:
        assert from_dict(to_dict(_TREE)) == _TREE

    def test_json_round_trip(self) -> None:
        assert from_json(to_json(_TREE)) == _TREE

    def test_parsed_tree_round_trip(self) -> None:
        tree = parse_fragment('<div id="a"><!-- c --><p>x &amp; y</p><br></div>')
        assert from_json(to_json(tree)) == tree

    def test_restored_tree_renders_identically(self) -> None:
        renderer = DiffableRenderer()
        assert renderer.render(from_json(to_json(_TREE))) == renderer.render(_TREE)

    def test_deterministic_output(self) -> None:
        assert to_json(_TREE) == to_json(_TREE)
        assert json.loads(to_json(_TREE, indent=2)) == to_dict(_TREE)


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="_type"):
            from_dict({"value": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Doctype"})

    def test_json_must_be_fragment(self) -> None:
        with pytest.raises(ValueError, match="Expected Fragment"):
            from_json(json.dumps({"_type": "Text", "value": "x"}))
