"""Tests for inkling.serialization — node JSON round-trip."""

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from inkling import parse
from inkling.nodes import Emphasis, Strikethrough, Strong, Text
from inkling.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    def test_text(self) -> None:
        assert to_dict(Text("hi")) == {"_type": "Text", "content": "hi"}

    def test_container_with_children(self) -> None:
        node = Strong((Text("a"), Emphasis(())))
        assert to_dict(node) == {
            "_type": "Strong",
            "children": [
                {"_type": "Text", "content": "a"},
                {"_type": "Emphasis", "children": []},
            ],
        }


class TestFromDict:
    def test_rebuilds_tuples(self) -> None:
        node = from_dict({"_type": "Strikethrough", "children": [{"_type": "Text", "content": "x"}]})
        assert node == Strikethrough((Text("x"),))
        assert isinstance(node.children, tuple)

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"content": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type: 'Link'"):
            from_dict({"_type": "Link"})


class TestJson:
    def test_sample_round_trip(self) -> None:
        nodes = parse("The *quick*, ~red~ brown fox jumps over a _*lazy dog*_.")
        assert from_json(to_json(nodes)) == nodes

    def test_output_is_deterministic(self) -> None:
        nodes = parse("a *b* _c_")
        assert to_json(nodes) == to_json(parse("a *b* _c_"))
        assert json.loads(to_json(nodes))[1] == {
            "_type": "Strong",
            "children": [{"_type": "Text", "content": "b"}],
        }

    def test_indent(self) -> None:
        assert "\n" in to_json([Text("x")], indent=2)

    def test_empty(self) -> None:
        assert to_json([]) == "[]"
        assert from_json("[]") == []

    def test_rejects_non_array(self) -> None:
        with pytest.raises(ValueError, match="Expected a JSON array"):
            from_json('{"_type": "Text", "content": "x"}')

    @given(st.text(alphabet="*_~ ab.\n", max_size=120))
    @settings(max_examples=100)
    def test_any_parse_round_trips(self, source: str) -> None:
        nodes = parse(source)
        assert from_json(to_json(nodes)) == nodes
