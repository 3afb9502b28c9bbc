"""
Tests for the AST transformer.
"""

import json

import pytest

from excmd.parser.command_parser import parse_command
from excmd.syntax_tree.nodes import Fixed, Moment, PastToPresent, Search, Single
from excmd.syntax_tree.transformer import ASTTransformer


@pytest.fixture
def transformer() -> ASTTransformer:
    return ASTTransformer()


class TestStructured:
    """Tests for transform_to_structured."""

    def test_no_range(self, transformer):
        """A rangeless command has range None."""
        result = transformer.transform_to_structured(parse_command("q"))

        assert result == {"range": None, "command": "q"}

    def test_double_ended(self, transformer):
        """Both endpoints are tagged with their kind."""
        result = transformer.transform_to_structured(parse_command("10,#5d"))

        assert result == {
            "range": {
                "type": "double_ended",
                "left": {"type": "fixed", "index": 10},
                "right": {"type": "moment", "count": 5},
            },
            "command": "d",
        }

    def test_past_to_present_search(self, transformer):
        """Search endpoints carry their pattern."""
        result = transformer.transform_to_structured(parse_command("/bar/,d"))

        assert result["range"] == {
            "type": "past_to_present",
            "endpoint": {"type": "search", "pattern": "bar"},
        }

    def test_json_serializable(self, transformer, sample_line):
        """The structured form survives JSON encoding."""
        result = transformer.transform_to_structured(parse_command(sample_line))

        assert json.loads(json.dumps(result)) == result


class TestToSource:
    """Tests for rendering nodes back to text."""

    @pytest.mark.parametrize(
        "node, text",
        [
            (Fixed(3), "3"),
            (Moment(3), "#3"),
            (Search("a b"), "/a b/"),
            (Single(Search("")), "//"),
            (PastToPresent(Moment(1)), "#1,"),
        ],
    )
    def test_nodes(self, transformer, node, text):
        """Each node renders in its command-line form."""
        assert transformer.to_source(node) == text

    def test_leading_zeros_dropped(self, transformer):
        """Numbers render without leading zeros."""
        assert transformer.to_source(parse_command("007,#01q")) == "7,#1q"

    def test_canonical_text_reparses(self, transformer, sample_line):
        """Parsing the canonical text gives an equal command."""
        cmd = parse_command(sample_line)

        assert parse_command(transformer.to_source(cmd)) == cmd

    def test_unknown_node(self, transformer):
        """Objects that are not nodes cannot be rendered."""
        with pytest.raises(TypeError):
            transformer.to_source("5")  # type: ignore[arg-type]
