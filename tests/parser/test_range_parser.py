"""
Tests for the range parser and its ordered alternatives.
"""

import pytest

from excmd.lexer import RangeLexer
from excmd.parser.base import ParserError
from excmd.parser.range_parser import RangeParser
from excmd.syntax_tree.nodes import (
    DoubledEnded,
    Fixed,
    Moment,
    PastToPresent,
    Search,
    Single,
)


def make_parser(source: str) -> RangeParser:
    return RangeParser(RangeLexer(source).tokenize())


class TestShapes:
    """Tests for each range shape."""

    def test_single(self):
        """One endpoint without a comma is Single."""
        parser = make_parser("5d")

        assert parser.parse() == Single(Fixed(5))
        assert parser.pos == 1

    def test_double_ended(self):
        """Two endpoints around a comma are DoubledEnded."""
        parser = make_parser("10,#5d")

        assert parser.parse() == DoubledEnded(Fixed(10), Moment(5))
        assert parser.pos == 3

    def test_past_to_present(self):
        """An endpoint and a bare comma are PastToPresent."""
        parser = make_parser("/bar/,d")

        assert parser.parse() == PastToPresent(Search("bar"))
        assert parser.pos == 2

    def test_past_to_present_at_end(self):
        """A trailing comma at the end of the line is PastToPresent."""
        assert make_parser("#5,").parse() == PastToPresent(Moment(5))

    def test_mixed_endpoints(self):
        """Any endpoint kinds can be combined."""
        assert make_parser("/a/,#3").parse() == DoubledEnded(Search("a"), Moment(3))

    def test_range_position(self):
        """Ranges start at their first endpoint."""
        assert make_parser("10,5").parse().position == 0


class TestBacktracking:
    """Tests for falling back between alternatives."""

    def test_invalid_second_endpoint_falls_back(self):
        """A comma followed by non-endpoint text is PastToPresent."""
        parser = make_parser("5,/abc")

        assert parser.parse() == PastToPresent(Fixed(5))
        assert parser.pos == 2

    def test_double_comma(self):
        """Only the first comma belongs to the range."""
        parser = make_parser("5,,d")

        assert parser.parse() == PastToPresent(Fixed(5))
        assert parser.pos == 2

    def test_overflowing_second_endpoint(self):
        """An oversized second number leaves the range open-ended."""
        parser = make_parser("1,99999999999999999999999")

        assert parser.parse() == PastToPresent(Fixed(1))

    def test_three_endpoints(self):
        """Only two endpoints are consumed."""
        parser = make_parser("1,2,3")

        assert parser.parse() == DoubledEnded(Fixed(1), Fixed(2))
        assert parser.pos == 3

    def test_shapes_are_distinct(self):
        """Single and PastToPresent of the same endpoint differ."""
        assert Single(Fixed(1)) != PastToPresent(Fixed(1))


class TestFailure:
    """Tests for text with no range."""

    @pytest.mark.parametrize("source", ["", "d", ",5", ",#5d", "#", "/foo", " 1"])
    def test_no_range(self, source):
        """Text without a leading endpoint raises ParserError."""
        parser = make_parser(source)

        with pytest.raises(ParserError, match="Expected range"):
            parser.parse()
        assert parser.pos == 0
