"""
Command Parser - entry point for parsing an ex-style command line.

A line is split into an optional range and the literal command text:
    command := range? REST

Parsing is total. A prefix that only looks like a range (a lone comma,
an unterminated /pattern, an oversized number) is kept as command text.
"""

import logging

from excmd.lexer import RangeLexer
from excmd.parser.base import BaseParser, ParserError
from excmd.parser.endpoint_parser import MAX_NUMBER
from excmd.parser.range_parser import RangeParser
from excmd.syntax_tree.nodes import Command, Range

logger = logging.getLogger(__name__)

__all__ = ["CommandParser", "ParserError", "parse_command"]


class CommandParser(BaseParser):
    """
    Recursive descent parser for ex-style command lines.

    Grammar:
        command         := range? rest
        range           := double_ended | past_to_present | single
        double_ended    := endpoint "," endpoint
        past_to_present := endpoint ","
        single          := endpoint
        endpoint        := fixed | moment | search
        fixed           := digit+
        moment          := "#" digit+
        search          := "/" [^/]* "/"
        rest            := any remaining characters
    """

    def __init__(self, source: str, max_number: int = MAX_NUMBER):
        super().__init__([])
        self.source = source
        self.max_number = max_number

    def parse(self) -> Command:
        """Parse the line into a Command. Never raises ParserError."""
        logger.debug("Parsing command line %r", self.source)
        self.tokens = RangeLexer(self.source).tokenize()
        self.pos = 0

        command = self._parse_command()
        logger.debug("Parsed %r as %r", self.source, command)
        return command

    def _parse_command(self) -> Command:
        """Parse: range? rest"""
        range_node = self._parse_optional_range()

        # Tokens are contiguous, so the current token starts the rest
        split = self._current_token().position
        return Command(
            range=range_node,
            command=self.source[split:],
            range_text=self.source[:split],
        )

    def _parse_optional_range(self) -> Range | None:
        parser = RangeParser(self.tokens, self.pos, self.max_number)
        try:
            range_node = parser.parse()
        except ParserError as e:
            logger.debug("No range in %r: %s", self.source, e)
            return None

        self.pos = parser.pos
        return range_node


def parse_command(line: str, max_number: int = MAX_NUMBER) -> Command:
    """
    Split a command line into its optional range and command text.

    Example:
        >>> parse_command("10,5d")
        Command(DoubledEnded(Fixed(10), Fixed(5)), 'd')
        >>> parse_command("d foo bar")
        Command(None, 'd foo bar')
    """
    return CommandParser(line, max_number=max_number).parse()
