"""
Range Parser - combines one or two endpoints into a range.

Grammar:
    range           := double_ended | past_to_present | single
    double_ended    := endpoint COMMA endpoint
    past_to_present := endpoint COMMA
    single          := endpoint

The alternatives are tried in that order so the longest match wins:
two endpoints before a dangling comma, a dangling comma before a bare
endpoint.
"""

import logging

from excmd.lexer import Token, TokenType
from excmd.parser.base import BaseParser, ParserError
from excmd.parser.endpoint_parser import MAX_NUMBER, EndpointParser
from excmd.syntax_tree.nodes import (
    DoubledEnded,
    Endpoint,
    PastToPresent,
    Range,
    Single,
)

logger = logging.getLogger(__name__)


class RangeParser(BaseParser):
    """Parser for the optional range prefix of a command."""

    def __init__(
        self,
        tokens: list[Token],
        pos: int = 0,
        max_number: int = MAX_NUMBER,
    ):
        super().__init__(tokens, pos)
        self.max_number = max_number

    def parse(self) -> Range:
        """Parse a range, leaving pos unchanged on failure."""
        start = self.pos
        alternatives = (
            ("double_ended", self._parse_double_ended),
            ("past_to_present", self._parse_past_to_present),
            ("single", self._parse_single),
        )

        for name, alternative in alternatives:
            try:
                return alternative()
            except ParserError as e:
                logger.debug("Range alternative %s backtracked: %s", name, e)
                self.pos = start

        raise ParserError("Expected range", self._current_token())

    def _parse_endpoint(self) -> Endpoint:
        parser = EndpointParser(self.tokens, self.pos, self.max_number)
        endpoint = parser.parse()
        self.pos = parser.pos
        return endpoint

    def _parse_double_ended(self) -> DoubledEnded:
        """Parse endpoint,endpoint"""
        position = self._current_token().position
        left = self._parse_endpoint()
        self._expect(TokenType.COMMA)
        right = self._parse_endpoint()
        return DoubledEnded(left=left, right=right, position=position)

    def _parse_past_to_present(self) -> PastToPresent:
        """Parse endpoint, (whatever follows the comma is not consumed)"""
        position = self._current_token().position
        endpoint = self._parse_endpoint()
        self._expect(TokenType.COMMA)
        return PastToPresent(endpoint=endpoint, position=position)

    def _parse_single(self) -> Single:
        position = self._current_token().position
        return Single(endpoint=self._parse_endpoint(), position=position)
