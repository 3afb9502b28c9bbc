"""
Endpoint Parser - the leaf rule of the range grammar.

    endpoint := fixed | moment | search
    fixed    := NUMBER
    moment   := MOMENT
    search   := PATTERN
"""

import logging

from excmd.lexer import Token, TokenType
from excmd.parser.base import BaseParser, ParserError
from excmd.syntax_tree.nodes import Endpoint, Fixed, Moment, Search

logger = logging.getLogger(__name__)

# Largest value a 64-bit unsigned index can hold
MAX_NUMBER = 2**64 - 1


def parse_number(text: str, max_number: int = MAX_NUMBER) -> int:
    """
    Convert a run of ASCII digits to an int.

    Args:
        text: The digits to convert (leading zeros allowed)
        max_number: Largest accepted value

    Returns:
        The numeric value

    Raises:
        ParserError: If text is empty, contains a non-digit, or the value
            exceeds max_number
    """
    if not text or not all("0" <= char <= "9" for char in text):
        raise ParserError(f"Expected digits, got {text!r}")

    # Compare lengths first so huge runs never reach int()
    significant = text.lstrip("0") or "0"
    if len(significant) > len(str(max_number)):
        raise ParserError(f"Number {text} exceeds {max_number}")

    value = int(significant)
    if value > max_number:
        raise ParserError(f"Number {text} exceeds {max_number}")
    return value


class EndpointParser(BaseParser):
    """
    Parser for a single endpoint.

    Alternatives are tried Fixed -> Moment -> Search. Their leading
    tokens are disjoint, so at most one of them can match.
    """

    def __init__(
        self,
        tokens: list[Token],
        pos: int = 0,
        max_number: int = MAX_NUMBER,
    ):
        super().__init__(tokens, pos)
        self.max_number = max_number

    def parse(self) -> Endpoint:
        """Parse one endpoint, leaving pos unchanged on failure."""
        start = self.pos

        for alternative in (self._parse_fixed, self._parse_moment, self._parse_search):
            try:
                return alternative()
            except ParserError:
                self.pos = start

        raise ParserError("Expected endpoint", self._current_token())

    def _to_number(self, token: Token) -> int:
        try:
            return parse_number(token.value, self.max_number)
        except ParserError as e:
            logger.debug("Rejected numeric endpoint: %s", e)
            raise ParserError(str(e), token) from e

    def _parse_fixed(self) -> Fixed:
        """Parse an absolute index: 10"""
        token = self._expect(TokenType.NUMBER)
        return Fixed(index=self._to_number(token), position=token.position)

    def _parse_moment(self) -> Moment:
        """Parse a relative moment: #5"""
        token = self._expect(TokenType.MOMENT)
        return Moment(count=self._to_number(token), position=token.position)

    def _parse_search(self) -> Search:
        """Parse a search pattern: /foo/"""
        token = self._expect(TokenType.PATTERN)
        return Search(pattern=token.value, position=token.position)
