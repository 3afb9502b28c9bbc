"""
Lexer module for scanning the range prefix of an ex-style command line.

Only the leading, range-shaped part of the input is tokenized. As soon as
a character cannot start a range token the rest of the line is emitted
verbatim as a single REST token, so command text is never split apart.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Token types for the range lexer."""

    # Endpoints
    NUMBER = auto()  # 10
    MOMENT = auto()  # #5
    PATTERN = auto()  # /foo/

    # Separators
    COMMA = auto()  # ,

    # Special
    REST = auto()  # unscanned remainder of the line
    EOF = auto()


@dataclass
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: str
    position: int  # starting position in the source string
    end: int  # position one past the last character

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


class RangeLexer:
    """
    Tokenizer for the range prefix of a command line.

    Handles:
    - Digit runs (NUMBER)
    - Moment markers, '#' followed by digits (MOMENT)
    - Delimited search patterns /.../ (PATTERN)
    - Commas
    - Everything else, which ends scanning (REST)
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.length = len(source)

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _peek_char(self, offset: int = 1) -> str | None:
        """Peek at character at given offset from current position."""
        peek_pos = self.pos + offset
        if peek_pos >= self.length:
            return None
        return self.source[peek_pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
        return char

    @staticmethod
    def _is_digit(char: str | None) -> bool:
        # str.isdigit() also accepts superscripts and other Unicode digits
        return char is not None and "0" <= char <= "9"

    def _read_digits(self) -> str:
        """Read a run of ASCII digits."""
        chars: list[str] = []
        while self._is_digit(self._current_char()):
            chars.append(self._advance())  # type: ignore
        return "".join(chars)

    def _read_number(self) -> Token:
        """Read an unsigned decimal literal."""
        start_pos = self.pos
        digits = self._read_digits()
        return Token(TokenType.NUMBER, digits, start_pos, self.pos)

    def _read_moment(self) -> Token:
        """Read a moment marker: '#' followed by digits."""
        start_pos = self.pos
        self._advance()  # skip '#'
        digits = self._read_digits()
        return Token(TokenType.MOMENT, digits, start_pos, self.pos)

    def _read_pattern(self) -> Token | None:
        """Read a /pattern/, or return None if it is not terminated."""
        start_pos = self.pos
        closing = self.source.find("/", start_pos + 1)
        if closing == -1:
            return None

        value = self.source[start_pos + 1:closing]
        self.pos = closing + 1
        return Token(TokenType.PATTERN, value, start_pos, self.pos)

    def _read_rest(self) -> Token:
        """Consume the remainder of the line as a single token."""
        start_pos = self.pos
        value = self.source[start_pos:]
        self.pos = self.length
        return Token(TokenType.REST, value, start_pos, self.pos)

    def _next_token(self) -> Token | None:
        """Scan one range token, or None when the range prefix is over."""
        char = self._current_char()

        if self._is_digit(char):
            return self._read_number()

        if char == "#" and self._is_digit(self._peek_char()):
            return self._read_moment()

        if char == "/":
            return self._read_pattern()

        if char == ",":
            start_pos = self.pos
            self._advance()
            return Token(TokenType.COMMA, char, start_pos, self.pos)

        return None

    def tokenize_iter(self) -> Iterator[Token]:
        """Tokenize as an iterator, ending with REST (if any) and EOF."""
        while self.pos < self.length:
            token = self._next_token()
            if token is None:
                yield self._read_rest()
                break
            yield token

        yield Token(TokenType.EOF, "", self.pos, self.pos)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source string."""
        return list(self.tokenize_iter())
