"""
Pytest configuration and shared fixtures for excmd tests.
"""

import pytest

from excmd.lexer import RangeLexer, Token


# Lines covering every range shape, plus lines with no range at all
SAMPLE_LINES = [
    "",
    "d",
    "d foo bar",
    "5d",
    "5,d",
    "10,5d",
    "#5,d",
    ",#5d",
    "/foo/d",
    "/bar/,d",
    "/foo/,/bar/d",
    "d b/ar/",
    "#3,/needle/ nick alice",
    "007,#0q",
    "/unterminated",
    "5,/unterminated",
    "  5d",
    "#",
    "#x",
    "1,2,3",
    "99999999999999999999999,1d",
    "//,//",
]


@pytest.fixture(params=SAMPLE_LINES)
def sample_line(request) -> str:
    """Each sample command line in turn."""
    return request.param


@pytest.fixture
def tokenize():
    """Tokenize a source string with a fresh lexer."""

    def _tokenize(source: str) -> list[Token]:
        return RangeLexer(source).tokenize()

    return _tokenize
