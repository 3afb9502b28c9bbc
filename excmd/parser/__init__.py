"""
Parser module for command line syntax analysis.

This module provides recursive descent parsers for converting
a tokenized range prefix into AST nodes.
"""

from .base import ParserError
from .command_parser import CommandParser, parse_command
from .endpoint_parser import MAX_NUMBER, EndpointParser, parse_number
from .range_parser import RangeParser

__all__ = [
    "CommandParser",
    "EndpointParser",
    "MAX_NUMBER",
    "ParserError",
    "RangeParser",
    "parse_command",
    "parse_number",
]
