"""
excmd - ex-style range/command line parsing.

This package splits a line such as "10,5d" or "/foo/,/bar/d" into an
optional range of endpoints and the literal command text that follows.

Usage:
    from excmd import parse_command

    cmd = parse_command("#5,nick alice")
    cmd.range     # PastToPresent(Moment(5))
    cmd.command   # "nick alice"
"""

_EXPORTS = {
    "CommandParser": "excmd.parser.command_parser",
    "ParserError": "excmd.parser.base",
    "parse_command": "excmd.parser.command_parser",
    "parse_number": "excmd.parser.endpoint_parser",
    "MAX_NUMBER": "excmd.parser.endpoint_parser",
    "ASTTransformer": "excmd.syntax_tree.transformer",
    "Command": "excmd.syntax_tree.nodes",
    "Endpoint": "excmd.syntax_tree.nodes",
    "Fixed": "excmd.syntax_tree.nodes",
    "Moment": "excmd.syntax_tree.nodes",
    "Search": "excmd.syntax_tree.nodes",
    "Range": "excmd.syntax_tree.nodes",
    "Single": "excmd.syntax_tree.nodes",
    "DoubledEnded": "excmd.syntax_tree.nodes",
    "PastToPresent": "excmd.syntax_tree.nodes",
}


# Lazy imports keep "import excmd" cheap for callers that only need one name
def __getattr__(name: str):
    if name in _EXPORTS:
        import importlib

        return getattr(importlib.import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS)

__version__ = "0.1.0"
