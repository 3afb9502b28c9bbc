"""
Syntax tree for parsed command lines.
"""

from .nodes import (
    ASTNode,
    Command,
    DoubledEnded,
    Endpoint,
    Fixed,
    Moment,
    PastToPresent,
    Range,
    Search,
    Single,
)
from .transformer import ASTTransformer

__all__ = [
    "ASTNode",
    "ASTTransformer",
    "Command",
    "DoubledEnded",
    "Endpoint",
    "Fixed",
    "Moment",
    "PastToPresent",
    "Range",
    "Search",
    "Single",
]
