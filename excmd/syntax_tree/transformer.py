"""
AST Transformer for converting parsed commands to other representations.

This module provides utilities for turning a parsed Command into plain
Python structures (for dispatchers and JSON output) and back into
canonical command-line text.
"""

from typing import Any

from excmd.syntax_tree.nodes import (
    ASTNode,
    Command,
    DoubledEnded,
    Fixed,
    Moment,
    PastToPresent,
    Search,
    Single,
)


class ASTTransformer:
    """
    Transforms AST nodes into alternative formats.

    Provides methods to convert AST to:
    - structured parameters (dicts with a "type" tag per node)
    - canonical source text
    """

    def transform_to_structured(self, command: Command) -> dict[str, Any]:
        """
        Transform a Command to structured parameters.

        Args:
            command: The Command to transform

        Returns:
            Dictionary with "range" (dict or None) and "command" keys
        """
        return {
            "range": self._node_to_python(command.range) if command.range else None,
            "command": command.command,
        }

    def to_source(self, node: ASTNode) -> str:
        """
        Render a node back to command-line text.

        The output is canonical rather than verbatim: numbers lose any
        leading zeros. Parsing the text of a Command gives an equal Command.

        Args:
            node: An endpoint, range or Command

        Returns:
            The text form of the node
        """
        if isinstance(node, Command):
            range_str = self.to_source(node.range) if node.range else ""
            return f"{range_str}{node.command}"
        elif isinstance(node, Fixed):
            return str(node.index)
        elif isinstance(node, Moment):
            return f"#{node.count}"
        elif isinstance(node, Search):
            return f"/{node.pattern}/"
        elif isinstance(node, Single):
            return self.to_source(node.endpoint)
        elif isinstance(node, DoubledEnded):
            return f"{self.to_source(node.left)},{self.to_source(node.right)}"
        elif isinstance(node, PastToPresent):
            return f"{self.to_source(node.endpoint)},"
        else:
            raise TypeError(f"Cannot render {type(node).__name__}")

    def _node_to_python(self, node: ASTNode) -> dict[str, Any]:
        """Convert a range or endpoint node to a dict."""
        if isinstance(node, Fixed):
            return {"type": "fixed", "index": node.index}
        elif isinstance(node, Moment):
            return {"type": "moment", "count": node.count}
        elif isinstance(node, Search):
            return {"type": "search", "pattern": node.pattern}
        elif isinstance(node, Single):
            return {
                "type": "single",
                "endpoint": self._node_to_python(node.endpoint),
            }
        elif isinstance(node, DoubledEnded):
            return {
                "type": "double_ended",
                "left": self._node_to_python(node.left),
                "right": self._node_to_python(node.right),
            }
        elif isinstance(node, PastToPresent):
            return {
                "type": "past_to_present",
                "endpoint": self._node_to_python(node.endpoint),
            }
        else:
            raise TypeError(f"Cannot transform {type(node).__name__}")
