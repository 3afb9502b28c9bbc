"""
AST Node definitions for the range/command parser.

This module defines all node types produced when parsing an ex-style
command line: the three endpoint kinds, the three range shapes, and the
resulting Command.
"""

from abc import ABC
from dataclasses import dataclass, field


class ASTNode(ABC):
    """Base class for all AST nodes."""

    position: int = 0  # Position in source string

    def __init__(self, position: int = 0):
        self.position = position


class Endpoint(ASTNode):
    """Base class for a single positional reference."""


class Range(ASTNode):
    """Base class for the range shapes."""


@dataclass
class Fixed(Endpoint):
    """Represents an absolute index (e.g., 10)."""

    index: int
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.position)

    def __repr__(self) -> str:
        return f"Fixed({self.index})"


@dataclass
class Moment(Endpoint):
    """Represents a relative marker (e.g., #5), resolved by the caller."""

    count: int
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.position)

    def __repr__(self) -> str:
        return f"Moment({self.count})"


@dataclass
class Search(Endpoint):
    """Represents a search pattern (e.g., /foo/)."""

    pattern: str
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.position)

    def __repr__(self) -> str:
        return f"Search({self.pattern!r})"


@dataclass
class Single(Range):
    """Represents a range of exactly one endpoint."""

    endpoint: Endpoint
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.position)

    def __repr__(self) -> str:
        return f"Single({self.endpoint})"


@dataclass
class DoubledEnded(Range):
    """Represents a range between two endpoints (e.g., 10,5)."""

    left: Endpoint
    right: Endpoint
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.position)

    def __repr__(self) -> str:
        return f"DoubledEnded({self.left}, {self.right})"


@dataclass
class PastToPresent(Range):
    """Represents a range from an endpoint up to the present (e.g., 5,)."""

    endpoint: Endpoint
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.position)

    def __repr__(self) -> str:
        return f"PastToPresent({self.endpoint})"


@dataclass
class Command(ASTNode):
    """
    Represents a parsed command line.

    Structure:
        [range] command

    `command` is the exact text left after the range, never trimmed.
    `range_text` is the exact text the range consumed, so that
    `range_text + command` always reproduces the original line.
    """

    range: Range | None = None
    command: str = ""
    range_text: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.position)

    @property
    def source(self) -> str:
        """The original line this command was parsed from."""
        return self.range_text + self.command

    @property
    def has_range(self) -> bool:
        return self.range is not None

    def words(self) -> list[str]:
        """Split the command text on whitespace."""
        return self.command.split()

    @property
    def keyword(self) -> str:
        """First word of the command text, or an empty string."""
        words = self.words()
        return words[0] if words else ""

    def __repr__(self) -> str:
        return f"Command({self.range}, {self.command!r})"
