"""
Path resolution utilities for SetupTree.

Paths address nodes relative to a root or to another node using a restricted
JSON-path-like grammar: names separated by `.`, with an optional `[<int>]`
ordinal suffix on any segment. `[` and `]` are plain delimiters, so
`"BumpStops[2].xSpring"` and `"BumpStops.2.xSpring"` produce the same tokens.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from setuptree.core.node import SetupNode

PATH_DELIMITERS = re.compile(r"[.\[\]]")

INDEX_TOKEN = re.compile(r"[+-]?[0-9]+")


def tokenize_path(path: str) -> list[str]:
    """
    Split a path into its name and index tokens.

    Params:
        path: Path string (e.g., "Chassis.BumpStops[2].xSpring")

    Returns:
        Trimmed, non-empty tokens in order

    Examples:
        "Chassis.BumpStops[2].xSpring" -> ["Chassis", "BumpStops", "2", "xSpring"]
        " A . [1] " -> ["A", "1"]
    """
    if not path:
        return []
    tokens = (token.strip() for token in PATH_DELIMITERS.split(path))
    return [token for token in tokens if token]


@dataclass(frozen=True)
class PathSegment:
    """One matching step of a path: a child name and an optional ordinal."""

    name: str
    ordinal: int | None = None

    @property
    def has_ordinal(self) -> bool:
        """Check if this segment constrains the ordinal."""
        return self.ordinal is not None

    def matches(self, node: "SetupNode") -> bool:
        """
        Check whether a node satisfies this segment.

        Names compare case-sensitively; the ordinal is only compared when the
        segment carries one.
        """
        if node.context.name != self.name:
            return False
        if self.ordinal is None:
            return True
        return node.context.parent_ordinal == self.ordinal

    def __str__(self) -> str:
        if self.ordinal is None:
            return self.name
        return f"{self.ordinal}.{self.name}"


class PathResolver:
    """
    Token-stream helpers shared by node-level and registry-level path lookup.

    Matching consumes the token stream from the front. An index token is paired
    with the token that follows it, because the previous step consumed the name
    the index belongs to: `BumpStops[2].xSpring` resolves as child `BumpStops`,
    then the `xSpring` child with ordinal 2.
    """

    @staticmethod
    def is_index(token: str) -> bool:
        """Check if a token is a decimal integer ordinal."""
        return INDEX_TOKEN.fullmatch(token) is not None

    @staticmethod
    def match_segment(tokens: list[str]) -> tuple[PathSegment | None, int]:
        """
        Build the segment for the front of a token stream.

        Params:
            tokens: Remaining path tokens, at least one

        Returns:
            Tuple of (segment, number of tokens consumed). The segment is None
            when an index token has no name after it.
        """
        if PathResolver.is_index(tokens[0]):
            if len(tokens) < 2:
                return None, len(tokens)
            return PathSegment(name=tokens[1], ordinal=int(tokens[0])), 2
        return PathSegment(name=tokens[0]), 1

    @staticmethod
    def join(tokens: list[str]) -> str:
        """Re-join remaining tokens into a dotted path."""
        return ".".join(tokens)

    @staticmethod
    def is_blank(path: str | None) -> bool:
        """Check if a path is None, empty or whitespace only."""
        return path is None or not path.strip()
