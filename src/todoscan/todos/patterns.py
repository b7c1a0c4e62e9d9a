"""Marker patterns recognised at the start of a comment line.

All patterns are compiled once at import time. Each is matched against a
stripped comment line and is anchored at the start of that line.
"""
from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class MarkerPattern:
    """A compiled marker pattern.

    Attributes
    ----------
    name : str
        Short identifier, used in debug output.
    regex : re.Pattern[str]
        Compiled pattern anchored at the start of the line.
    trailing_space : bool
        True if the marker must be followed by whitespace.
    """

    name: str
    regex: re.Pattern[str]
    trailing_space: bool

    @classmethod
    def literal(cls, prefix: str) -> MarkerPattern:
        """Build a pattern matching a literal prefix at the start of a line."""
        return cls(
            name=f"literal:{prefix.strip()}",
            regex=re.compile("^" + re.escape(prefix)),
            trailing_space=prefix != prefix.rstrip(),
        )

    def matches(self, line: str) -> bool:
        return self.regex.match(line) is not None


# Plain comments: "TODO: " exactly, after stripping the line
LITERAL_TODO = MarkerPattern.literal("TODO: ")

# Block-doc comments: @todo directive or TODO: marker, each followed by whitespace
DOC_AT_TODO = MarkerPattern(name="doc:@todo", regex=re.compile(r"^\s*@todo\s"), trailing_space=True)
DOC_TODO = MarkerPattern(name="doc:TODO:", regex=re.compile(r"^\s*TODO:\s"), trailing_space=True)

DEFAULT_PATTERNS: tuple[MarkerPattern, ...] = (LITERAL_TODO,)
BLOCK_DOC_PATTERNS: tuple[MarkerPattern, ...] = (DOC_AT_TODO, DOC_TODO)
