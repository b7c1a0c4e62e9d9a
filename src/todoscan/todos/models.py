"""Finding records produced by the TODO extractor."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TodoLocation:
    """Position of a TODO finding.

    Attributes
    ----------
    line : int
        1-indexed source line of the matching comment line.
    col : int
        1-indexed column of the owning comment's opening delimiter.
    """

    line: int
    col: int


@dataclass(frozen=True)
class TodoFinding:
    """A single TODO marker found in a comment.

    Attributes
    ----------
    text : str
        The stripped comment line that matched, marker included.
    loc : TodoLocation
        Where the matching line is in the source.
    """

    text: str
    loc: TodoLocation

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form ``{"text", "loc": {"line", "col"}}``."""
        return {
            "text": self.text,
            "loc": {"line": self.loc.line, "col": self.loc.col},
        }

    def __repr__(self) -> str:
        return f"TodoFinding({self.loc.line}:{self.loc.col}, {self.text!r})"
