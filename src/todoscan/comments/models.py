"""Comment records produced by comment sources."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

CommentKind = Literal["line", "block"]


@dataclass(frozen=True)
class Comment:
    """A single comment as reported by a comment source.

    Attributes
    ----------
    text : str
        The comment body without its delimiters (no ``//``, ``/*``, ``*/``
        or ``#``). May contain newlines.
    line : int
        1-indexed line of the opening delimiter.
    column : int
        0-indexed column of the opening delimiter.
    kind : CommentKind
        ``"line"`` for line comments, ``"block"`` for block comments.
    """

    text: str
    line: int
    column: int
    kind: CommentKind = "block"

    def with_text(self, text: str) -> Comment:
        """Return a copy of this comment with a different body."""
        return replace(self, text=text)

    @property
    def is_multiline(self) -> bool:
        """True if the comment body spans more than one line."""
        return "\n" in self.text
