"""Line-by-line marker scanning inside a single comment."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todoscan.todos.models import TodoFinding, TodoLocation
from todoscan.todos.patterns import DEFAULT_PATTERNS, MarkerPattern

if TYPE_CHECKING:
    from collections.abc import Sequence

    from todoscan.comments.models import Comment

logger = logging.getLogger(__name__)


def scan_comment(
    comment: Comment,
    patterns: Sequence[MarkerPattern] = DEFAULT_PATTERNS,
) -> list[TodoFinding]:
    """Find every line of a comment that starts with a marker.

    Each line is stripped before matching, but its position is taken from
    the raw line index so blank padding and indentation never shift the
    reported line. The column is always the comment's own column.

    Parameters
    ----------
    comment : Comment
        Comment to scan. Its text may be a normalized block-doc body.
    patterns : Sequence[MarkerPattern]
        Patterns tried in order; the first match wins for a line.

    Returns
    -------
    list[TodoFinding]
        One finding per matching line, in line order.
    """
    col = comment.column + 1
    findings: list[TodoFinding] = []

    for offset, raw_line in enumerate(comment.text.split("\n")):
        line = raw_line.strip()
        pattern = next((p for p in patterns if p.matches(line)), None)
        if pattern is None:
            continue
        logger.debug("%s matched at %d:%d", pattern.name, comment.line + offset, col)
        findings.append(
            TodoFinding(text=line, loc=TodoLocation(line=comment.line + offset, col=col))
        )

    return findings
