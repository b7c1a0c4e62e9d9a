"""Comment source for Python, using LibCST position metadata."""
from __future__ import annotations

import logging

import libcst as cst
from libcst.metadata import MetadataWrapper, PositionProvider

from todoscan.comments.models import Comment

logger = logging.getLogger(__name__)


class CommentCollector(cst.CSTVisitor):
    """Visitor collecting every ``#`` comment with its position.

    Uses LibCST's PositionProvider so that comments in leading lines,
    trailing whitespace and inside brackets all report the column of
    their ``#``.
    """

    METADATA_DEPENDENCIES = (PositionProvider,)

    def __init__(self) -> None:
        self.comments: list[Comment] = []

    def visit_Comment(self, node: cst.Comment) -> None:
        pos = self.get_metadata(PositionProvider, node)
        self.comments.append(
            Comment(
                text=node.value[1:],
                line=pos.start.line,
                column=pos.start.column,
                kind="line",
            )
        )


class LibCSTCommentSource:
    """Extract ``#`` comments from Python source text.

    Syntax errors surface as ``libcst.ParserSyntaxError``.

    Examples
    --------
    >>> LibCSTCommentSource().comments("x = 1  # TODO: rename x")
    [Comment(text=' TODO: rename x', line=1, column=7, kind='line')]
    """

    language = "python"

    def comments(self, source: str) -> list[Comment]:
        """Parse source text and return its comments in source order."""
        wrapper = MetadataWrapper(cst.parse_module(source))
        collector = CommentCollector()
        wrapper.visit(collector)

        comments = sorted(collector.comments, key=lambda c: (c.line, c.column))
        logger.debug("Found %d comments in python source", len(comments))
        return comments
