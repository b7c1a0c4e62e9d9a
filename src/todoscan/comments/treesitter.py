"""Comment source for JavaScript and TypeScript, backed by tree-sitter."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tree_sitter_language_pack import get_parser

from todoscan.comments.models import Comment
from todoscan.errors import CommentSourceError

if TYPE_CHECKING:
    from collections.abc import Iterator

    import tree_sitter

logger = logging.getLogger(__name__)

# Grammar names as understood by tree-sitter-language-pack
TREE_SITTER_LANGUAGES: tuple[str, ...] = ("javascript", "typescript", "tsx")


class TreeSitterCommentSource:
    """Extract ``//`` and ``/* */`` comments from C-style source text.

    Parameters
    ----------
    language : str
        tree-sitter grammar name, one of ``TREE_SITTER_LANGUAGES``.

    Examples
    --------
    >>> source = TreeSitterCommentSource("typescript")
    >>> source.comments("let x = 1; // TODO: rename x")
    [Comment(text=' TODO: rename x', line=1, column=11, kind='line')]
    """

    def __init__(self, language: str) -> None:
        self.language = language

    def comments(self, source: str) -> list[Comment]:
        """Parse source text and return its comments in source order.

        Parameters
        ----------
        source : str
            Complete source text of one file.

        Returns
        -------
        list[Comment]
            Comments ordered by their position in the source.

        Raises
        ------
        CommentSourceError
            If the source contains syntax errors.
        """
        data = source.encode("utf-8")
        tree = get_parser(self.language).parse(data)
        root = tree.root_node

        if root.has_error:
            raise self._syntax_error(root, data)

        comments = [
            self._to_comment(node, data)
            for node in _walk(root)
            if node.type == "comment"
        ]
        logger.debug("Found %d comments in %s source", len(comments), self.language)
        return comments

    @staticmethod
    def _to_comment(node: tree_sitter.Node, data: bytes) -> Comment:
        raw = data[node.start_byte:node.end_byte].decode("utf-8")
        line = node.start_point[0] + 1
        column = _utf16_column(data, node.start_byte)

        if raw.startswith("//"):
            return Comment(text=raw[2:], line=line, column=column, kind="line")

        body = raw[2:]
        if body.endswith("*/"):
            body = body[:-2]
        return Comment(text=body, line=line, column=column, kind="block")

    def _syntax_error(self, root: tree_sitter.Node, data: bytes) -> CommentSourceError:
        for node in _walk(root):
            if node.is_error or node.is_missing:
                line = node.start_point[0] + 1
                column = _utf16_column(data, node.start_byte)
                return CommentSourceError(
                    f"Syntax error in {self.language} source at line {line}, column {column + 1}",
                    line=line,
                    column=column,
                )
        return CommentSourceError(f"Syntax error in {self.language} source")


def _walk(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Yield every node below root in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _utf16_column(data: bytes, offset: int) -> int:
    # tree-sitter columns count bytes; JS tooling counts UTF-16 code units
    line_start = data.rfind(b"\n", 0, offset) + 1
    return len(data[line_start:offset].decode("utf-8").encode("utf-16-le")) // 2
