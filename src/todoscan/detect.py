"""Top-level entry points: source text in, TODO findings out."""
from __future__ import annotations

from typing import TYPE_CHECKING

from todoscan.comments import DEFAULT_LANGUAGE, get_comment_source
from todoscan.todos.extractor import extract_todos

if TYPE_CHECKING:
    from collections.abc import Iterable

    from todoscan.comments.models import Comment
    from todoscan.todos.models import TodoFinding


def detect_todos_from_source(source: str, language: str = DEFAULT_LANGUAGE) -> list[TodoFinding]:
    """Detect all TODO comments in a piece of source code.

    Parameters
    ----------
    source : str
        The source code to scan.
    language : str
        Language of the source. Defaults to ``"typescript"``.

    Returns
    -------
    list[TodoFinding]
        Findings in source order.

    Raises
    ------
    CommentSourceError
        If JavaScript/TypeScript source cannot be parsed.
    libcst.ParserSyntaxError
        If Python source cannot be parsed.
    UnsupportedLanguageError
        If ``language`` has no comment source.

    Examples
    --------
    >>> detect_todos_from_source("// TODO: Do something!")
    [TodoFinding(1:1, 'TODO: Do something!')]
    """
    comments = get_comment_source(language).comments(source)
    return extract_todos(comments)


def detect_todos_from_comments(comments: Iterable[Comment]) -> list[TodoFinding]:
    """Detect TODO comments in an already-parsed list of comments.

    Intended for callers that already have comments from their own parser.
    """
    return extract_todos(comments)
