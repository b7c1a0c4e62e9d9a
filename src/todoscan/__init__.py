"""
todoscan - Find TODO comments in source code and report where they are.

Comments are read from the source by a parser (tree-sitter for JavaScript
and TypeScript, LibCST for Python), then each comment is classified as a
block-doc (``/** ... */``) or plain comment and scanned line by line for
``TODO:`` and ``@todo`` markers.

Example
-------
>>> from todoscan import detect_todos_from_source
>>> detect_todos_from_source("// TODO: Do something!")
[TodoFinding(1:1, 'TODO: Do something!')]
>>> [f.to_dict() for f in detect_todos_from_source("/** @todo Write proper tests */")]
[{'text': '@todo Write proper tests', 'loc': {'line': 1, 'col': 1}}]

Classes
-------
Comment
    A comment body with the line and column of its opening delimiter.

TodoFinding
    A single TODO marker with its text and location.

TodoExtractor
    Runs the extraction strategies over a sequence of comments.

TodoFinder
    Find TODO comments across files and directories.

TodoReporter
    Serialize findings to JSON.

Result, ErrorResult, BatchResult
    Outcomes of file-level operations, which never raise.
"""
from todoscan.comments import Comment, get_comment_source, language_for_path
from todoscan.core.results import BatchResult, ErrorResult, Result
from todoscan.detect import detect_todos_from_comments, detect_todos_from_source
from todoscan.errors import CommentSourceError, TodoscanError, UnsupportedLanguageError
from todoscan.todos import (
    TodoExtractor,
    TodoFinder,
    TodoFinding,
    TodoLocation,
    TodoReporter,
    extract_todos,
)

__version__ = "0.1.0"

__all__ = [
    "Comment",
    "TodoFinding",
    "TodoLocation",
    "TodoExtractor",
    "TodoFinder",
    "TodoReporter",
    "Result",
    "ErrorResult",
    "BatchResult",
    "TodoscanError",
    "CommentSourceError",
    "UnsupportedLanguageError",
    "detect_todos_from_source",
    "detect_todos_from_comments",
    "extract_todos",
    "get_comment_source",
    "language_for_path",
]
