"""Comment sources: turn source text into ordered Comment records.

Functions
---------
get_comment_source
    Return the comment source for a language name.

language_for_path
    Guess the language of a file from its extension.
"""
from __future__ import annotations

from pathlib import Path
from typing import Protocol

from todoscan.comments.models import Comment, CommentKind
from todoscan.comments.python import LibCSTCommentSource
from todoscan.comments.treesitter import TREE_SITTER_LANGUAGES, TreeSitterCommentSource
from todoscan.errors import UnsupportedLanguageError

DEFAULT_LANGUAGE = "typescript"

SUPPORTED_LANGUAGES: tuple[str, ...] = (*TREE_SITTER_LANGUAGES, "python")

EXTENSION_LANGUAGES: dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".py": "python",
    ".pyi": "python",
}


class CommentSource(Protocol):
    """Anything that turns source text into an ordered list of comments."""

    def comments(self, source: str) -> list[Comment]: ...


def get_comment_source(language: str = DEFAULT_LANGUAGE) -> CommentSource:
    """Return the comment source for a language.

    Parameters
    ----------
    language : str
        One of ``SUPPORTED_LANGUAGES``.

    Raises
    ------
    UnsupportedLanguageError
        If no source handles the language.
    """
    if language == "python":
        return LibCSTCommentSource()
    if language in TREE_SITTER_LANGUAGES:
        return TreeSitterCommentSource(language)
    raise UnsupportedLanguageError(language)


def language_for_path(path: Path) -> str | None:
    """Return the language for a file extension, or None if unsupported."""
    return EXTENSION_LANGUAGES.get(path.suffix.lower())


__all__ = [
    "Comment",
    "CommentKind",
    "CommentSource",
    "LibCSTCommentSource",
    "TreeSitterCommentSource",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "EXTENSION_LANGUAGES",
    "get_comment_source",
    "language_for_path",
]
