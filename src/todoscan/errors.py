"""Exception types raised by todoscan.

Extraction itself never raises. These exceptions come from the boundary:
parsing source text into comments, or asking for a language that has no
comment source.
"""
from __future__ import annotations


class TodoscanError(Exception):
    """Base class for all todoscan exceptions."""


class CommentSourceError(TodoscanError):
    """Source text could not be parsed into comments.

    Attributes
    ----------
    line : int | None
        1-based line of the first syntax error, if known.
    column : int | None
        0-based column of the first syntax error, if known.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class UnsupportedLanguageError(TodoscanError, ValueError):
    """No comment source is registered for the requested language."""

    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language: {language!r}")
        self.language = language
