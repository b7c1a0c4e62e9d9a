"""TODO finder for searching files and directory trees."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import libcst as cst

from todoscan.comments import get_comment_source, language_for_path
from todoscan.core.results import BatchResult, ErrorResult, Result
from todoscan.errors import CommentSourceError, UnsupportedLanguageError
from todoscan.todos.extractor import extract_todos

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Directory names never descended into
DEFAULT_EXCLUDES: frozenset[str] = frozenset({
    ".git",
    ".hg",
    "node_modules",
    "__pycache__",
    ".venv",
    "venv",
    "dist",
    "build",
})


class TodoFinder:
    """Find TODO comments in a file or across a directory tree.

    File-level operations never raise. Unreadable or unparsable files are
    reported as ErrorResult entries with the original exception attached.

    Parameters
    ----------
    root : str | Path
        A source file or a directory to search recursively.
    languages : Iterable[str] | None
        Only scan files of these languages. None scans every supported
        language.
    exclude : Iterable[str]
        Directory names to skip while walking ``root``.

    Examples
    --------
    >>> finder = TodoFinder("src/", languages=["typescript"])
    >>> batch = finder.find_all()
    >>> for result in batch.succeeded:
    ...     print(result.path, len(result.data))
    """

    def __init__(
        self,
        root: str | Path,
        languages: Iterable[str] | None = None,
        exclude: Iterable[str] = DEFAULT_EXCLUDES,
    ) -> None:
        self.root = Path(root)
        self.languages = frozenset(languages) if languages is not None else None
        self.exclude = frozenset(exclude)
        self._files: list[Path] | None = None

    @property
    def files(self) -> list[Path]:
        """
        Source files to scan, sorted by path.

        Lazily computed on first access.
        """
        if self._files is None:
            self._files = self._discover_files()
        return self._files

    def _discover_files(self) -> list[Path]:
        if self.root.is_file():
            return [self.root] if self._wants(self.root) else []
        if not self.root.is_dir():
            return []

        files = []
        for path in sorted(self.root.rglob("*")):
            relative_parts = path.relative_to(self.root).parts[:-1]
            if any(part in self.exclude for part in relative_parts):
                continue
            if path.is_file() and self._wants(path):
                files.append(path)
        return files

    def _wants(self, path: Path) -> bool:
        language = language_for_path(path)
        if language is None:
            return False
        return self.languages is None or language in self.languages

    def find_all(self) -> BatchResult:
        """Find TODO comments in every file under the root.

        Returns
        -------
        BatchResult
            One Result per file, in file order. A root that does not exist
            yields a single ErrorResult.
        """
        if not self.root.exists():
            logger.warning("Path does not exist: %s", self.root)
            return BatchResult([
                ErrorResult(
                    message=f"Path does not exist: {self.root}",
                    path=self.root,
                    operation="read",
                )
            ])

        batch = BatchResult([self.find_in_file(path) for path in self.files])
        logger.debug(
            "Scanned %d file(s), %d failed", len(batch), len(batch.failed)
        )
        return batch

    def find_in_file(self, file_path: Path, language: str | None = None) -> Result:
        """Find TODO comments in a single file.

        Parameters
        ----------
        file_path : Path
            Path to the file to scan.
        language : str | None
            Language of the file. Guessed from the extension when None.

        Returns
        -------
        Result
            On success ``data`` holds the list of TodoFinding objects.
        """
        file_path = Path(file_path)
        language = language or language_for_path(file_path)
        if language is None:
            return ErrorResult(
                message=f"Unsupported file type: {file_path}",
                path=file_path,
                operation="find_in_file",
            )

        try:
            source = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", file_path, e)
            return ErrorResult(
                message=f"Failed to read {file_path}: {e}",
                path=file_path,
                exception=e,
                operation="read",
            )

        return self.find_in_source(source, language, file_path)

    def find_in_source(self, source: str, language: str, file_path: Path | None = None) -> Result:
        """Find TODO comments in source text that did not come from disk.

        Parameters
        ----------
        source : str
            Source text to scan.
        language : str
            Language of the source.
        file_path : Path | None
            Path to report in the result, if any.

        Returns
        -------
        Result
            On success ``data`` holds the list of TodoFinding objects.
        """
        label = file_path if file_path is not None else "<source>"
        try:
            comments = get_comment_source(language).comments(source)
        except (CommentSourceError, cst.ParserSyntaxError, UnsupportedLanguageError) as e:
            logger.warning("Cannot parse %s: %s", label, e)
            return ErrorResult(
                message=f"Failed to parse {label}: {e}",
                path=file_path,
                exception=e,
                operation="parse",
            )

        findings = extract_todos(comments)
        return Result(
            success=True,
            message=f"Found {len(findings)} TODO(s) in {label}",
            path=file_path,
            data=findings,
        )
