"""Command line entry point: print TODO findings as JSON.

Usage::

    todoscan src/ lib/main.ts
    cat main.ts | todoscan --stdin --language typescript
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from todoscan.comments import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from todoscan.core.results import BatchResult
from todoscan.todos.finder import TodoFinder
from todoscan.todos.reporter import TodoReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the todoscan command."""
    parser = argparse.ArgumentParser(
        prog="todoscan",
        description="Report TODO comments with their line and column as JSON.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to scan",
    )
    parser.add_argument(
        "-l",
        "--language",
        choices=SUPPORTED_LANGUAGES,
        help="Only scan this language (with --stdin: language of the input, "
        f"default {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read source from standard input and print a JSON array of findings",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.stdin:
        if args.paths:
            parser.error("--stdin cannot be combined with paths")
        result = TodoFinder(".").find_in_source(sys.stdin.read(), args.language or DEFAULT_LANGUAGE)
        if not result:
            print(result.message, file=sys.stderr)
            return 1
        print(TodoReporter.findings_to_json(result.data))
        return 0

    if not args.paths:
        parser.error("no paths given (use --stdin to read from standard input)")

    languages = [args.language] if args.language else None
    batch = BatchResult()
    for path in args.paths:
        batch.results.extend(TodoFinder(path, languages=languages).find_all())

    print(TodoReporter(batch).to_json())
    return 0 if batch.success else 1


if __name__ == "__main__":
    sys.exit(main())
