"""Extract TODO findings from an ordered sequence of comments.

Every comment is handled by exactly one strategy, tried in this order:

1. ``block_doc``: the comment is a block-doc comment; its gutter-free body
   is scanned for ``@todo`` and ``TODO:`` markers.
2. ``single_line``: the comment has no newline and its stripped text starts
   with ``TODO: ``.
3. ``plain``: every line of the raw body is scanned for ``TODO: ``.

The first strategy that matches supplies all findings for that comment.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from todoscan.todos.blockdoc import classify_block_doc
from todoscan.todos.models import TodoFinding, TodoLocation
from todoscan.todos.patterns import BLOCK_DOC_PATTERNS, DEFAULT_PATTERNS, LITERAL_TODO
from todoscan.todos.scanner import scan_comment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from todoscan.comments.models import Comment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyOutcome:
    """Whether a strategy handled a comment, and what it found."""

    matched: bool
    findings: tuple[TodoFinding, ...] = field(default_factory=tuple)


NOT_HANDLED = StrategyOutcome(matched=False)


@dataclass(frozen=True)
class Strategy:
    """A named way of handling one comment."""

    name: str
    apply: Callable[[Comment], StrategyOutcome]


def _block_doc(comment: Comment) -> StrategyOutcome:
    match = classify_block_doc(comment.text)
    if not match:
        return NOT_HANDLED
    stripped = comment.with_text(match.text)
    return StrategyOutcome(True, tuple(scan_comment(stripped, BLOCK_DOC_PATTERNS)))


def _single_line(comment: Comment) -> StrategyOutcome:
    # multi-line bodies must go through line scanning to keep line numbers exact
    if comment.is_multiline:
        return NOT_HANDLED
    text = comment.text.strip()
    if not LITERAL_TODO.matches(text):
        return NOT_HANDLED
    finding = TodoFinding(text=text, loc=TodoLocation(line=comment.line, col=comment.column + 1))
    return StrategyOutcome(True, (finding,))


def _plain(comment: Comment) -> StrategyOutcome:
    return StrategyOutcome(True, tuple(scan_comment(comment, DEFAULT_PATTERNS)))


STRATEGIES: tuple[Strategy, ...] = (
    Strategy("block_doc", _block_doc),
    Strategy("single_line", _single_line),
    Strategy("plain", _plain),
)


class TodoExtractor:
    """Run the extraction strategies over a sequence of comments.

    Parameters
    ----------
    strategies : tuple[Strategy, ...]
        Strategies in priority order. The last one must always match.

    Examples
    --------
    >>> from todoscan.comments import Comment
    >>> extractor = TodoExtractor()
    >>> extractor.extract([Comment(" TODO: Do something!", 1, 0, "line")])
    [TodoFinding(1:1, 'TODO: Do something!')]
    """

    def __init__(self, strategies: tuple[Strategy, ...] = STRATEGIES) -> None:
        self._strategies = strategies

    def handle(self, comment: Comment) -> tuple[str, StrategyOutcome]:
        """Return the name of the strategy that handled a comment, and its outcome."""
        for strategy in self._strategies:
            outcome = strategy.apply(comment)
            if outcome.matched:
                return strategy.name, outcome
        raise RuntimeError(f"No strategy handled comment at line {comment.line}")

    def classify(self, comment: Comment) -> str:
        """Return the name of the strategy that handles a comment."""
        return self.handle(comment)[0]

    def extract(self, comments: Iterable[Comment]) -> list[TodoFinding]:
        """Extract findings from comments, keeping comment and line order."""
        findings: list[TodoFinding] = []
        for comment in comments:
            name, outcome = self.handle(comment)
            if outcome.findings:
                logger.debug(
                    "%s comment at %d:%d: %d finding(s)",
                    name, comment.line, comment.column + 1, len(outcome.findings),
                )
            findings.extend(outcome.findings)
        return findings


_default_extractor = TodoExtractor()


def extract_todos(comments: Iterable[Comment]) -> list[TodoFinding]:
    """Extract TODO findings from comments using the default strategies.

    Parameters
    ----------
    comments : Iterable[Comment]
        Comments in source order.

    Returns
    -------
    list[TodoFinding]
        Findings in comment order, then line order within a comment.
    """
    return _default_extractor.extract(comments)
