"""Block-doc comment detection and gutter stripping.

A block-doc comment is a ``/** ... */`` style comment. Its body (delimiters
already removed) starts with ``*`` and every continuation line carries the
same leading whitespace plus ``*`` gutter::

    /**
     * Summary line.
     *
     * @todo Something.
     */

Body seen by the classifier::

    "*\\n * Summary line.\\n *\\n * @todo Something.\\n "

The last line holds only the whitespace before the closing ``*/``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

SENTINEL = "*"

_GUTTER = re.compile(r"^\s*\*")
_BLANK = re.compile(r"^\s*$")


@dataclass(frozen=True)
class BlockDocMatch:
    """Outcome of block-doc classification.

    Attributes
    ----------
    matched : bool
        True if the comment is a block-doc comment.
    text : str | None
        The comment body with the sentinel and gutter removed, or None
        when ``matched`` is False.
    """

    matched: bool
    text: str | None = None

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = BlockDocMatch(matched=False)


def classify_block_doc(text: str) -> BlockDocMatch:
    """Decide whether a comment body is a block-doc comment.

    Parameters
    ----------
    text : str
        Comment body without delimiters.

    Returns
    -------
    BlockDocMatch
        Matched with the normalized body, or ``NO_MATCH``.

    Examples
    --------
    >>> classify_block_doc("* @todo Write tests ")
    BlockDocMatch(matched=True, text=' @todo Write tests ')
    >>> classify_block_doc(" plain block comment ")
    BlockDocMatch(matched=False, text=None)
    """
    if not text.startswith(SENTINEL):
        return NO_MATCH

    first, *rest = text.split("\n")

    if not rest:
        return _matched(text[len(SENTINEL):])

    if len(rest) == 1:
        # "/** Summary.\n */": only the closing line follows
        if _BLANK.match(rest[0]):
            return _matched(text[len(SENTINEL):])
        return NO_MATCH

    gutter_match = _GUTTER.match(rest[0])
    if gutter_match is None:
        return NO_MATCH
    gutter = gutter_match.group(0)

    *body, last = rest
    if not all(line.startswith(gutter) for line in body[1:]):
        return NO_MATCH
    # closing "*/" is not part of the body, so the last line keeps only the indent
    if last != gutter[:-1]:
        return NO_MATCH

    normalized = "\n".join([
        first[len(SENTINEL):],
        *(line[len(gutter):] for line in body),
        "",
    ])
    return _matched(normalized)


def _matched(text: str) -> BlockDocMatch:
    # "/***/" leaves nothing to scan; treat it as a plain comment
    if not text:
        return NO_MATCH
    return BlockDocMatch(matched=True, text=text)
