"""
Tests for todoscan.todos.blockdoc module.

classify_block_doc() decides whether a comment body (delimiters removed) is
a block-doc comment and strips its gutter.

Coverage targets:
- Bodies that do not start with the ``*`` sentinel
- Degenerate single-line block-doc comments
- Two-line comments whose closing line is whitespace-only
- Gutter detection and stripping on longer comments
- Malformed gutters falling back to no match
"""
from __future__ import annotations

from todoscan.todos.blockdoc import NO_MATCH, BlockDocMatch, classify_block_doc


class TestNotBlockDoc:
    """Comments that are never block-doc comments."""

    def test_plain_block_comment(self):
        """A body without the leading ``*`` is not a block-doc."""
        assert classify_block_doc(" TODO: Do something else. ") == NO_MATCH

    def test_line_comment_body(self):
        assert classify_block_doc(" TODO: Do something!") == NO_MATCH

    def test_no_match_is_falsy(self):
        """NO_MATCH carries no text and is falsy."""
        assert not NO_MATCH
        assert NO_MATCH.text is None

    def test_empty_doc_body(self):
        """``/***/`` leaves nothing after the sentinel."""
        assert classify_block_doc("*") == NO_MATCH


class TestSingleLineBlockDoc:
    """Block-doc comments whose body has no newline."""

    def test_sentinel_removed(self):
        match = classify_block_doc("* @todo Write proper tests ")

        assert match
        assert match.text == " @todo Write proper tests "

    def test_result_is_blockdocmatch(self):
        match = classify_block_doc("* Summary ")

        assert isinstance(match, BlockDocMatch)
        assert match.matched is True


class TestTwoLineBlockDoc:
    """Block-doc comments with exactly one continuation line."""

    def test_whitespace_closing_line(self):
        """``/** Words.\\n */``: the closing line holds only indentation."""
        match = classify_block_doc("* Some words here.\n ")

        assert match
        assert match.text == " Some words here.\n "

    def test_empty_closing_line(self):
        match = classify_block_doc("* Some words here.\n")

        assert match
        assert match.text == " Some words here.\n"

    def test_content_on_second_line(self):
        assert classify_block_doc("* First\n more text ") == NO_MATCH

    def test_bare_gutter_on_second_line(self):
        """A lone ``*`` is not treated as an empty gutter line."""
        assert classify_block_doc("* First\n *") == NO_MATCH


class TestMultiLineBlockDoc:
    """Block-doc comments with a gutter."""

    def test_gutter_stripped(self):
        body = "*\n * Summary line.\n *\n * @todo Something.\n "

        match = classify_block_doc(body)

        assert match
        assert match.text == "\n Summary line.\n\n @todo Something.\n"

    def test_line_count_preserved(self):
        """Normalization must not shift line offsets."""
        body = "* \n * one\n * two\n * three\n "

        match = classify_block_doc(body)

        assert match.text.count("\n") == body.count("\n")

    def test_deeper_gutter(self):
        """Indented comments carry their indentation in the gutter."""
        body = "*\n     * The person's name.\n     *\n     * TODO: split\n     "

        match = classify_block_doc(body)

        assert match
        assert match.text == "\n The person's name.\n\n TODO: split\n"

    def test_second_line_without_gutter(self):
        assert classify_block_doc("*\n Summary\n * more\n ") == NO_MATCH

    def test_inconsistent_gutter(self):
        """Every middle line must repeat the second line's gutter exactly."""
        body = "*\n * one\n   * two\n "
        assert classify_block_doc(body) == NO_MATCH

    def test_middle_line_missing_gutter(self):
        body = "*\n * one\n two\n "
        assert classify_block_doc(body) == NO_MATCH

    def test_last_line_must_be_gutter_indent(self):
        """The closing line keeps only the gutter's whitespace."""
        assert classify_block_doc("*\n * one\n * two\n * ") == NO_MATCH
        assert classify_block_doc("*\n * one\n * two\n   ") == NO_MATCH

    def test_gutter_without_indent(self):
        body = "*\n* one\n* two\n"

        match = classify_block_doc(body)

        assert match
        assert match.text == "\n one\n two\n"
