"""TODO extraction from comments.

Classes
-------
TodoFinding
    A single TODO marker with its text and location.

TodoLocation
    Line and column of a finding.

TodoExtractor
    Runs the block-doc, single-line and plain strategies over comments.

TodoFinder
    Find TODO comments across files and directories.

TodoReporter
    Serialize findings to JSON.

Examples
--------
>>> from todoscan.todos import TodoFinder, TodoReporter
>>> batch = TodoFinder("src/").find_all()
>>> print(TodoReporter(batch).to_json())
"""
from todoscan.todos.blockdoc import BlockDocMatch, classify_block_doc
from todoscan.todos.extractor import TodoExtractor, extract_todos
from todoscan.todos.finder import TodoFinder
from todoscan.todos.models import TodoFinding, TodoLocation
from todoscan.todos.patterns import BLOCK_DOC_PATTERNS, DEFAULT_PATTERNS, MarkerPattern
from todoscan.todos.reporter import TodoReporter
from todoscan.todos.scanner import scan_comment

__all__ = [
    "TodoFinding",
    "TodoLocation",
    "TodoExtractor",
    "TodoFinder",
    "TodoReporter",
    "BlockDocMatch",
    "MarkerPattern",
    "BLOCK_DOC_PATTERNS",
    "DEFAULT_PATTERNS",
    "classify_block_doc",
    "extract_todos",
    "scan_comment",
]
