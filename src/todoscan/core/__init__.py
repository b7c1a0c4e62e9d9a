"""Core result types shared by the file-level APIs."""
from todoscan.core.results import BatchResult, ErrorResult, Result

__all__ = [
    "Result",
    "ErrorResult",
    "BatchResult",
]
