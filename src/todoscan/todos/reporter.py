"""JSON reporting for TODO findings."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from todoscan.core.results import BatchResult, Result
    from todoscan.todos.models import TodoFinding


class TodoReporter:
    """Serialize the results of a TODO scan.

    Parameters
    ----------
    batch : BatchResult
        Per-file results from TodoFinder.

    Examples
    --------
    >>> batch = TodoFinder("src/").find_all()
    >>> reporter = TodoReporter(batch)
    >>> print(reporter.to_json())
    """

    def __init__(self, batch: BatchResult) -> None:
        self._batch = batch

    def summary(self) -> dict[str, int]:
        """Generate summary counts.

        Returns
        -------
        dict
            Dictionary with:
            - total: Total number of findings
            - files_scanned: Number of files attempted
            - files_with_todos: Number of files with at least one finding
            - files_failed: Number of files that could not be read or parsed
        """
        succeeded = self._batch.succeeded
        return {
            "total": sum(len(r.data) for r in succeeded),
            "files_scanned": len(self._batch),
            "files_with_todos": sum(1 for r in succeeded if r.data),
            "files_failed": len(self._batch.failed),
        }

    def to_dict(self) -> dict[str, Any]:
        """Return the report as plain data.

        Files without findings are left out of ``files``; failures are
        listed under ``errors``.
        """
        return {
            "summary": self.summary(),
            "files": [
                {
                    "file": _label(result),
                    "todos": [finding.to_dict() for finding in result.data],
                }
                for result in self._batch.succeeded
                if result.data
            ],
            "errors": [
                {"file": _label(result), "message": result.message}
                for result in self._batch.failed
            ],
        }

    def to_json(self, indent: int = 2) -> str:
        """Generate a JSON report.

        Parameters
        ----------
        indent : int
            Indentation level for JSON output. Default: 2.
        """
        return json.dumps(self.to_dict(), indent=indent)

    @staticmethod
    def findings_to_json(findings: list[TodoFinding], indent: int = 2) -> str:
        """Serialize a bare list of findings as a JSON array."""
        return json.dumps([finding.to_dict() for finding in findings], indent=indent)


def _label(result: Result) -> str:
    return str(result.path) if result.path is not None else "<stdin>"
