"""Diagnostic problems reported by version descriptors and patch files.

Contract:
- Inputs: (severity, message) pairs added by resolvers and parsers
- Outputs: Ordered problem list and the maximum severity seen
- Side Effects: None (in-memory only)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ProblemSeverity(IntEnum):
    """Problem severity, totally ordered: NONE < WARNING < ERROR."""

    NONE = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class PatchProblem:
    """A single diagnostic message with its severity."""

    severity: ProblemSeverity
    message: str


class ProblemReport:
    """Ordered list of problems plus the maximum severity.

    The list and the severity are only changed together, through
    :meth:`add_problem` and :meth:`clear`.

    Example:
        >>> report = ProblemReport()
        >>> report.add_problem(ProblemSeverity.WARNING, "missing")
        >>> report.severity
        <ProblemSeverity.WARNING: 1>
    """

    def __init__(self) -> None:
        self._problems: list[PatchProblem] = []
        self._severity = ProblemSeverity.NONE

    @property
    def problems(self) -> list[PatchProblem]:
        """Copy of the recorded problems, oldest first."""
        return list(self._problems)

    @property
    def severity(self) -> ProblemSeverity:
        return self._severity

    @property
    def has_errors(self) -> bool:
        return self._severity >= ProblemSeverity.ERROR

    def add_problem(self, severity: ProblemSeverity, message: str) -> None:
        """Record a problem and raise the report severity if needed.

        Args:
            severity: Severity of the new problem
            message: Human-readable description
        """
        self._problems.append(PatchProblem(ProblemSeverity(severity), message))
        self._severity = max(self._severity, ProblemSeverity(severity))

    def clear(self) -> None:
        """Drop all problems and reset the severity to NONE."""
        self._problems.clear()
        self._severity = ProblemSeverity.NONE

    def __len__(self) -> int:
        return len(self._problems)

    def __repr__(self) -> str:
        return f"ProblemReport(severity={self._severity.name}, problems={len(self._problems)})"
