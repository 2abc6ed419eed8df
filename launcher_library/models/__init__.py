"""Shared models for launcher_library."""

from .base import CamelCaseModel
from .problems import PatchProblem
from .problems import ProblemReport
from .problems import ProblemSeverity

__all__ = [
    "CamelCaseModel",
    "PatchProblem",
    "ProblemReport",
    "ProblemSeverity",
]
