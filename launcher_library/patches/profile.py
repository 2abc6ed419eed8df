"""Mutable launch profile that version patches write into.

Patches are applied in order; each ``apply_*`` call overrides the previous
value unless the new value is empty. Traits accumulate and the problem
severity only ever rises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models.problems import ProblemSeverity

logger = logging.getLogger(__name__)


class LaunchProfile:
    """Accumulated launch attributes for one instance."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Clear every accumulated attribute."""
        self.minecraft_version: str | None = None
        self.main_class: str | None = None
        self.applet_class: str | None = None
        self.minecraft_arguments: str | None = None
        self.version_type: str | None = None
        self.traits: set[str] = set()
        self.problem_severity = ProblemSeverity.NONE

    def apply_minecraft_version(self, version: str | None) -> None:
        if version:
            self.minecraft_version = version

    def apply_main_class(self, main_class: str | None) -> None:
        if main_class:
            self.main_class = main_class

    def apply_applet_class(self, applet_class: str | None) -> None:
        if applet_class:
            self.applet_class = applet_class

    def apply_minecraft_arguments(self, arguments: str | None) -> None:
        if arguments:
            self.minecraft_arguments = arguments

    def apply_minecraft_version_type(self, version_type: str | None) -> None:
        if version_type:
            self.version_type = version_type

    def apply_traits(self, traits: Iterable[str]) -> None:
        self.traits.update(traits)

    def apply_problem_severity(self, severity: ProblemSeverity) -> None:
        severity = ProblemSeverity(severity)
        if severity > self.problem_severity:
            logger.debug(f"Profile problem severity raised to {severity.name}")
            self.problem_severity = severity

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return {
            "minecraft_version": self.minecraft_version,
            "main_class": self.main_class,
            "applet_class": self.applet_class,
            "minecraft_arguments": self.minecraft_arguments,
            "version_type": self.version_type,
            "traits": sorted(self.traits),
            "problem_severity": self.problem_severity.name,
        }
