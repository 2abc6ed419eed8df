"""Parsed representation of an on-disk version patch file."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from typing import TYPE_CHECKING

from ..models.problems import PatchProblem
from ..models.problems import ProblemReport
from ..models.problems import ProblemSeverity

if TYPE_CHECKING:
    from .profile import LaunchProfile


@dataclass
class VersionFile:
    """A version patch loaded from ``versions/<id>/<id>.<ext>``.

    Attributes:
        uid: Component identifier (e.g. "net.minecraft")
        version: Version identifier the patch describes
        name: Display name of the patch
        main_class: Launch main class
        applet_class: Legacy applet class
        minecraft_arguments: Game argument template
        type: Release type ("release", "snapshot", ...)
        release_time: Release timestamp, if known
        traits: Feature flags
        customizable: Whether the user may override this patch
    """

    uid: str
    version: str
    name: str = ""
    main_class: str | None = None
    applet_class: str | None = None
    minecraft_arguments: str | None = None
    type: str | None = None
    release_time: datetime | None = None
    traits: set[str] = field(default_factory=set)
    customizable: bool = False
    report: ProblemReport = field(default_factory=ProblemReport, repr=False, compare=False)

    def set_customizable(self, customizable: bool) -> None:
        self.customizable = customizable

    def add_problem(self, severity: ProblemSeverity, message: str) -> None:
        self.report.add_problem(severity, message)

    def get_problems(self) -> list[PatchProblem]:
        return self.report.problems

    def get_problem_severity(self) -> ProblemSeverity:
        return self.report.severity

    def apply_to(self, profile: LaunchProfile) -> None:
        """Write this patch's attributes onto a profile.

        Args:
            profile: Target profile; values already present are overridden
        """
        profile.apply_minecraft_version(self.version)
        profile.apply_main_class(self.main_class)
        profile.apply_applet_class(self.applet_class)
        profile.apply_minecraft_arguments(self.minecraft_arguments)
        profile.apply_minecraft_version_type(self.type)
        profile.apply_traits(self.traits)
        profile.apply_problem_severity(self.get_problem_severity())
