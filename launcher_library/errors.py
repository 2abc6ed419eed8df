"""Exceptions raised while resolving and applying versions."""

from __future__ import annotations

from pathlib import Path


class VersionError(Exception):
    """Base class for version resolution errors."""


class VersionIncomplete(VersionError):
    """The version cannot currently supply attributes to a profile.

    Raised by ``apply_to`` for a LOCAL version whose patch file is missing or
    unreadable, and for any REMOTE or CUSTOM version. Callers must abort the
    profile build.
    """

    def __init__(self, descriptor: str, message: str | None = None) -> None:
        self.descriptor = descriptor
        super().__init__(message or f"Version {descriptor} is incomplete")


class PatchParseError(VersionError):
    """A patch file exists but could not be read or validated."""

    def __init__(self, path: Path, cause: str) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to parse patch file {self.path}: {cause}")
