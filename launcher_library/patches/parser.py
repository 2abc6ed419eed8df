"""Patch file parsing.

Reads a JSON version patch and validates it into a :class:`VersionFile`.

Contract:
- Inputs: Path to a patch file
- Outputs: VersionFile (with schema warnings recorded as problems)
- Side Effects: Reads the file
- Errors: Every read, decode, or validation failure raises PatchParseError
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from pydantic import AliasChoices
from pydantic import Field
from pydantic import ValidationError

from ..errors import PatchParseError
from ..models.base import CamelCaseModel
from ..models.problems import ProblemSeverity
from .version_file import VersionFile

logger = logging.getLogger(__name__)

DEFAULT_UID = "net.minecraft"


class VersionFileModel(CamelCaseModel):
    """On-disk schema of a version patch file.

    Unknown fields (libraries, assets, downloads, ...) are ignored.
    """

    id: str = Field(min_length=1, description="Version identifier")
    uid: str = Field(default=DEFAULT_UID, description="Component identifier")
    name: str = Field(default="", description="Display name")
    main_class: str | None = Field(default=None, description="Launch main class")
    applet_class: str | None = Field(default=None, description="Legacy applet class")
    minecraft_arguments: str | None = Field(default=None, description="Game argument template")
    type: str | None = Field(default=None, description="Release type")
    release_time: datetime | None = Field(default=None, description="Release timestamp")
    traits: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("+traits", "traits"),
        description="Feature flags",
    )

    def to_version_file(self) -> VersionFile:
        return VersionFile(
            uid=self.uid,
            version=self.id,
            name=self.name,
            main_class=self.main_class,
            applet_class=self.applet_class,
            minecraft_arguments=self.minecraft_arguments,
            type=self.type,
            release_time=self.release_time,
            traits=set(self.traits),
        )


def parse_version_file(path: Path) -> VersionFile:
    """Parse a patch file into a VersionFile.

    Args:
        path: Patch file path

    Returns:
        Parsed VersionFile; missing optional launch data is reported as
        WARNING problems on it

    Raises:
        PatchParseError: If the file can't be read, isn't JSON, or fails validation
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PatchParseError(path, str(e)) from e

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise PatchParseError(path, f"Invalid JSON: {e}") from e

    try:
        model = VersionFileModel.model_validate(data)
    except ValidationError as e:
        raise PatchParseError(path, str(e)) from e

    version_file = model.to_version_file()

    if not model.main_class:
        version_file.add_problem(ProblemSeverity.WARNING, "The patch file doesn't specify a main class.")
    if not model.type:
        version_file.add_problem(ProblemSeverity.WARNING, "The patch file doesn't specify a release type.")

    logger.debug(f"Parsed patch file {path} (version={model.id}, problems={len(version_file.report)})")
    return version_file
