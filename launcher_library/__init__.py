"""Launcher library layer.

Resolves versioned release descriptors that may be bundled, cached on disk,
or available remotely, and applies them to launch profiles.

Public Interface:
    Modules:
    - versions: Descriptors, patch cache, version lists
    - patches: Patch files and launch profiles
    - models: Problem reporting
    - config: Configuration loading
    - storage: Path resolution
"""

from .errors import PatchParseError
from .errors import VersionError
from .errors import VersionIncomplete
from .models import ProblemSeverity
from .patches import LaunchProfile
from .versions import VersionDescriptor
from .versions import VersionSource

__all__ = [
    "LaunchProfile",
    "PatchParseError",
    "ProblemSeverity",
    "VersionDescriptor",
    "VersionError",
    "VersionIncomplete",
    "VersionSource",
]
