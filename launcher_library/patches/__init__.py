"""Version patch files and the launch profile they are applied to.

Public Interface:
    - VersionFile: Parsed patch file
    - VersionFileModel: On-disk patch schema
    - parse_version_file: Parse a patch file from disk
    - LaunchProfile: Mutable profile receiving applied attributes
"""

from .parser import VersionFileModel
from .parser import parse_version_file
from .profile import LaunchProfile
from .version_file import VersionFile

__all__ = [
    "LaunchProfile",
    "VersionFile",
    "VersionFileModel",
    "parse_version_file",
]
