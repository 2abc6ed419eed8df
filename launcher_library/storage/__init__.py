"""Storage module for launcher_library.

Public Interface:
    - get_home_dir: Get LAUNCHER_HOME
    - get_config_dir: Get config directory
    - get_versions_dir: Get version patch cache directory
    - get_version_file_path: Build a patch file path for a descriptor
"""

from .paths import get_config_dir
from .paths import get_home_dir
from .paths import get_version_file_path
from .paths import get_versions_dir

__all__ = [
    "get_home_dir",
    "get_config_dir",
    "get_versions_dir",
    "get_version_file_path",
]
