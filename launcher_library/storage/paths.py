"""Path resolution for launcher storage locations.

This module provides path resolution based on the LAUNCHER_HOME environment
variable, with a fixed directory structure within that root.

Contract:
- Inputs: Environment variables (LAUNCHER_HOME and per-directory overrides)
- Outputs: Resolved Path objects
- Side Effects: Creates directories if they don't exist
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get LAUNCHER_HOME from environment.

    Returns:
        Path to root directory (default: .launcher)
    """
    root = os.environ.get("LAUNCHER_HOME", ".launcher")
    return Path(root).resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($LAUNCHER_HOME/config)
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("LAUNCHER_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_versions_dir() -> Path:
    """Get the version patch cache directory.

    Patch files live at ``<versions>/<descriptor>/<descriptor>.<ext>``.

    Returns:
        Path to versions directory ($LAUNCHER_HOME/versions)

    Environment Variables:
        LAUNCHER_VERSIONS_DIR: Override versions directory location
        (falls back to $LAUNCHER_HOME/versions if not set)

    Example:
        >>> versions_dir = get_versions_dir()
        >>> assert versions_dir.name == "versions" or "LAUNCHER_VERSIONS_DIR" in os.environ
    """
    versions_dir: Path = get_home_dir() / "versions"

    env_override: str | None = os.environ.get("LAUNCHER_VERSIONS_DIR")
    if env_override is not None:
        versions_dir = Path(env_override).resolve()

    versions_dir.mkdir(parents=True, exist_ok=True)
    return versions_dir


def get_version_file_path(versions_dir: Path, descriptor: str, extension: str = "json") -> Path:
    """Build the cache file path for a version descriptor.

    Args:
        versions_dir: Root of the version cache
        descriptor: Version identifier (e.g. "1.12.2")
        extension: Patch file extension without the dot

    Returns:
        Path following the ``<descriptor>/<descriptor>.<ext>`` convention
    """
    return Path(versions_dir) / descriptor / f"{descriptor}.{extension}"
