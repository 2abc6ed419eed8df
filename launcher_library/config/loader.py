"""Configuration loading for the launcher library.

This module handles loading launcher configuration from YAML files
and environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: LauncherSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import LauncherSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """# launcher version resolution configuration

# Patch file extension used for versions/<id>/<id>.<ext>
patch_extension: "json"
log_level: "info"

# Version cache root
# Default: $LAUNCHER_HOME/versions
# Can be overridden with LAUNCHER_VERSIONS_DIR environment variable
# versions_dir: "~/.launcher/versions"

# Optional YAML translation catalog for UI labels
# catalog_path: "~/.launcher/config/catalog.yaml"
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to launcher.yaml in config directory
    """
    return get_config_dir() / "launcher.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> LauncherSettings:
    """Load launcher configuration from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with LAUNCHER_ (e.g., LAUNCHER_PATCH_EXTENSION).

    Args:
        config_path: Optional config file path (default: launcher.yaml in config dir)

    Returns:
        Validated launcher settings
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    if not isinstance(yaml_settings, dict):
        logger.warning(f"Ignoring non-mapping config in {config_path}")
        yaml_settings = {}

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"LAUNCHER_{str(key).upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = LauncherSettings(**filtered_yaml)

    logger.debug(
        f"Launcher configuration loaded: versions_dir={settings.versions_dir}, "
        f"patch_extension={settings.patch_extension}, log_level={settings.log_level}"
    )

    return settings
