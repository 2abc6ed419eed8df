"""Settings models for the launcher library.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from ..urls import LEGACY_DOWNLOAD_HOST


class LauncherSettings(BaseSettings):
    """Configuration for version resolution.

    Attributes:
        versions_dir: Root of the version patch cache (default: $LAUNCHER_HOME/versions)
        patch_extension: Patch file extension (default: json)
        legacy_download_host: Host/path prefix for fallback version URLs
        log_level: Logging level (default: info)
        catalog_path: Optional YAML translation catalog

    Example:
        >>> settings = LauncherSettings()
        >>> assert settings.patch_extension == "json"
    """

    model_config = SettingsConfigDict(
        env_prefix="LAUNCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    versions_dir: str | None = None
    patch_extension: str = "json"
    legacy_download_host: str = LEGACY_DOWNLOAD_HOST
    log_level: str = "info"
    catalog_path: str | None = None

    @field_validator("versions_dir", "catalog_path")
    @classmethod
    def expand_and_resolve_path(cls, v: str | None) -> str | None:
        """Expand ~ and resolve to absolute path.

        Args:
            v: Path string (may contain ~ or be relative)

        Returns:
            Absolute path as string, or None when unset
        """
        if v is None:
            return None
        return str(Path(v).expanduser().resolve())

    @field_validator("patch_extension")
    @classmethod
    def strip_leading_dot(cls, v: str) -> str:
        return v.lstrip(".")
