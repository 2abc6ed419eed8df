"""
Unit tests for storage path resolution.
"""

from pathlib import Path

import pytest

from launcher_library.storage import paths


@pytest.mark.unit
class TestPaths:
    """Test path resolution functions."""

    def test_get_home_dir_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test get_home_dir returns .launcher when env var not set."""
        monkeypatch.delenv("LAUNCHER_HOME", raising=False)
        assert paths.get_home_dir() == Path(".launcher").resolve()

    def test_get_home_dir_custom(self, mock_storage_env: Path) -> None:
        assert paths.get_home_dir() == mock_storage_env

    def test_get_versions_dir_creates_directory(self, mock_storage_env: Path) -> None:
        versions_dir = paths.get_versions_dir()
        assert versions_dir.is_dir()
        assert versions_dir == mock_storage_env / "versions"

    def test_get_versions_dir_override(
        self, mock_storage_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LAUNCHER_VERSIONS_DIR", str(tmp_path / "elsewhere"))
        assert paths.get_versions_dir() == (tmp_path / "elsewhere").resolve()

    def test_get_config_dir_creates_directory(self, mock_storage_env: Path) -> None:
        config_dir = paths.get_config_dir()
        assert config_dir.is_dir()
        assert config_dir.name == "config"

    def test_version_file_path(self, tmp_path: Path) -> None:
        assert paths.get_version_file_path(tmp_path, "1.12.2", "dat") == tmp_path / "1.12.2" / "1.12.2.dat"
