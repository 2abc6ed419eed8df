"""
Tests for the launcher-versions command line.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from launcher_library.cli import cli


@pytest.fixture
def cli_env(mock_storage_env: Path, versions_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("LAUNCHER_VERSIONS_DIR", str(versions_dir))
    return versions_dir


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "manifest.json"
    path.write_text(
        json.dumps(
            {
                "versions": [
                    {"id": "1.12.2", "type": "release", "releaseTime": "2017-09-18T08:39:46+00:00"},
                    {"id": "17w43a", "type": "snapshot", "releaseTime": "2017-10-25T14:31:27+00:00"},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.mark.integration
class TestCli:
    """Test CLI commands."""

    def test_list_builtins(self, cli_env: Path) -> None:
        result = CliRunner().invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "b1.7.3" in result.output
        assert "builtin" in result.output

    def test_show_remote_version(self, cli_env: Path, manifest_path: Path) -> None:
        result = CliRunner().invoke(cli, ["--manifest", str(manifest_path), "show", "17w43a"])

        assert result.exit_code == 0
        assert "Source: remote" in result.output
        assert "Needs update: yes" in result.output
        assert "[WARNING]" in result.output

    def test_apply_local_version(self, cli_env: Path, manifest_path: Path, write_patch) -> None:
        write_patch("1.12.2")

        result = CliRunner().invoke(cli, ["--manifest", str(manifest_path), "apply", "1.12.2"])

        assert result.exit_code == 0
        assert "main_class: net.minecraft.client.main.Main" in result.output

    def test_apply_remote_version_fails(self, cli_env: Path, manifest_path: Path) -> None:
        result = CliRunner().invoke(cli, ["--manifest", str(manifest_path), "apply", "17w43a"])

        assert result.exit_code == 1
        assert "version files are missing" in result.output

    def test_unknown_version(self, cli_env: Path) -> None:
        result = CliRunner().invoke(cli, ["show", "9.9.9"])

        assert result.exit_code == 1
        assert "Unknown version" in result.output
