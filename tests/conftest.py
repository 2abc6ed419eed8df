"""
Shared pytest fixtures for the launcher_library test suite.

Provides fixtures for:
- Isolated LAUNCHER_HOME storage
- Writing patch files with controlled modification times
- Counting patch parsers
"""

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from launcher_library.patches.parser import parse_version_file
from launcher_library.patches.version_file import VersionFile

SAMPLE_PATCH: dict[str, Any] = {
    "id": "1.12.2",
    "type": "release",
    "releaseTime": "2017-09-18T08:39:46+00:00",
    "mainClass": "net.minecraft.client.main.Main",
    "minecraftArguments": "--username ${auth_player_name} --version ${version_name}",
    "libraries": [{"name": "com.mojang:patchy:1.1"}],
}


@pytest.fixture
def mock_storage_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point LAUNCHER_HOME at a temporary directory."""
    home = tmp_path / "launcher-home"
    monkeypatch.setenv("LAUNCHER_HOME", str(home))
    for var in (
        "LAUNCHER_CONFIG_DIR",
        "LAUNCHER_VERSIONS_DIR",
        "LAUNCHER_PATCH_EXTENSION",
        "LAUNCHER_LOG_LEVEL",
        "LAUNCHER_CATALOG_PATH",
        "LAUNCHER_LEGACY_DOWNLOAD_HOST",
    ):
        monkeypatch.delenv(var, raising=False)
    return home.resolve()


@pytest.fixture
def versions_dir(tmp_path: Path) -> Path:
    path = tmp_path / "versions"
    path.mkdir()
    return path


@pytest.fixture
def write_patch(versions_dir: Path) -> Callable[..., Path]:
    """Write ``versions/<id>/<id>.json`` and pin its modification time.

    Returns a callable: write_patch(descriptor, data=None, mtime_ns=..., raw=None).
    """

    def _write(
        descriptor: str = "1.12.2",
        data: dict[str, Any] | None = None,
        mtime_ns: int = 1_600_000_000_000_000_000,
        raw: str | None = None,
    ) -> Path:
        path = versions_dir / descriptor / f"{descriptor}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is None:
            payload = dict(SAMPLE_PATCH if data is None else data)
            payload.setdefault("id", descriptor)
            raw = json.dumps(payload)
        path.write_text(raw, encoding="utf-8")
        os.utime(path, ns=(mtime_ns, mtime_ns))
        return path

    return _write


class CountingParser:
    """Wraps parse_version_file and counts calls."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, path: Path) -> VersionFile:
        self.calls += 1
        return parse_version_file(path)


@pytest.fixture
def counting_parser() -> CountingParser:
    return CountingParser()
