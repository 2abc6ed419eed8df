"""
Unit tests for VersionSource parsing.
"""

import pytest

from launcher_library.versions.source import VersionSource


@pytest.mark.unit
class TestVersionSource:
    """Test VersionSource.parse."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("builtin", VersionSource.BUILTIN),
            ("Local", VersionSource.LOCAL),
            (" REMOTE ", VersionSource.REMOTE),
            ("custom", VersionSource.CUSTOM),
            ("torrent", VersionSource.CUSTOM),
            ("", VersionSource.CUSTOM),
            (None, VersionSource.CUSTOM),
        ],
    )
    def test_parse(self, value, expected: VersionSource) -> None:
        assert VersionSource.parse(value) is expected

    def test_parse_passes_members_through(self) -> None:
        assert VersionSource.parse(VersionSource.LOCAL) is VersionSource.LOCAL

    def test_closed_set(self) -> None:
        assert {s.value for s in VersionSource} == {"builtin", "local", "remote", "custom"}
