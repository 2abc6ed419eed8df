"""
Unit tests for the label catalog and URL helpers.
"""

from pathlib import Path

import pytest

from launcher_library.i18n import Catalog
from launcher_library.i18n import load_catalog
from launcher_library.urls import legacy_version_url


@pytest.mark.unit
class TestCatalog:
    """Test Catalog lookups."""

    def test_unknown_key_is_empty(self) -> None:
        assert Catalog().tr("release_type.experiment") == ""

    def test_placeholders_are_formatted(self) -> None:
        message = Catalog().tr("problem.patch_unreadable", cause="bad header")
        assert message == "The patch file couldn't be read:\nbad header"

    def test_bad_positional_placeholder_falls_back_to_default(self) -> None:
        """Test a translation with an unsupported placeholder uses the English text."""
        catalog = Catalog({"problem.patch_unreadable": "Unreadable {0}: {cause}"})

        message = catalog.tr("problem.patch_unreadable", cause="bad header")

        assert message == "The patch file couldn't be read:\nbad header"

    @pytest.mark.parametrize("label", ["Broken {cause", "Missing {reason}", "Stray } brace {cause}"])
    def test_malformed_translation_falls_back(self, label: str) -> None:
        catalog = Catalog({"problem.patch_unreadable": label})

        assert catalog.tr("problem.patch_unreadable", cause="x") == "The patch file couldn't be read:\nx"

    def test_load_catalog_overrides_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yaml"
        path.write_text('release_type.snapshot: "Instantané"\n', encoding="utf-8")

        catalog = load_catalog(path)

        assert catalog.release_type_label("snapshot") == "Instantané"
        assert catalog.release_type_label("release") == "Regular release"

    def test_load_catalog_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        catalog = load_catalog(tmp_path / "missing.yaml")
        assert catalog.release_type_label("old_beta") == "Beta"

    def test_load_catalog_non_mapping_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        assert load_catalog(path).release_type_label("old_alpha") == "Alpha"


@pytest.mark.unit
class TestLegacyUrl:
    """Test fallback URL derivation."""

    def test_default_host(self) -> None:
        assert legacy_version_url("b1.7.3") == "http://s3.amazonaws.com/Minecraft.Download/versions/b1.7.3/b1.7.3.json"

    def test_host_without_trailing_slash(self) -> None:
        assert legacy_version_url("1.0", "mirror.example/versions") == "http://mirror.example/versions/1.0/1.0.json"
