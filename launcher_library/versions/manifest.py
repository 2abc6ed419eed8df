"""Version list loading.

Builds :class:`VersionDescriptor` objects from the bundled builtin list and
from version manifests, and keeps them ordered.

Contract:
- Inputs: Builtin YAML, manifest dicts/files, versions directory
- Outputs: VersionList of descriptors
- Side Effects: Checks for cached patch files when classifying manifest entries
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from collections.abc import Iterator
from datetime import UTC
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices
from pydantic import Field
from pydantic import ValidationError

from ..config.settings import LauncherSettings
from ..errors import VersionError
from ..i18n import Catalog
from ..models.base import CamelCaseModel
from ..storage.paths import get_version_file_path
from ..storage.paths import get_versions_dir
from .descriptor import VersionDescriptor
from .source import VersionSource

logger = logging.getLogger(__name__)

BUILTIN_VERSIONS_PATH = Path(__file__).with_name("builtin_versions.yaml")


class BuiltinVersionEntry(CamelCaseModel):
    """One bundled version definition."""

    id: str = Field(min_length=1)
    type: str = ""
    release_time: datetime | None = None
    main_class: str | None = None
    applet_class: str | None = None
    traits: list[str] = Field(default_factory=list, validation_alias=AliasChoices("+traits", "traits"))


class ManifestVersionEntry(CamelCaseModel):
    """One version listed in a manifest."""

    id: str = Field(min_length=1)
    type: str = ""
    release_time: datetime | None = None
    url: str | None = None


class VersionManifest(CamelCaseModel):
    """Manifest document: ``{"latest": {...}, "versions": [...]}``."""

    latest: dict[str, str] = Field(default_factory=dict)
    versions: list[ManifestVersionEntry] = Field(default_factory=list)


def _release_sort_value(version: VersionDescriptor) -> float:
    if version.release_time is None:
        return float("-inf")
    release_time = version.release_time
    if release_time.tzinfo is None:
        release_time = release_time.replace(tzinfo=UTC)
    return release_time.timestamp()


# Higher wins when two definitions share an id.
_SOURCE_PRECEDENCE = {
    VersionSource.LOCAL: 3,
    VersionSource.BUILTIN: 2,
    VersionSource.REMOTE: 1,
    VersionSource.CUSTOM: 0,
}


class VersionList:
    """Descriptors keyed by id, ordered newest first.

    When two definitions share an id, a cached (LOCAL) one beats a builtin,
    which beats a REMOTE one. A REMOTE definition newer than a LOCAL one is
    recorded as an upstream update on the LOCAL descriptor.
    """

    def __init__(self, versions: Iterable[VersionDescriptor] = ()) -> None:
        self._versions: dict[str, VersionDescriptor] = {}
        for version in versions:
            self.add(version)
        self.assign_order()

    def add(self, version: VersionDescriptor) -> None:
        existing = self._versions.get(version.descriptor)
        if existing is None:
            self._versions[version.descriptor] = version
            return

        if _SOURCE_PRECEDENCE[version.source] >= _SOURCE_PRECEDENCE[existing.source]:
            kept, dropped = version, existing
        else:
            kept, dropped = existing, version

        if (
            kept.source == VersionSource.LOCAL
            and dropped.source == VersionSource.REMOTE
            and _release_sort_value(dropped) > _release_sort_value(kept)
        ):
            logger.info(f"Upstream update available for {kept.descriptor}")
            kept.upstream_update = True

        if kept is version:
            logger.debug(f"Replacing {existing.source.value} definition of {version.descriptor}")
            self._versions[version.descriptor] = version
        else:
            logger.debug(
                f"Keeping {existing.source.value} definition of {version.descriptor} over {version.source.value}"
            )

    def assign_order(self) -> None:
        """Rank versions by release time, newest first (order 0)."""
        ranked = sorted(self._versions.values(), key=_release_sort_value, reverse=True)
        for order, version in enumerate(ranked):
            version.set_order(order)

    def get(self, descriptor: str) -> VersionDescriptor | None:
        return self._versions.get(descriptor)

    def sorted(self) -> list[VersionDescriptor]:
        return sorted(self._versions.values(), key=lambda v: (v.get_order(), v.descriptor))

    def __iter__(self) -> Iterator[VersionDescriptor]:
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self._versions)

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self._versions


def load_builtin_versions(path: Path | None = None, **descriptor_kwargs: Any) -> list[VersionDescriptor]:
    """Load the bundled builtin versions.

    Args:
        path: YAML file to read (default: the bundled builtin_versions.yaml)
        **descriptor_kwargs: Extra VersionDescriptor arguments (catalog, ...)

    Returns:
        BUILTIN descriptors in file order

    Raises:
        VersionError: If the file can't be read or doesn't match the schema
    """
    path = path or BUILTIN_VERSIONS_PATH
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise VersionError(f"Failed to load builtin versions from {path}: {e}") from e

    try:
        entries = [BuiltinVersionEntry.model_validate(item) for item in data.get("versions", [])]
    except (ValidationError, AttributeError) as e:
        raise VersionError(f"Invalid builtin versions in {path}: {e}") from e

    logger.debug(f"Loaded {len(entries)} builtin versions from {path}")
    return [
        VersionDescriptor(
            entry.id,
            source=VersionSource.BUILTIN,
            release_type=entry.type,
            release_time=entry.release_time,
            traits=entry.traits,
            main_class=entry.main_class,
            applet_class=entry.applet_class,
            **descriptor_kwargs,
        )
        for entry in entries
    ]


def load_version_manifest(
    data: dict,
    versions_dir: Path,
    patch_extension: str = "json",
    **descriptor_kwargs: Any,
) -> list[VersionDescriptor]:
    """Build descriptors from a manifest document.

    Entries whose patch file is already cached under ``versions_dir`` are
    LOCAL; the rest are REMOTE.

    Args:
        data: Parsed manifest
        versions_dir: Root of the version cache
        patch_extension: Patch file extension without the dot
        **descriptor_kwargs: Extra VersionDescriptor arguments (catalog, parser, ...)

    Returns:
        Descriptors in manifest order

    Raises:
        VersionError: If the manifest doesn't match the schema
    """
    try:
        manifest = VersionManifest.model_validate(data)
    except ValidationError as e:
        raise VersionError(f"Invalid version manifest: {e}") from e

    versions = []
    for entry in manifest.versions:
        cached = get_version_file_path(versions_dir, entry.id, patch_extension).exists()
        versions.append(
            VersionDescriptor(
                entry.id,
                source=VersionSource.LOCAL if cached else VersionSource.REMOTE,
                release_type=entry.type,
                release_time=entry.release_time,
                url=entry.url,
                versions_dir=versions_dir,
                patch_extension=patch_extension,
                **descriptor_kwargs,
            )
        )

    local_count = sum(1 for v in versions if v.source == VersionSource.LOCAL)
    logger.info(f"Loaded {len(versions)} versions from manifest ({local_count} cached locally)")
    return versions


def load_manifest_file(path: Path) -> dict:
    """Read a manifest JSON file.

    Raises:
        VersionError: If the file can't be read or isn't JSON
    """
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise VersionError(f"Failed to read version manifest {path}: {e}") from e


def build_version_list(
    settings: LauncherSettings,
    manifest: dict | None = None,
    catalog: Catalog | None = None,
) -> VersionList:
    """Combine builtin versions and an optional manifest using settings.

    Args:
        settings: Launcher settings (versions dir, extension, legacy host)
        manifest: Parsed manifest, if any
        catalog: Labels for messages

    Returns:
        Ordered VersionList
    """
    versions_dir = Path(settings.versions_dir) if settings.versions_dir else get_versions_dir()
    common = {
        "catalog": catalog,
        "legacy_download_host": settings.legacy_download_host,
    }
    versions = load_builtin_versions(
        versions_dir=versions_dir,
        patch_extension=settings.patch_extension,
        **common,
    )
    if manifest is not None:
        versions.extend(
            load_version_manifest(manifest, versions_dir, settings.patch_extension, **common)
        )
    return VersionList(versions)
