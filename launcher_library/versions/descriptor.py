"""Version descriptor: one release that may be builtin, cached, or remote.

The descriptor classifies its own source, answers customizability and
staleness queries, and applies itself to a :class:`LaunchProfile`. For cached
(LOCAL) versions it delegates to a :class:`PatchCacheResolver` and to the
patch file it returns.

Contract:
- Inputs: Identity and metadata from builtin defaults or a manifest
- Outputs: Attributes written into a LaunchProfile; problem reports
- Side Effects: Reads the version's patch file (never for BUILTIN)
- Errors: VersionIncomplete from apply_to when attributes can't be supplied
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..errors import VersionIncomplete
from ..i18n import Catalog
from ..i18n import default_catalog
from ..models.problems import PatchProblem
from ..models.problems import ProblemReport
from ..models.problems import ProblemSeverity
from ..patches.parser import parse_version_file
from ..patches.profile import LaunchProfile
from ..patches.version_file import VersionFile
from ..storage.paths import get_versions_dir
from ..urls import LEGACY_DOWNLOAD_HOST
from ..urls import legacy_version_url
from .patch_cache import PatchCacheResolver
from .patch_cache import PatchParser
from .source import VersionSource

logger = logging.getLogger(__name__)

# "aplhaLaunch" is a historic misspelling still present in cached data.
LEGACY_LAUNCH_TRAITS = frozenset({"legacyLaunch", "aplhaLaunch"})

# All builtin versions are legacy and use the applet argument template.
LEGACY_ARGUMENTS = " ${auth_player_name} ${auth_session}"

COMPONENT_NAME = "Minecraft"
COMPONENT_UID = "net.minecraft"


class VersionDescriptor:
    """A single versioned release and the rules for applying it.

    Descriptors are created and ordered by the version list loader. They are
    not thread-safe: the cached patch is shared state, so concurrent queries
    on one descriptor must be serialized by the caller.

    Attributes:
        descriptor: Unique version identifier (e.g. "1.12.2")
        name: Display name
        release_type: "snapshot", "release", "old_alpha", "old_beta", or other
        release_time: Release timestamp
        traits: Feature flags
        source: Where the definition comes from
        order: Display/sort rank, set by the version list
        url: Explicit patch URL, if any
        main_class: Main class applied for BUILTIN versions
        applet_class: Applet class applied for BUILTIN versions
        upstream_update: Set externally when a LOCAL version has a newer upstream

    Example:
        >>> version = VersionDescriptor("1.2.5", source=VersionSource.BUILTIN)
        >>> version.is_customizable()
        False
    """

    def __init__(
        self,
        descriptor: str,
        *,
        source: VersionSource | str = VersionSource.CUSTOM,
        name: str | None = None,
        release_type: str = "",
        release_time: datetime | None = None,
        traits: Iterable[str] = (),
        order: int = 0,
        url: str | None = None,
        main_class: str | None = None,
        applet_class: str | None = None,
        upstream_update: bool = False,
        versions_dir: Path | None = None,
        patch_extension: str = "json",
        parser: PatchParser = parse_version_file,
        catalog: Catalog | None = None,
        legacy_download_host: str = LEGACY_DOWNLOAD_HOST,
    ) -> None:
        self.descriptor = descriptor
        self.name = name or descriptor
        self.release_type = release_type
        self.release_time = release_time
        self.traits = frozenset(traits)
        self.source = VersionSource.parse(source)
        self.order = order
        self.url = url
        self.main_class = main_class
        self.applet_class = applet_class
        self.upstream_update = upstream_update

        self._versions_dir = Path(versions_dir) if versions_dir is not None else None
        self._patch_extension = patch_extension
        self._parser = parser
        self._catalog = catalog or default_catalog
        self._legacy_download_host = legacy_download_host
        self._resolver: PatchCacheResolver | None = None
        self._report = ProblemReport()

    # Source classification

    def get_version_source(self) -> VersionSource:
        return self.source

    def is_custom(self) -> bool:
        """True unless the source is BUILTIN, LOCAL, or REMOTE."""
        return self.source not in (VersionSource.BUILTIN, VersionSource.LOCAL, VersionSource.REMOTE)

    def is_customizable(self) -> bool:
        """Whether the user may override this version.

        A locally cached file, or a remote file that can be acquired, can be
        customized. Builtins don't follow the patch format and anything else
        is undefined, so neither is customizable.
        """
        return self.source in (VersionSource.LOCAL, VersionSource.REMOTE)

    def has_update(self) -> bool:
        return self.source == VersionSource.REMOTE or (self.source == VersionSource.LOCAL and self.upstream_update)

    def needs_update(self) -> bool:
        """REMOTE versions always need refreshing; LOCAL ones only when flagged."""
        return self.source == VersionSource.REMOTE or self.has_update()

    def uses_legacy_launcher(self) -> bool:
        return not LEGACY_LAUNCH_TRAITS.isdisjoint(self.traits)

    # Metadata

    def type_label(self, catalog: Catalog | None = None) -> str:
        """Localized label for the release type; empty for unknown types."""
        return (catalog or self._catalog).release_type_label(self.release_type)

    def get_url(self) -> str:
        """Explicit patch URL, or the legacy fallback derived from the id."""
        if not self.url:
            return legacy_version_url(self.descriptor, self._legacy_download_host)
        return self.url

    def get_order(self) -> int:
        return self.order

    def set_order(self, order: int) -> None:
        self.order = order

    def get_name(self) -> str:
        return COMPONENT_NAME

    def get_id(self) -> str:
        return COMPONENT_UID

    def get_version(self) -> str:
        return self.descriptor

    def get_filename(self) -> str:
        return ""

    def get_release_date_time(self) -> datetime | None:
        return self.release_time

    def has_jar_mods(self) -> bool:
        return False

    def get_jar_mods(self) -> list:
        return []

    def is_minecraft_version(self) -> bool:
        return True

    # Patch file

    @property
    def resolver(self) -> PatchCacheResolver:
        """Patch cache resolver, created on first use."""
        if self._resolver is None:
            versions_dir = self._versions_dir if self._versions_dir is not None else get_versions_dir()
            self._resolver = PatchCacheResolver(
                self.descriptor,
                versions_dir,
                parser=self._parser,
                extension=self._patch_extension,
                catalog=self._catalog,
            )
        return self._resolver

    def get_version_file(self) -> VersionFile | None:
        """Resolve the cached patch file for this version.

        BUILTIN versions have no patch file and never touch the disk. For
        every other source the descriptor's own problems are replaced with
        the outcome of this resolution.

        Returns:
            The current VersionFile, or None if missing or unreadable
        """
        if self.source == VersionSource.BUILTIN:
            return None
        return self.resolver.resolve(self._report)

    def get_problems(self) -> list[PatchProblem]:
        """Problems from the patch file if one resolves, else the descriptor's own."""
        if self.source != VersionSource.BUILTIN:
            version_file = self.get_version_file()
            if version_file is not None:
                return version_file.get_problems()
        return self._report.problems

    def get_problem_severity(self) -> ProblemSeverity:
        """Severity from the patch file if one resolves, else the descriptor's own."""
        if self.source != VersionSource.BUILTIN:
            version_file = self.get_version_file()
            if version_file is not None:
                return version_file.get_problem_severity()
        return self._report.severity

    # Application

    def apply_to(self, profile: LaunchProfile) -> None:
        """Apply this version onto a profile.

        Args:
            profile: Target profile

        Raises:
            VersionIncomplete: If the version is LOCAL without a usable patch
                file, or is neither LOCAL nor BUILTIN
        """
        if self.source == VersionSource.LOCAL:
            self._apply_file_to(profile)
            return

        if self.source != VersionSource.BUILTIN:
            raise VersionIncomplete(
                self.descriptor,
                self._catalog.tr("error.version_missing_files", descriptor=self.descriptor),
            )

        logger.debug(f"Applying builtin version {self.descriptor}")
        profile.apply_minecraft_version(self.descriptor)
        profile.apply_main_class(self.main_class)
        profile.apply_applet_class(self.applet_class)
        profile.apply_minecraft_arguments(LEGACY_ARGUMENTS)
        profile.apply_minecraft_version_type(self.release_type)
        profile.apply_traits(self.traits)
        profile.apply_problem_severity(self._report.severity)

    def _apply_file_to(self, profile: LaunchProfile) -> None:
        version_file = self.get_version_file()
        if version_file is None:
            raise VersionIncomplete(
                self.descriptor,
                self._catalog.tr("error.version_incomplete", descriptor=self.descriptor),
            )
        logger.debug(f"Applying patch file {self.resolver.path} for {self.descriptor}")
        version_file.apply_to(profile)

    def __repr__(self) -> str:
        return f"VersionDescriptor({self.descriptor!r}, source={self.source.value}, order={self.order})"
