"""Lazy, modification-time validated cache of a version's patch file.

Contract:
- Inputs: Descriptor id, versions directory, patch parser
- Outputs: Cached or freshly parsed VersionFile, or None
- Side Effects: Reads the patch file when its modification time changes;
  rewrites the caller's ProblemReport on every call
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..errors import PatchParseError
from ..i18n import Catalog
from ..i18n import default_catalog
from ..models.problems import ProblemReport
from ..models.problems import ProblemSeverity
from ..patches.parser import parse_version_file
from ..patches.version_file import VersionFile
from ..storage.paths import get_version_file_path

logger = logging.getLogger(__name__)

PatchParser = Callable[[Path], VersionFile]

PATCH_DISPLAY_NAME = "Minecraft"


class PatchCacheResolver:
    """Loads and caches ``versions/<id>/<id>.<ext>`` for one descriptor.

    The file is re-parsed only when its modification time differs from the
    one recorded at the last successful parse. A failed parse leaves the
    recorded time alone so the next call retries.

    Not thread-safe: callers sharing a resolver across threads must serialize
    calls to :meth:`resolve`.

    Example:
        >>> resolver = PatchCacheResolver("1.12.2", Path("versions"))
        >>> report = ProblemReport()
        >>> patch = resolver.resolve(report)
    """

    def __init__(
        self,
        descriptor: str,
        versions_dir: Path,
        parser: PatchParser = parse_version_file,
        extension: str = "json",
        catalog: Catalog | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            descriptor: Version identifier, used to build the cache path
            versions_dir: Root of the version cache
            parser: Callable turning a path into a VersionFile (raises PatchParseError)
            extension: Patch file extension without the dot
            catalog: Labels for problem messages
        """
        self.descriptor = descriptor
        self.path = get_version_file_path(versions_dir, descriptor, extension)
        self._parser = parser
        self._catalog = catalog or default_catalog
        self._cached_patch: VersionFile | None = None
        self._cached_timestamp: int | None = None

    @property
    def cached_patch(self) -> VersionFile | None:
        return self._cached_patch

    @property
    def cached_timestamp(self) -> int | None:
        """Modification time (ns) of the file behind the cached patch."""
        return self._cached_timestamp

    def invalidate(self) -> None:
        """Drop the cached patch and its timestamp."""
        if self._cached_patch is not None:
            logger.debug(f"Invalidated cached patch for {self.descriptor}")
        self._cached_patch = None
        self._cached_timestamp = None

    def resolve(self, report: ProblemReport) -> VersionFile | None:
        """Return the current patch for this descriptor, or None.

        ``report`` is cleared first and then explains a None result: a
        WARNING when the file is missing, an ERROR when it can't be parsed.

        Args:
            report: Problem report owned by the descriptor

        Returns:
            Cached or freshly parsed VersionFile, or None
        """
        report.clear()

        # One stat per call: the same mtime is used for the comparison and the stamp.
        try:
            mtime = self.path.stat().st_mtime_ns
        except FileNotFoundError:
            mtime = None
        except OSError as e:
            logger.warning(f"Could not stat patch file {self.path}: {e}")
            mtime = None

        if mtime is None:
            self.invalidate()
            report.add_problem(ProblemSeverity.WARNING, self._catalog.tr("problem.patch_missing"))
            return None

        if self._cached_patch is not None and mtime == self._cached_timestamp:
            logger.debug(f"Patch cache hit for {self.descriptor}")
            return self._cached_patch

        logger.debug(f"Parsing patch file {self.path} (mtime={mtime}, cached={self._cached_timestamp})")
        try:
            patch = self._parser(self.path)
        except PatchParseError as e:
            return self._parse_failed(report, e.cause)
        except OSError as e:
            return self._parse_failed(report, str(e))

        patch.name = PATCH_DISPLAY_NAME
        patch.set_customizable(True)
        self._cached_timestamp = mtime
        self._cached_patch = patch
        return patch

    def _parse_failed(self, report: ProblemReport, cause: str) -> None:
        logger.warning(f"Patch file {self.path} couldn't be read: {cause}")
        self._cached_patch = None
        report.add_problem(ProblemSeverity.ERROR, self._catalog.tr("problem.patch_unreadable", cause=cause))
        return None
