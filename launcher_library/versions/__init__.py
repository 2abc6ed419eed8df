"""Version descriptors, their patch cache, and version list loading.

Public Interface:
    - VersionSource: Where a version's definition comes from
    - VersionDescriptor: One release, applicable to a LaunchProfile
    - PatchCacheResolver: Lazy mtime-validated patch file cache
    - VersionList: Ordered collection of descriptors
    - load_builtin_versions / load_version_manifest / build_version_list
"""

from .descriptor import LEGACY_ARGUMENTS
from .descriptor import LEGACY_LAUNCH_TRAITS
from .descriptor import VersionDescriptor
from .manifest import VersionList
from .manifest import build_version_list
from .manifest import load_builtin_versions
from .manifest import load_manifest_file
from .manifest import load_version_manifest
from .patch_cache import PatchCacheResolver
from .source import VersionSource

__all__ = [
    "LEGACY_ARGUMENTS",
    "LEGACY_LAUNCH_TRAITS",
    "PatchCacheResolver",
    "VersionDescriptor",
    "VersionList",
    "VersionSource",
    "build_version_list",
    "load_builtin_versions",
    "load_manifest_file",
    "load_version_manifest",
]
