"""Where a version's definition comes from."""

from enum import Enum


class VersionSource(str, Enum):
    """Closed set of version source kinds.

    CUSTOM is the residual kind: anything that is not bundled, cached on disk,
    or available for download.
    """

    BUILTIN = "builtin"
    LOCAL = "local"
    REMOTE = "remote"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: "str | VersionSource | None") -> "VersionSource":
        """Map a manifest/config value to a source kind.

        Unrecognized values map to CUSTOM rather than raising.

        Example:
            >>> VersionSource.parse("Local")
            <VersionSource.LOCAL: 'local'>
            >>> VersionSource.parse("torrent")
            <VersionSource.CUSTOM: 'custom'>
        """
        if isinstance(value, VersionSource):
            return value
        key = (value or "").strip().lower()
        for member in (cls.BUILTIN, cls.LOCAL, cls.REMOTE):
            if member.value == key:
                return member
        return cls.CUSTOM
