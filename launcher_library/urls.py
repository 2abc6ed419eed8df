"""URL constants for version downloads."""

# Legacy download location; kept as-is when the primary URL scheme changes.
LEGACY_DOWNLOAD_HOST = "s3.amazonaws.com/Minecraft.Download/versions/"


def legacy_version_url(descriptor: str, host: str = LEGACY_DOWNLOAD_HOST) -> str:
    """Derive the fallback patch URL for a version without an explicit one.

    Args:
        descriptor: Version identifier
        host: Host and path prefix, ending with a slash

    Returns:
        ``http://<host><descriptor>/<descriptor>.json``

    Example:
        >>> legacy_version_url("1.12.2")
        'http://s3.amazonaws.com/Minecraft.Download/versions/1.12.2/1.12.2.json'
    """
    if not host.endswith("/"):
        host = f"{host}/"
    return f"http://{host}{descriptor}/{descriptor}.json"
