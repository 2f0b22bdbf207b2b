"""Get installed package version."""

import importlib.metadata

_VERSION_CACHE: str | None = None


def get_package_version() -> str:
    """Get recent-folders package version (cached)."""
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib.metadata.version("recent-folders")
        except importlib.metadata.PackageNotFoundError:
            _VERSION_CACHE = "unknown"
    return _VERSION_CACHE
