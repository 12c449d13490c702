"""Get pearstate package version (cached)."""

import importlib.metadata

# Package version - cached for performance
_VERSION_CACHE = None


def get_package_version() -> str:
    """Get pearstate package version (cached)."""
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib.metadata.version("pearstate")
        except importlib.metadata.PackageNotFoundError:
            _VERSION_CACHE = "unknown"
    return _VERSION_CACHE
