"""Home directory and path helpers."""

from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .normalize_path import normalize_path

__all__ = ["get_home_dir", "get_package_version", "normalize_path"]
