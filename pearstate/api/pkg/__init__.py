"""package.json lookup."""

from .appname import appname
from .local_pkg import local_pkg, local_pkg_sync

__all__ = ["appname", "local_pkg", "local_pkg_sync"]
