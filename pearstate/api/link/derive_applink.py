"""Derive the application link and route from a link."""

import os
from pathlib import Path

from ..config.normalize_path import normalize_path
from .Link import Link


def derive_applink(link: Link, dir: str | Path, cwd: str | Path) -> tuple[str, str]:
    """Split a link into its identity root and in-app route.

    For ``pear://`` links the applink is scheme plus host and the route is the
    path. For ``file://`` links the applink is the project directory as a file
    URL and the route is whatever follows it in the link path. A file link
    that does not live under ``dir`` falls back to ``cwd`` with the root route.

    Args:
        link: Normalized link
        dir: Project directory
        cwd: Working directory

    Returns:
        Tuple of (applink, route)
    """
    if link.is_pear:
        return f"pear://{link.host}", link.pathname or "/"

    project = normalize_path(dir)
    target = normalize_path(link.path)
    if target == project:
        return project.as_uri(), ""
    try:
        suffix = target.relative_to(project)
    except ValueError:
        return normalize_path(cwd).as_uri(), "/"
    return project.as_uri(), "/" + str(suffix).replace(os.sep, "/")
