"""Locate and parse the nearest package.json."""

import asyncio
import json
import os
from pathlib import Path
from typing import Any

from ...constants import PACKAGE_FILE
from ...utils.get_logger import get_logger
from ..config.normalize_path import normalize_path

logger = get_logger("pkg")


def local_pkg_sync(dir: str | Path) -> dict[str, Any] | None:
    """Walk from ``dir`` to the filesystem root looking for package.json.

    Each directory is listed, so an unreadable directory raises rather than
    being skipped. A start directory that does not exist, or is a file,
    holds no descriptor and the walk continues with its parent.

    Args:
        dir: Directory to start from

    Returns:
        Parsed descriptor of the nearest package.json, or None if there is none.

    Raises:
        PermissionError: If a directory on the way up cannot be read.
        json.JSONDecodeError: If the package.json found is not valid JSON.
    """
    current = normalize_path(dir)
    while True:
        try:
            entries = os.listdir(current)
        except (FileNotFoundError, NotADirectoryError):
            entries = []
        if PACKAGE_FILE in entries:
            pkg_path = current / PACKAGE_FILE
            pkg = json.loads(pkg_path.read_text(encoding="utf-8"))
            logger.debug(f"Found {pkg_path}")
            return pkg
        if current.parent == current:
            return None
        current = current.parent


async def local_pkg(dir: str | Path) -> dict[str, Any] | None:
    """Async form of :func:`local_pkg_sync`; the walk runs off the event loop."""
    return await asyncio.to_thread(local_pkg_sync, dir)
