"""Link-derived storage path (by-dkey or by-random)."""

import os
from pathlib import Path

from ...constants import APP_STORAGE_DIR, BY_DKEY, BY_RANDOM
from ..config.get_home_dir import get_home_dir
from ..config.normalize_path import normalize_path
from ..link.Link import Link
from ..link.normalize_link import normalize_link
from .discovery_key import discovery_key
from .RandomIdStore import RandomIdStore


def storage_from_link(
    link: str | Link,
    dir: str | Path | None = None,
    ids: RandomIdStore | None = None,
) -> str:
    """Compute the storage directory implied by a link alone.

    Args:
        link: ``pear://`` link, ``file://`` link or filesystem path
        dir: Project root keying the random id for file links; defaults to the link path
        ids: Random id store; defaults to the process-wide store

    Returns:
        ``<home>/app-storage/by-dkey/<discovery key>`` for pear links,
        ``<home>/app-storage/by-random/<id>`` otherwise.
    """
    if isinstance(link, str):
        link = normalize_link(link, os.getcwd())

    if link.is_pear:
        return str(get_home_dir(APP_STORAGE_DIR, BY_DKEY, discovery_key(link.key)))

    root = normalize_path(dir) if dir is not None else normalize_path(link.path)
    ids = ids or RandomIdStore.default()
    return str(get_home_dir(APP_STORAGE_DIR, BY_RANDOM, ids.get_or_create(str(root))))
