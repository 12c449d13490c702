"""Choose the storage directory for an application instance."""

import secrets
import tempfile
from pathlib import Path

from ...constants import TMP_STORAGE_PREFIX
from ..config.normalize_path import normalize_path
from ..link.Link import Link
from .InvalidAppStorageError import InvalidAppStorageError
from .RandomIdStore import RandomIdStore
from .storage_from_link import storage_from_link


def derive_storage(
    link: Link,
    project_dir: str | Path,
    cwd: str | Path,
    store: str | Path | None = None,
    tmp_store: bool = False,
    ids: RandomIdStore | None = None,
) -> str:
    """Derive the storage directory.

    Precedence: temporary storage, then an explicit ``store`` (relative paths
    resolve against ``cwd``), then the link-derived location.

    Raises:
        InvalidAppStorageError: If ``store`` is strictly inside ``project_dir``.
    """
    if tmp_store:
        return str(Path(tempfile.gettempdir()) / f"{TMP_STORAGE_PREFIX}{secrets.token_hex(16)}")

    if store:
        storage = normalize_path(store, base=cwd)
        project = normalize_path(project_dir)
        if storage != project and storage.is_relative_to(project):
            raise InvalidAppStorageError(
                f'Application Storage may not be inside the project directory. --store "{storage}" is invalid'
            )
        return str(storage)

    return storage_from_link(link, dir=project_dir, ids=ids)
