"""Persisted mapping of project root -> random storage id."""

import json
import secrets
from contextlib import suppress
from pathlib import Path

from ...constants import APP_STORAGE_DIR, BY_RANDOM_INDEX
from ...utils.get_logger import get_logger
from ..config.get_home_dir import get_home_dir

logger = get_logger("storage")

# One store per index file, shared process-wide
_INSTANCES: dict[Path, "RandomIdStore"] = {}


class RandomIdStore:
    """Read-or-create-and-persist ids for ``by-random`` storage.

    The index is a flat JSON object ``{"<project root>": "<32 hex chars>"}``.
    It is loaded lazily on first use and cached. Writers re-read the file
    before adding an entry; concurrent writers are not locked against each
    other (last writer wins).
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._ids: dict[str, str] | None = None

    @classmethod
    def default(cls) -> "RandomIdStore":
        """Return the process-wide store under the pearstate home directory."""
        path = get_home_dir(APP_STORAGE_DIR, BY_RANDOM_INDEX)
        store = _INSTANCES.get(path)
        if store is None:
            store = _INSTANCES[path] = cls(path)
        return store

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in storage index {self.path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Storage index {self.path} must hold a JSON object")
        return {str(k): str(v) for k, v in raw.items()}

    def _write(self, ids: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(ids, fh, indent=4, sort_keys=True)
            temp_path.replace(self.path)
        except OSError:
            with suppress(OSError):
                temp_path.unlink()
            raise

    def get(self, root: str) -> str | None:
        """Return the id recorded for ``root`` without creating one."""
        if self._ids is None:
            self._ids = self._read()
        return self._ids.get(root)

    def get_or_create(self, root: str) -> str:
        """Return the id for ``root``, creating and persisting it if absent."""
        existing = self.get(root)
        if existing is not None:
            return existing

        ids = self._read()
        if root not in ids:
            ids[root] = secrets.token_hex(16)
            self._write(ids)
            logger.debug(f"Created random storage id for {root}")
        self._ids = ids
        return ids[root]
