"""Storage path derivation: temporary, explicit, by-dkey and by-random."""

from .derive_storage import derive_storage
from .discovery_key import discovery_key
from .InvalidAppStorageError import InvalidAppStorageError
from .RandomIdStore import RandomIdStore
from .storage_from_link import storage_from_link

__all__ = [
    "InvalidAppStorageError",
    "RandomIdStore",
    "derive_storage",
    "discovery_key",
    "storage_from_link",
]
