"""Discovery key calculation."""

import hashlib

_NAMESPACE = b"hypercore"


def discovery_key(key: bytes) -> str:
    """Return the hex discovery key for a 32 byte link key.

    Keyed BLAKE2b-256 over a fixed namespace, so the storage directory name
    never exposes the key itself.
    """
    return hashlib.blake2b(_NAMESPACE, key=key, digest_size=32).hexdigest()
