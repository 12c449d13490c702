"""Validate and decode the key token of a pear:// link."""

import string

from ...constants import ALIASES, HEX_KEY_LENGTH, KEY_BYTES, Z32_KEY_LENGTH
from ._z32 import z32_decode
from .InvalidLinkError import InvalidLinkError


def decode_key(token: str) -> tuple[bytes, str | None]:
    """Decode a link key token to raw key bytes.

    Accepts a registered alias, a 52 character z-base-32 id or a 64 character
    hex id.

    Args:
        token: Key part of the link host (without fork/length prefix)

    Returns:
        Tuple of (32 key bytes, alias name or None)

    Raises:
        InvalidLinkError: If the token is none of the accepted forms.
    """
    if token in ALIASES:
        return z32_decode(ALIASES[token]), token

    if len(token) == HEX_KEY_LENGTH and all(c in string.hexdigits for c in token):
        return bytes.fromhex(token), None

    if len(token) == Z32_KEY_LENGTH:
        try:
            key = z32_decode(token)
        except ValueError as e:
            raise InvalidLinkError(f"Invalid key {token!r} in link: {e}") from e
        if len(key) == KEY_BYTES:
            return key, None

    raise InvalidLinkError(f"Invalid key {token!r} in link")
