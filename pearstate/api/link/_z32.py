"""z-base-32 codec for hypercore ids."""

from ...constants import Z32_ALPHABET

_LOOKUP = {char: index for index, char in enumerate(Z32_ALPHABET)}


def z32_decode(token: str) -> bytes:
    """Decode a z-base-32 token; trailing pad bits are discarded.

    Raises:
        ValueError: If the token contains characters outside the alphabet.
    """
    buffer = 0
    bits = 0
    out = bytearray()
    for char in token:
        if char not in _LOOKUP:
            raise ValueError(f"Invalid z-base-32 character {char!r}")
        buffer = (buffer << 5) | _LOOKUP[char]
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
    return bytes(out)


def z32_encode(data: bytes) -> str:
    buffer = 0
    bits = 0
    chars = []
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            chars.append(Z32_ALPHABET[(buffer >> bits) & 0x1F])
    if bits:
        chars.append(Z32_ALPHABET[(buffer << (5 - bits)) & 0x1F])
    return "".join(chars)
