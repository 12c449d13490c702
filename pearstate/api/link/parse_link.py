"""Parse a canonical link string into a Link."""

import re
from urllib.parse import urlsplit

from ...constants import FILE_PROTOCOL, PEAR_PROTOCOL
from .decode_key import decode_key
from .InvalidLinkError import InvalidLinkError
from .Link import Link

_FORKED_HOST = re.compile(r"^(\d+)\.(\d+)\.(.+)$")


def parse_link(raw: str) -> Link:
    """Parse a ``pear://`` or ``file://`` link.

    Args:
        raw: Link with an explicit scheme.

    Returns:
        Link with its parts split out; ``href`` is ``raw`` unchanged.

    Raises:
        InvalidLinkError: On unsupported schemes, a missing key or an invalid key.
    """
    parts = urlsplit(raw)
    protocol = f"{parts.scheme.lower()}:"

    if protocol == PEAR_PROTOCOL:
        host = parts.netloc
        if not host:
            raise InvalidLinkError(f"Missing key in link: {raw}")
        fork = length = None
        match = _FORKED_HOST.match(host)
        token = host
        if match:
            fork, length, token = int(match.group(1)), int(match.group(2)), match.group(3)
        key, alias = decode_key(token)
        return Link(
            href=raw,
            protocol=protocol,
            host=host,
            key=key,
            alias=alias,
            fork=fork,
            length=length,
            pathname=parts.path,
            query=parts.query,
            fragment=parts.fragment,
        )

    if protocol == FILE_PROTOCOL:
        return Link(
            href=raw,
            protocol=protocol,
            host=parts.netloc,
            pathname=parts.path,
            query=parts.query,
            fragment=parts.fragment,
        )

    raise InvalidLinkError(f"Unsupported link protocol {protocol!r}: {raw}")
