"""Normalize a raw link to its canonical absolute form."""

import re
from pathlib import Path

from ..config.normalize_path import normalize_path
from .Link import Link
from .parse_link import parse_link

# At least two scheme characters so Windows drive letters read as paths
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


def normalize_link(raw: str, cwd: str | Path) -> Link:
    """Classify ``raw`` and return it as a canonical Link.

    Key-addressed and file links are validated and kept verbatim. Anything
    without a scheme is a filesystem path: it is made absolute against
    ``cwd`` and encoded as a file URL.

    Raises:
        InvalidLinkError: If the link has an unsupported scheme or a bad key.
    """
    if _SCHEME.match(raw):
        return parse_link(raw)
    return parse_link(normalize_path(raw, base=cwd).as_uri())
