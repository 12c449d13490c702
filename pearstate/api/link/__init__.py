"""Link classification and normalization.

Links come in two disjoint shapes: key-addressed ``pear://<key>`` links and
path-addressed ``file://`` links. Bare filesystem paths normalize to the
latter.
"""

from .derive_applink import derive_applink
from .InvalidLinkError import InvalidLinkError
from .Link import Link
from .normalize_link import normalize_link
from .parse_link import parse_link

__all__ = ["InvalidLinkError", "Link", "derive_applink", "normalize_link", "parse_link"]
