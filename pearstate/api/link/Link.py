from dataclasses import dataclass
from pathlib import Path
from urllib.request import url2pathname

from ...constants import FILE_PROTOCOL, PEAR_PROTOCOL


@dataclass(frozen=True)
class Link:
    """Strongly typed link value object.

    Holds the canonical ``href`` plus its parsed parts. Exactly one of
    ``is_pear`` / ``is_file`` is true.
    """

    href: str
    protocol: str
    host: str = ""
    key: bytes | None = None
    alias: str | None = None
    fork: int | None = None
    length: int | None = None
    pathname: str = ""
    query: str = ""
    fragment: str = ""

    def __str__(self):
        return self.href

    def __repr__(self):
        return f"Link('{self.href}')"

    @property
    def is_pear(self) -> bool:
        """Return True for key-addressed pear:// links."""
        return self.protocol == PEAR_PROTOCOL

    @property
    def is_file(self) -> bool:
        """Return True for path-addressed file:// links."""
        return self.protocol == FILE_PROTOCOL

    @property
    def path(self) -> Path:
        """Local filesystem path of a file:// link.

        Raises:
            ValueError: If the link is not a file link.
        """
        if not self.is_file:
            raise ValueError(f"Cannot extract local path from non-file link: {self.href}")
        return Path(url2pathname(self.pathname or "/"))
