"""Application name from a package descriptor."""

from typing import Any


def appname(pkg: dict[str, Any] | None) -> str | None:
    """Return ``pkg["pear"]["name"]``, else ``pkg["name"]``, else None."""
    if not pkg:
        return None
    pear = pkg.get("pear")
    if isinstance(pear, dict) and pear.get("name"):
        return pear["name"]
    return pkg.get("name") or None
