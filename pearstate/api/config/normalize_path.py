"""Normalize a path for pearstate.

Expands user home directory (~), makes the path absolute against an optional
base and collapses ``..`` segments WITHOUT resolving symlinks, so a project
directory reached through a symlink keeps its own identity.
"""

import os
from pathlib import Path
from typing import overload


@overload
def normalize_path(path: str | Path, base: str | Path | None = None) -> Path: ...


@overload
def normalize_path(path: None, base: str | Path | None = None) -> None: ...


def normalize_path(path: str | Path | None, base: str | Path | None = None) -> Path | None:
    """Expand user and return absolute, collapsed path (no symlink resolution)."""
    if path is None:
        return None
    expanded = Path(path).expanduser()
    if not expanded.is_absolute() and base is not None:
        expanded = Path(base).expanduser() / expanded
    return Path(os.path.normpath(expanded.absolute()))
