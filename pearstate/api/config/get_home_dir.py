"""Get pearstate home directory path or path under it."""

import os
from pathlib import Path

from ...constants import PEARSTATE_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get pearstate home directory path or path under it.

    Checks PEARSTATE_HOME environment variable first, defaults to ~/.pearstate if not set.

    Args:
        *parts: Optional path components to join (e.g., "app-storage", "by-random.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.pearstate")
        >>> get_home_dir("app-storage", "by-dkey")
        Path("/Users/user/.pearstate/app-storage/by-dkey")
    """
    home_env = os.environ.get("PEARSTATE_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / PEARSTATE_HOME_EXT if user_home else Path.home() / PEARSTATE_HOME_EXT

    return home / Path(*parts) if parts else home
