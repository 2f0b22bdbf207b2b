"""Get recent-folders home directory path or path under it."""

import os
from pathlib import Path

from ...constants import RECENT_FOLDERS_HOME_ENV, RECENT_FOLDERS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get recent-folders home directory path or path under it.

    Checks the RECENT_FOLDERS_HOME environment variable first, defaults to
    ~/.recent_folders if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.recent_folders")
        >>> get_home_dir("config.json")
        Path("/home/user/.recent_folders/config.json")
    """
    home_env = os.environ.get(RECENT_FOLDERS_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / RECENT_FOLDERS_HOME_EXT

    return home / Path(*parts) if parts else home
