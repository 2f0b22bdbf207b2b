"""Get path to the recent-folders config file."""

from pathlib import Path

from ...constants import CONFIG_FILE_NAME
from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to config file based on RECENT_FOLDERS_HOME or ~/.recent_folders."""
    return get_home_dir(CONFIG_FILE_NAME)
