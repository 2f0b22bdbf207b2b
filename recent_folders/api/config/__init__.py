"""Configuration for recent-folders."""

from .LogConfig import LogConfig
from .RecentFoldersConfig import RecentFoldersConfig
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir

__all__ = [
    "LogConfig",
    "RecentFoldersConfig",
    "get_config_path",
    "get_home_dir",
]
