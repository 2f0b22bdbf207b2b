"""Folder collection and ranking."""

from .CollectResult import CollectResult
from .LinkSkip import LinkSkip
from .RankedEntry import RankedEntry
from .RecentFolder import RecentFolder
from .collect_recent_folders import collect_recent_folders
from .rank_folders import rank_folders

__all__ = [
    "CollectResult",
    "LinkSkip",
    "RankedEntry",
    "RecentFolder",
    "collect_recent_folders",
    "rank_folders",
]
