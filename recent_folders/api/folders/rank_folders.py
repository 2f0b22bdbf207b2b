"""Order recent folders by freshness."""

from collections.abc import Iterable

from .RankedEntry import RankedEntry
from .RecentFolder import RecentFolder


def rank_folders(folders: Iterable[RecentFolder], max_folders: int) -> list[RankedEntry]:
    """Rank folders newest first and keep the top ``max_folders``.

    Equal timestamps are ordered by ``first_seen`` (first observed wins).

    Args:
        folders: Folders from one collection pass
        max_folders: Capacity of the output directory

    Returns:
        RankedEntry list with ranks 1..n, n <= max_folders
    """
    ordered = sorted(folders, key=lambda f: (-f.last_seen_utc.timestamp(), f.first_seen))
    return [RankedEntry(rank=i + 1, folder=folder) for i, folder in enumerate(ordered[: max(max_folders, 0)])]
