"""Observation time of a link file."""

from datetime import datetime, timezone
from pathlib import Path


def link_observed_at(link_path: Path) -> datetime:
    """Last-modified time of the link file itself, as an aware UTC datetime.

    The link is not followed: the time the OS touched the recent item is the
    observation time, not anything about its target.
    """
    stat = link_path.lstat()
    return datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)
