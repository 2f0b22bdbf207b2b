"""File name of a ranked shortcut."""

from ..folders.RankedEntry import RankedEntry
from .friendly_folder_name import friendly_folder_name
from .sanitize_file_name import sanitize_file_name


def shortcut_file_name(entry: RankedEntry, suffix: str = "") -> str:
    """Build ``"<NN> - <name><suffix>"`` for a ranked entry.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> from recent_folders.api.folders.RecentFolder import RecentFolder
        >>> folder = RecentFolder(Path("/work/Budget"), datetime(2024, 3, 1, tzinfo=timezone.utc))
        >>> shortcut_file_name(RankedEntry(rank=1, folder=folder), ".lnk")
        '01 - Budget.lnk'
    """
    name = sanitize_file_name(friendly_folder_name(entry.folder.folder_path))
    return f"{entry.prefix} - {name}{suffix}"
