"""A distinct folder seen in the recent items history."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass
class RecentFolder:
    """One folder per canonical path during a single collection pass.

    Attributes:
        folder_path: Fully resolved absolute folder path
        last_seen_utc: Latest link-file modification time mapped to this folder
        first_seen: Order in which the folder was first observed in the pass
    """

    folder_path: Path
    last_seen_utc: datetime
    first_seen: int = 0
