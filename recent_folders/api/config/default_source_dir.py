"""Platform default for the directory of OS-maintained recent-item links."""

import os
import sys
from pathlib import Path

from .get_home_dir import get_home_dir


def default_source_dir() -> Path:
    """Return the per-user recent items directory.

    On Windows this is ``%APPDATA%\\Microsoft\\Windows\\Recent``. Other
    platforms have no equivalent directory of link files, so a ``recent``
    directory of symlinks under the recent-folders home is used instead.
    """
    if sys.platform == "win32":
        app_data = os.environ.get("APPDATA")
        base = Path(app_data) if app_data else Path.home() / "AppData" / "Roaming"
        return base / "Microsoft" / "Windows" / "Recent"
    return get_home_dir("recent")
