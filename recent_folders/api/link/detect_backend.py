"""Pick the link backend for the running platform."""

import sys


def detect_backend() -> str:
    """Return "windows" on Windows and "symlink" everywhere else."""
    if sys.platform == "win32":
        return "windows"
    return "symlink"
