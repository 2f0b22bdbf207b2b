"""Default location of the ranked shortcut directory."""

from pathlib import Path

from ...constants import OUTPUT_DIR_NAME


def default_output_dir() -> Path:
    """Return ``~/Recent Folders``."""
    return Path.home() / OUTPUT_DIR_NAME
