"""Dedup key for folder paths."""

from pathlib import Path


def canonical_key(folder_path: Path, case_insensitive: bool) -> str:
    """Return the comparison key for an already resolved folder path.

    Args:
        folder_path: Absolute, resolved folder path
        case_insensitive: Fold case (for case-insensitive filesystems)

    Examples:
        >>> canonical_key(Path("/Data/Projects"), case_insensitive=True)
        '/data/projects'
        >>> canonical_key(Path("/Data/Projects"), case_insensitive=False)
        '/Data/Projects'
    """
    key = str(folder_path)
    return key.casefold() if case_insensitive else key
