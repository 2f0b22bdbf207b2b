"""Human readable label for a folder."""

from pathlib import PurePath


def friendly_folder_name(folder_path: PurePath) -> str:
    """Return the folder's leaf name.

    Filesystem roots have no leaf name, so the drive label is used instead
    ("C:\\" -> "C"). If neither is available the raw path string is returned.
    """
    name = folder_path.name
    if name.strip():
        return name

    root = folder_path.anchor.rstrip("\\/").replace(":", "")
    if root.strip():
        return root

    return str(folder_path)
