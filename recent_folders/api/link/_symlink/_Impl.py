"""Symlink backend - recent items and shortcuts are symbolic links."""

import os
from pathlib import Path

from .._AbstractBackend import _AbstractBackend


class _Impl(_AbstractBackend):
    """POSIX backend where every symlink in a directory is a link file.

    Symlinks carry no working directory or description, so those arguments
    are accepted and dropped.
    """

    link_suffix = ""

    def is_link(self, path: Path) -> bool:
        return path.is_symlink()

    def matches_name(self, name: str) -> bool:
        return bool(name)

    def resolve(self, link_path: Path) -> str:
        target = Path(os.readlink(link_path))
        if not target.is_absolute():
            target = link_path.parent / target
        return str(target)

    def create_shortcut(self, path: Path, target: Path, working_dir: Path, description: str) -> None:
        if path.is_symlink() or path.exists():
            path.unlink()
        os.symlink(target, path, target_is_directory=True)
