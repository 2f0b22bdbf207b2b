"""Windows backend - .lnk shortcuts through the WScript.Shell COM object."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from .._AbstractBackend import _AbstractBackend


class _Impl(_AbstractBackend):
    """Windows shell shortcut backend (requires pywin32).

    COM objects are apartment bound. Shortcut access happens inside
    ``session()``, which initialises COM on the current thread and releases
    the thread's ``WScript.Shell`` instance and apartment when it ends.
    """

    link_suffix = ".lnk"

    def __init__(self) -> None:
        self._local = threading.local()

    @contextmanager
    def session(self) -> Iterator[None]:
        import pythoncom

        pythoncom.CoInitialize()
        self._local.depth = getattr(self._local, "depth", 0) + 1
        try:
            yield
        finally:
            self._local.depth -= 1
            if self._local.depth == 0:
                # The dispatch must be released before its apartment goes away
                self._local.shell = None
            pythoncom.CoUninitialize()

    def _shell(self) -> Any:
        if getattr(self._local, "depth", 0) == 0:
            raise RuntimeError("Shortcut access requires an open backend session")
        shell = getattr(self._local, "shell", None)
        if shell is None:
            import win32com.client

            shell = win32com.client.Dispatch("WScript.Shell")
            self._local.shell = shell
        return shell

    def is_link(self, path: Path) -> bool:
        return self.matches_name(path.name) and path.is_file()

    def matches_name(self, name: str) -> bool:
        return name.lower().endswith(self.link_suffix)

    def resolve(self, link_path: Path) -> str:
        shortcut = self._shell().CreateShortCut(str(link_path))
        target = shortcut.TargetPath
        if not target or not str(target).strip():
            raise ValueError(f"Shortcut has no target path: {link_path}")
        return str(target)

    def create_shortcut(self, path: Path, target: Path, working_dir: Path, description: str) -> None:
        shortcut = self._shell().CreateShortCut(str(path))
        shortcut.TargetPath = str(target)
        shortcut.WorkingDirectory = str(working_dir)
        shortcut.Description = description
        shortcut.Save()

    @staticmethod
    def _add_attributes(path: Path, flags: int) -> None:
        import win32api

        current = win32api.GetFileAttributes(str(path))
        win32api.SetFileAttributes(str(path), current | flags)

    def mark_hidden(self, path: Path, system: bool = False) -> None:
        import win32con

        flags = win32con.FILE_ATTRIBUTE_HIDDEN
        if system:
            flags |= win32con.FILE_ATTRIBUTE_SYSTEM
        self._add_attributes(path, flags)

    def mark_customized_folder(self, path: Path) -> None:
        import win32con

        # Explorer only reads desktop.ini for folders flagged read-only or system
        self._add_attributes(path, win32con.FILE_ATTRIBUTE_READONLY | win32con.FILE_ATTRIBUTE_SYSTEM)
