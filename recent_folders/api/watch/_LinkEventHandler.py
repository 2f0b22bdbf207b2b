"""Filesystem event handler for the recent items directory."""

from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler


class _LinkEventHandler(FileSystemEventHandler):
    """Calls ``on_change`` for create/modify/move/delete of link files."""

    def __init__(self, matches_name: Callable[[str], bool], on_change: Callable[[], None]) -> None:
        super().__init__()
        self._matches_name = matches_name
        self._on_change = on_change

    def _is_link_event(self, path: str | bytes) -> bool:
        if isinstance(path, bytes):
            path = path.decode(errors="replace")
        return self._matches_name(Path(path).name)

    def _handle(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        if self._is_link_event(event.src_path):
            self._on_change()

    def on_created(self, event: FileSystemEvent) -> None:
        self._handle(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._handle(event)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._handle(event)

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        # Renaming foo.tmp -> foo.lnk counts, and so does foo.lnk -> foo.old
        if self._is_link_event(event.src_path) or self._is_link_event(getattr(event, "dest_path", "")):
            self._on_change()
