"""Subscribe to change notifications for the recent items directory."""

from collections.abc import Callable
from pathlib import Path

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from ...logging_config import get_logger
from ..link._AbstractBackend import _AbstractBackend
from ._LinkEventHandler import _LinkEventHandler

logger = get_logger("watch.watcher")


class ChangeWatcher:
    """Non-recursive watchdog subscription that calls ``on_change`` for link files.

    The watcher does not decide when to rebuild; it only reports that
    something changed.
    """

    def __init__(self, source_dir: Path, backend: _AbstractBackend, on_change: Callable[[], None]) -> None:
        self.source_dir = source_dir
        self._handler = _LinkEventHandler(backend.matches_name, on_change)
        self._observer: BaseObserver | None = None

    @property
    def running(self) -> bool:
        return self._observer is not None and self._observer.is_alive()

    def start(self) -> None:
        """Start delivering notifications.

        Raises:
            FileNotFoundError: If the source directory does not exist
            RuntimeError: If already started
        """
        if self._observer is not None:
            raise RuntimeError("Watcher already started")
        if not self.source_dir.is_dir():
            raise FileNotFoundError(f"Source directory not found: {self.source_dir}")

        observer = Observer()
        observer.schedule(self._handler, str(self.source_dir), recursive=False)
        observer.start()
        self._observer = observer
        logger.info(f"Watching {self.source_dir}")

    def stop(self, timeout: float = 5.0) -> None:
        """Stop the observer and release the subscription."""
        observer = self._observer
        if observer is None:
            return
        self._observer = None
        observer.stop()
        observer.join(timeout)
        logger.info(f"Stopped watching {self.source_dir}")
