"""Watch the recent items directory and rebuild after each burst of changes."""

import signal
import threading
from pathlib import Path

from ..logging_config import get_logger
from .config.RecentFoldersConfig import RecentFoldersConfig
from .link._AbstractBackend import _AbstractBackend
from .link.get_backend import get_backend
from .reconcile.reconcile_once import reconcile_once
from .watch.ChangeWatcher import ChangeWatcher
from .watch.Debouncer import Debouncer
from .watch.WatchSession import WatchSession

logger = get_logger("watch")


def create_watch_session(config: RecentFoldersConfig, backend: _AbstractBackend) -> WatchSession:
    """Build a watch session whose debounced callback runs a reconciliation pass."""
    debouncer = Debouncer(lambda: reconcile_once(config, backend), config.debounce_secs)

    def make_watcher(on_change) -> ChangeWatcher:
        return ChangeWatcher(Path(config.source_dir), backend, on_change)

    return WatchSession(debouncer, make_watcher)


def cmd_watch(config: RecentFoldersConfig, backend: _AbstractBackend | None = None) -> None:
    """Run watch mode in the foreground until SIGTERM or Ctrl+C.

    Raises:
        FileNotFoundError: If the source directory does not exist
    """
    link_backend = backend if backend is not None else get_backend(config.backend)
    session = create_watch_session(config, link_backend)

    def handle_sigterm(_signum, _frame):
        logger.info("Received SIGTERM")
        session.stop()

    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, handle_sigterm)

    try:
        session.run()
    except KeyboardInterrupt:
        session.stop()
