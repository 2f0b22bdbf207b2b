"""Long-running watch mode: notifications -> debouncer -> reconciliation."""

import threading
from collections.abc import Callable

from ...logging_config import get_logger
from .ChangeWatcher import ChangeWatcher
from .Debouncer import Debouncer

logger = get_logger("watch.session")


class WatchSession:
    """Wire a ChangeWatcher to a Debouncer and block until stopped.

    ``run()`` blocks the calling thread on a stop event. ``stop()`` is the
    clean-shutdown hook: it may be called from a signal handler or another
    thread, and makes ``run()`` stop the watcher, cancel any pending rebuild,
    wait for a rebuild that is already running and return.
    """

    def __init__(
        self,
        debouncer: Debouncer,
        watcher_factory: Callable[[Callable[[], None]], ChangeWatcher],
    ) -> None:
        self.debouncer = debouncer
        self.watcher = watcher_factory(debouncer.signal)
        self._stop_event = threading.Event()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self, poll_secs: float = 1.0) -> None:
        """Watch until ``stop()`` is called."""
        self.watcher.start()
        try:
            # Short waits keep the main thread responsive to Ctrl+C on Windows
            while not self._stop_event.wait(poll_secs):
                pass
        finally:
            self.watcher.stop()
            self.debouncer.close(wait=True)
            logger.info("Watch session ended")

    def stop(self) -> None:
        """Ask ``run()`` to shut down."""
        self._stop_event.set()
