"""Coalesce bursts of change signals into one delayed callback."""

import threading
from collections.abc import Callable

from ...logging_config import get_logger

logger = get_logger("watch.debounce")


class Debouncer:
    """Run ``callback`` once per quiet period.

    Every ``signal()`` (re)arms a single timer for ``delay_secs``; the callback
    only runs after no signal has arrived for a full quiet period. At most one
    timer is ever outstanding, and callbacks never overlap.

    States: idle (no timer) -> pending (timer armed) -> idle after the
    callback ran. A signal while pending replaces the timer with a fresh one.

    Exceptions raised by the callback are logged and counted in
    ``failures``; they never propagate into the timer thread.
    """

    def __init__(self, callback: Callable[[], object], delay_secs: float) -> None:
        if delay_secs <= 0:
            raise ValueError(f"delay_secs must be positive, got {delay_secs}")
        self._callback = callback
        self.delay_secs = delay_secs
        self._lock = threading.Lock()
        self._run_lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._closed = False
        self.runs = 0
        self.failures = 0

    @property
    def pending(self) -> bool:
        """True while a timer is armed."""
        with self._lock:
            return self._timer is not None

    def signal(self) -> None:
        """Start the quiet period, or restart it if one is already running.

        Safe to call from any thread, including watchdog's observer thread.
        """
        with self._lock:
            if self._closed:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = threading.Timer(self.delay_secs, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            # Superseded or cancelled between expiry and taking the lock
            if generation != self._generation or self._timer is None:
                return
            self._timer = None

        with self._run_lock:
            if self._closed:
                return
            try:
                self._callback()
            except Exception:
                self.failures += 1
                logger.exception("Debounced rebuild failed; waiting for the next change")
            finally:
                self.runs += 1

    def close(self, wait: bool = False) -> None:
        """Drop the pending timer and ignore later signals.

        With ``wait=True`` this also blocks until a callback that is already
        running has finished, so nothing is left half done on shutdown.
        """
        with self._lock:
            self._closed = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

        if wait:
            with self._run_lock:
                pass
