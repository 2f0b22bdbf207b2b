"""Watch mode - filesystem notifications feeding a debounced rebuild."""

from .ChangeWatcher import ChangeWatcher
from .Debouncer import Debouncer
from .WatchSession import WatchSession

__all__ = ["ChangeWatcher", "Debouncer", "WatchSession"]
