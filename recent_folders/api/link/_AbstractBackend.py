"""Abstract base class for link backends (shortcut readers/writers)."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class _AbstractBackend(ABC):
    """Platform-specific access to link files.

    A backend decides which directory entries are link files, resolves a link
    to its target path, and creates new links. Folder attribute helpers are
    best-effort and default to doing nothing.
    """

    #: Suffix appended to generated shortcut names (e.g. ".lnk")
    link_suffix: str = ""

    @abstractmethod
    def is_link(self, path: Path) -> bool:
        """Return True if ``path`` is a link file managed by this backend."""
        pass

    @abstractmethod
    def matches_name(self, name: str) -> bool:
        """Return True if a file name could belong to a link file.

        Used for watcher events, where the file may already be gone.
        """
        pass

    @abstractmethod
    def resolve(self, link_path: Path) -> str:
        """Return the target path stored in a link file.

        Raises:
            OSError: If the link cannot be read
            ValueError: If the link has no usable target
        """
        pass

    @abstractmethod
    def create_shortcut(self, path: Path, target: Path, working_dir: Path, description: str) -> None:
        """Create (or replace) a link file at ``path`` pointing at ``target``."""
        pass

    @contextmanager
    def session(self) -> Iterator[None]:
        """Scope per-thread resources used by link operations (no-op unless overridden).

        Every reconciliation pass runs inside one session, on whatever thread
        the pass happens to use.
        """
        yield

    def mark_hidden(self, path: Path, system: bool = False) -> None:  # noqa: B027
        """Hide a file from directory listings (no-op unless overridden)."""

    def mark_customized_folder(self, path: Path) -> None:  # noqa: B027
        """Flag a folder so the shell honours its desktop.ini (no-op unless overridden)."""
