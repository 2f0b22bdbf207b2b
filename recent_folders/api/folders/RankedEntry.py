"""A recent folder with its position in the output."""

from dataclasses import dataclass

from .RecentFolder import RecentFolder


@dataclass(frozen=True)
class RankedEntry:
    """RecentFolder annotated with its 1-based rank."""

    rank: int
    folder: RecentFolder

    @property
    def prefix(self) -> str:
        """Two-digit rank prefix used in shortcut names ("01", "02", ...)."""
        return f"{self.rank:02d}"
