"""Outcome of scanning the recent items directory."""

from dataclasses import dataclass, field

from .LinkSkip import LinkSkip
from .RecentFolder import RecentFolder


@dataclass
class CollectResult:
    """Folders found in one pass, in first-observed order, plus skipped links."""

    folders: list[RecentFolder] = field(default_factory=list)
    skipped: list[LinkSkip] = field(default_factory=list)
    scanned: int = 0
