"""Record of a link file left out of a collection pass."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LinkSkip:
    """A link file that was skipped, and why."""

    path: Path
    reason: str
