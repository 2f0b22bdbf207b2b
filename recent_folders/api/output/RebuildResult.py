"""Outcome of rebuilding the output directory."""

from dataclasses import dataclass, field
from pathlib import Path

from .ArtifactFailure import ArtifactFailure


@dataclass
class RebuildResult:
    """Shortcuts removed and created in one pass, plus per-artifact failures."""

    removed: list[Path] = field(default_factory=list)
    created: list[Path] = field(default_factory=list)
    failures: list[ArtifactFailure] = field(default_factory=list)
