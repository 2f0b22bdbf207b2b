"""Record of an output shortcut that could not be deleted or created."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True)
class ArtifactFailure:
    """A single failed delete/create in the output directory."""

    path: Path
    action: Literal["delete", "create"]
    reason: str
