"""Pass-level statistics for one reconciliation."""

from dataclasses import dataclass, field
from typing import Any

from ..folders.CollectResult import CollectResult
from ..folders.RankedEntry import RankedEntry
from ..output.RebuildResult import RebuildResult


@dataclass
class ReconcileResult:
    """Everything one collect -> rank -> rebuild pass produced."""

    collected: CollectResult
    ranked: list[RankedEntry] = field(default_factory=list)
    rebuilt: RebuildResult = field(default_factory=RebuildResult)

    @property
    def ok(self) -> bool:
        """True when every ranked entry got a shortcut and nothing failed to delete."""
        return not self.rebuilt.failures

    def summary(self) -> dict[str, Any]:
        """Counts for logging and CLI output."""
        return {
            "scanned": self.collected.scanned,
            "folders": len(self.collected.folders),
            "skipped_links": len(self.collected.skipped),
            "ranked": len(self.ranked),
            "removed": len(self.rebuilt.removed),
            "created": len(self.rebuilt.created),
            "failures": len(self.rebuilt.failures),
        }
