"""Run one collect -> rank -> rebuild pass."""

from ...logging_config import get_logger
from ..config.RecentFoldersConfig import RecentFoldersConfig
from ..folders.collect_recent_folders import collect_recent_folders
from ..folders.rank_folders import rank_folders
from ..link._AbstractBackend import _AbstractBackend
from ..output.rebuild_output_dir import rebuild_output_dir
from .ReconcileResult import ReconcileResult

logger = get_logger("reconcile")


def reconcile_once(config: RecentFoldersConfig, backend: _AbstractBackend) -> ReconcileResult:
    """Derive the output directory from the current recent items.

    Per-link and per-shortcut problems are recorded in the result. Anything
    else (e.g. the output directory vanished) propagates to the caller.
    The whole pass runs inside one backend session, which is closed again
    before returning or raising.
    """
    with backend.session():
        collected = collect_recent_folders(
            config.source_dir,
            backend,
            case_insensitive=config.case_insensitive,
        )
        ranked = rank_folders(collected.folders, config.max_folders)
        rebuilt = rebuild_output_dir(config.output_dir, ranked, backend)

    result = ReconcileResult(collected=collected, ranked=ranked, rebuilt=rebuilt)
    stats = " ".join(f"{key}={value}" for key, value in result.summary().items())
    logger.info(f"Reconciled {config.output_dir}: {stats}")
    return result
