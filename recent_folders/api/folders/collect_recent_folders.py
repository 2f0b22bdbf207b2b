"""Scan the recent items directory for distinct folders."""

from pathlib import Path

from ...logging_config import get_logger
from ..link._AbstractBackend import _AbstractBackend
from .canonical_key import canonical_key
from .CollectResult import CollectResult
from .link_observed_at import link_observed_at
from .LinkSkip import LinkSkip
from .RecentFolder import RecentFolder
from .resolve_link_folder import resolve_link_folder

logger = get_logger("folders.collect")


def _list_links(source_dir: Path, backend: _AbstractBackend) -> list[Path]:
    # Name order makes "first observed" deterministic for the rank tie-break
    links = [entry for entry in source_dir.iterdir() if backend.is_link(entry)]
    return sorted(links, key=lambda p: (p.name.casefold(), p.name))


def collect_recent_folders(
    source_dir: Path,
    backend: _AbstractBackend,
    case_insensitive: bool = False,
) -> CollectResult:
    """Collect one RecentFolder per canonical folder path from link files.

    Only link files directly inside ``source_dir`` are considered. Each link is
    resolved through ``backend``; file targets map to their parent directory.
    Links that cannot be read or point nowhere are recorded in
    ``CollectResult.skipped`` and never abort the scan.

    Args:
        source_dir: Directory of recent-item link files
        backend: Link backend used to enumerate and resolve links
        case_insensitive: Treat paths differing only in case as one folder

    Returns:
        CollectResult with folders in first-observed order. A missing
        ``source_dir`` yields an empty result.
    """
    result = CollectResult()
    if not source_dir.is_dir():
        logger.debug(f"Source directory missing: {source_dir}")
        return result

    by_key: dict[str, RecentFolder] = {}

    for link_path in _list_links(source_dir, backend):
        result.scanned += 1
        try:
            last_seen = link_observed_at(link_path)
            target = backend.resolve(link_path)
            folder_path, reason = resolve_link_folder(target)
        except Exception as exc:
            # Corrupt links, access errors and resolver failures only cost this item
            result.skipped.append(LinkSkip(link_path, f"unresolvable: {exc}"))
            logger.debug(f"Skipping {link_path}: {exc}")
            continue

        if folder_path is None:
            result.skipped.append(LinkSkip(link_path, reason))
            logger.debug(f"Skipping {link_path}: {reason}")
            continue

        key = canonical_key(folder_path, case_insensitive)
        existing = by_key.get(key)
        if existing is None:
            by_key[key] = RecentFolder(folder_path=folder_path, last_seen_utc=last_seen, first_seen=len(by_key))
        elif last_seen > existing.last_seen_utc:
            existing.last_seen_utc = last_seen

    result.folders = list(by_key.values())
    return result
