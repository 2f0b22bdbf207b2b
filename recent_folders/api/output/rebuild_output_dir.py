"""Clear and recreate the ranked shortcuts."""

from collections.abc import Sequence
from pathlib import Path

from ...logging_config import get_logger
from ..folders.RankedEntry import RankedEntry
from ..link._AbstractBackend import _AbstractBackend
from .ArtifactFailure import ArtifactFailure
from .RebuildResult import RebuildResult
from .shortcut_file_name import shortcut_file_name

logger = get_logger("output.rebuild")


def _clear(output_dir: Path, backend: _AbstractBackend, result: RebuildResult) -> None:
    for entry in sorted(output_dir.iterdir()):
        if not backend.is_link(entry):
            continue
        try:
            entry.unlink()
            result.removed.append(entry)
        except OSError as exc:
            result.failures.append(ArtifactFailure(entry, "delete", str(exc)))
            logger.warning(f"Failed to delete shortcut {entry}: {exc}")


def rebuild_output_dir(output_dir: Path, ranked: Sequence[RankedEntry], backend: _AbstractBackend) -> RebuildResult:
    """Replace every shortcut in ``output_dir`` with one per ranked entry.

    The directory is always cleared and fully rewritten; nothing is diffed
    against the previous pass. Files that are not link files (desktop.ini,
    the folder icon, anything a user dropped there) are left alone.

    A shortcut that fails to delete or to be created is recorded in
    ``RebuildResult.failures`` and the rebuild carries on, so a transient
    failure heals on the next pass.

    Args:
        output_dir: Existing output directory
        ranked: Entries from rank_folders, in rank order
        backend: Link backend used to recognise and create shortcuts

    Returns:
        RebuildResult with removed/created paths and failures
    """
    result = RebuildResult()
    _clear(output_dir, backend, result)

    for entry in ranked:
        folder = entry.folder.folder_path
        shortcut_path = output_dir / shortcut_file_name(entry, backend.link_suffix)
        try:
            backend.create_shortcut(
                shortcut_path,
                target=folder,
                working_dir=folder,
                description=f"Recent folder: {folder}",
            )
        except Exception as exc:
            result.failures.append(ArtifactFailure(shortcut_path, "create", str(exc)))
            logger.warning(f"Failed to create shortcut {shortcut_path}: {exc}")
            continue
        result.created.append(shortcut_path)

    return result
