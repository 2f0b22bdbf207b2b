"""Create the output directory before the first pass."""

from pathlib import Path

from ...logging_config import get_logger
from ..link._AbstractBackend import _AbstractBackend
from .ensure_folder_icon import ensure_folder_icon

logger = get_logger("output.prepare")


def prepare_output_dir(output_dir: Path, backend: _AbstractBackend, icon_path: Path | None = None) -> Path:
    """Create ``output_dir`` if needed and decorate it with the folder icon.

    Raises:
        OSError: If the directory cannot be created (fatal at startup)
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    if icon_path is not None:
        applied = ensure_folder_icon(output_dir, icon_path, backend)
        logger.debug(f"Folder icon {'applied' if applied else 'skipped'} for {output_dir}")
    return output_dir
