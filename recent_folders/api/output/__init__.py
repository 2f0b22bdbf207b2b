"""Output directory of ranked shortcuts."""

from .ArtifactFailure import ArtifactFailure
from .RebuildResult import RebuildResult
from .ensure_folder_icon import ensure_folder_icon
from .friendly_folder_name import friendly_folder_name
from .prepare_output_dir import prepare_output_dir
from .rebuild_output_dir import rebuild_output_dir
from .sanitize_file_name import sanitize_file_name
from .shortcut_file_name import shortcut_file_name

__all__ = [
    "ArtifactFailure",
    "RebuildResult",
    "ensure_folder_icon",
    "friendly_folder_name",
    "prepare_output_dir",
    "rebuild_output_dir",
    "sanitize_file_name",
    "shortcut_file_name",
]
