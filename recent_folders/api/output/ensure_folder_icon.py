"""Give the output directory a custom icon via desktop.ini."""

import shutil
from pathlib import Path

from ...constants import DESKTOP_INI_NAME, ICON_FILE_NAME
from ...logging_config import get_logger
from ..link._AbstractBackend import _AbstractBackend

logger = get_logger("output.icon")

_DESKTOP_INI_CONTENT = f"[.ShellClassInfo]\r\nIconResource={ICON_FILE_NAME},0\r\n"


def ensure_folder_icon(folder_path: Path, icon_path: Path, backend: _AbstractBackend) -> bool:
    """Copy ``icon_path`` into the folder and point desktop.ini at it.

    Best-effort: a missing icon or any filesystem error leaves the folder
    undecorated and is only logged.

    Returns:
        True if the icon and desktop.ini are in place
    """
    if not icon_path.is_file():
        return False

    target_icon = folder_path / ICON_FILE_NAME
    desktop_ini = folder_path / DESKTOP_INI_NAME
    try:
        if not target_icon.exists():
            shutil.copyfile(icon_path, target_icon)
        # newline="" keeps the CRLF line endings the shell expects
        with desktop_ini.open("w", encoding="utf-8", newline="") as fh:
            fh.write(_DESKTOP_INI_CONTENT)
    except OSError as exc:
        logger.debug(f"Could not decorate {folder_path}: {exc}")
        return False

    for path, action in (
        (desktop_ini, lambda: backend.mark_hidden(desktop_ini, system=True)),
        (target_icon, lambda: backend.mark_hidden(target_icon)),
        (folder_path, lambda: backend.mark_customized_folder(folder_path)),
    ):
        try:
            action()
        except Exception as exc:
            logger.debug(f"Could not set attributes on {path}: {exc}")
    return True
