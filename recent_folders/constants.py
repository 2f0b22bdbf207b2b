"""Shared constants for recent-folders defaults and artefact names."""

RECENT_FOLDERS_HOME_EXT = ".recent_folders"  # user-level state/config directory
RECENT_FOLDERS_HOME_ENV = "RECENT_FOLDERS_HOME"

CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "recent_folders.log"

# Output directory created under the user's profile
OUTPUT_DIR_NAME = "Recent Folders"

DEFAULT_MAX_FOLDERS = 30
DEFAULT_DEBOUNCE_SECS = 0.8

# Shortcut naming
MAX_NAME_LENGTH = 120
FALLBACK_FOLDER_NAME = "Folder"
INVALID_FILE_NAME_CHARS = '<>:"/\\|?*' + "".join(chr(c) for c in range(32))

# Folder icon decoration
ICON_FILE_NAME = ".rf.ico"
DESKTOP_INI_NAME = "desktop.ini"
