"""Centralized logging configuration for recent-folders."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .api.config.get_home_dir import get_home_dir
from .constants import LOG_FILE_NAME


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    to_file: bool = True,
) -> None:
    """
    Configure logging for recent-folders.

    Args:
        level: Logging level (default INFO)
        log_file: Optional path to log file (default ~/.recent_folders/recent_folders.log)
        format_string: Optional custom format string
        to_file: Write to the log file in addition to stderr
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if to_file:
        if log_file is None:
            log_file = get_home_dir(LOG_FILE_NAME)
        # Ensure log directory exists
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=format_string, handlers=handlers)

    # Observer threads are chatty at DEBUG
    logging.getLogger('watchdog').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"recent_folders.{name}")
