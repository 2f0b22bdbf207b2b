"""Log configuration."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
    to_file: bool = Field(True, description="Also write log records to the logfile under the home directory")

    def level_number(self) -> int:
        """Numeric level for the stdlib logging module."""
        return logging.getLevelName(self.level)
