"""Top-level recent-folders configuration."""

import json
import sys
from contextlib import suppress
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import DEFAULT_DEBOUNCE_SECS, DEFAULT_MAX_FOLDERS
from ..link.detect_backend import detect_backend
from .default_output_dir import default_output_dir
from .default_source_dir import default_source_dir
from .get_config_path import get_config_path
from .LogConfig import LogConfig


def _default_case_insensitive() -> bool:
    # NTFS and APFS/HFS+ (default formatting) compare names case-insensitively
    return sys.platform in ("win32", "darwin")


class RecentFoldersConfig(BaseModel):
    """Configuration for collecting recent folders and publishing shortcuts."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path = Field(default_factory=default_source_dir, description="Directory of recent-item link files")
    output_dir: Path = Field(default_factory=default_output_dir, description="Directory of ranked shortcuts")
    max_folders: int = Field(DEFAULT_MAX_FOLDERS, ge=1, le=99, description="Number of shortcuts to keep")
    debounce_secs: float = Field(DEFAULT_DEBOUNCE_SECS, gt=0, description="Quiet period before a rebuild")
    backend: Literal["windows", "symlink"] = Field(default_factory=detect_backend, description="Link file backend")
    case_insensitive: bool = Field(
        default_factory=_default_case_insensitive,
        description="Compare folder paths case-insensitively when deduplicating",
    )
    icon_path: Path | None = Field(None, description="Icon applied to the output directory (optional)")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("source_dir", "output_dir", "icon_path", mode="before")
    @classmethod
    def expand_user(cls, value: Any) -> Any:
        if isinstance(value, (str, Path)):
            return Path(value).expanduser()
        return value

    @classmethod
    def load(cls) -> "RecentFoldersConfig":
        """Load and validate config from file.

        A missing config file is not an error: every field has a default.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")

    def save(self) -> Path:
        """Save the configuration to the config file.

        Uses atomic write (write to temp file, then rename).

        Returns:
            Path the configuration was written to

        Raises:
            RuntimeError: If the file cannot be written
        """
        path = get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
        return path
