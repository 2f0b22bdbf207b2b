"""Write a config file populated with defaults."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .get_config_path import get_config_path
from .RecentFoldersConfig import RecentFoldersConfig


def cmd_init(force: bool = False) -> StageResult:
    """Create the config file, refusing to overwrite unless ``force``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = get_config_path()
        yield (0.2, f"Writing {path}...")
        if path.exists() and not force:
            result_obj.result = f"Config file already exists at {path} (use --force to overwrite)"
            result_obj.output = {"path": str(path), "written": False}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        try:
            RecentFoldersConfig().save()
        except RuntimeError as exc:
            result_obj.result = str(exc)
            result_obj.output = {"path": str(path), "written": False, "errors": [str(exc)]}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.result = f"Wrote default configuration to {path}"
        result_obj.output = {"path": str(path), "written": True}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
