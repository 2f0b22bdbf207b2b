"""Show the effective configuration."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .get_config_path import get_config_path
from .RecentFoldersConfig import RecentFoldersConfig


def cmd_show() -> StageResult:
    """Load the configuration (defaults when no file exists) and return it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        path = get_config_path()
        try:
            config = RecentFoldersConfig.load()
        except ValueError as exc:
            result_obj.result = str(exc)
            result_obj.output = {"path": str(path), "errors": [str(exc)]}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.output = {"path": str(path), "exists": path.exists(), "config": config.to_dict()}
        result_obj.result = f"Configuration from {path}" if path.exists() else "Default configuration (no config file)"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Showing configuration...", progress_callback=do_work)
