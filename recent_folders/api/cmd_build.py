"""Build (or rebuild) the recent folders output directory once."""

from collections.abc import Iterator

from ..logging_config import get_logger
from .config.RecentFoldersConfig import RecentFoldersConfig
from .link._AbstractBackend import _AbstractBackend
from .link.get_backend import get_backend
from .output.prepare_output_dir import prepare_output_dir
from .reconcile.reconcile_once import reconcile_once
from .StageResult import StageResult

logger = get_logger("build")


def cmd_build(config: RecentFoldersConfig, backend: _AbstractBackend | None = None) -> StageResult:
    """Create the output directory if needed and run one reconciliation pass.

    Per-link skips and per-shortcut failures are reported in the output but
    do not fail the command. Failing to create the output directory, or any
    other error escaping the pass, does.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        try:
            yield (0.1, "Preparing output directory...")
            link_backend = backend if backend is not None else get_backend(config.backend)
            prepare_output_dir(config.output_dir, link_backend, config.icon_path)

            yield (0.4, f"Scanning {config.source_dir}...")
            pass_result = reconcile_once(config, link_backend)

            result_obj.output = {
                **pass_result.summary(),
                "source_dir": str(config.source_dir),
                "output_dir": str(config.output_dir),
                "shortcuts": [path.name for path in pass_result.rebuilt.created],
                "skipped": [f"{skip.path.name}: {skip.reason}" for skip in pass_result.collected.skipped],
                "errors": [f"{f.action} {f.path.name}: {f.reason}" for f in pass_result.rebuilt.failures],
            }
            result_obj.result = f"Published {len(pass_result.rebuilt.created)} recent folders to {config.output_dir}"
            result_obj.success = True
            yield (1.0, "Complete")
        except Exception as exc:
            logger.error(f"Build failed: {exc}")
            result_obj.result = f"Error building recent folders: {exc}"
            result_obj.output = {
                "source_dir": str(config.source_dir),
                "output_dir": str(config.output_dir),
                "errors": [str(exc)],
            }
            result_obj.success = False
            yield (1.0, "Complete")

    return StageResult(
        announce="Building recent folders...",
        progress_callback=do_work,
    )
