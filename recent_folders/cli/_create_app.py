"""Create the main Typer CLI app."""

import logging

import typer

from recent_folders.api.cmd_build import cmd_build
from recent_folders.api.cmd_watch import cmd_watch
from recent_folders.api.config.RecentFoldersConfig import RecentFoldersConfig
from recent_folders.cli.config import config
from recent_folders.logging_config import setup_logging

from ._run_stage import _run_stage


def _run(watch: bool, quiet: bool, verbose: bool) -> None:
    try:
        cfg = RecentFoldersConfig.load()
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(2) from e

    level = logging.DEBUG if verbose else cfg.log.level_number()
    setup_logging(level=level, to_file=cfg.log.to_file)

    if not _run_stage(cmd_build(cfg), quiet=quiet):
        raise typer.Exit(1)

    if not watch:
        return

    try:
        cmd_watch(cfg)
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Keep a directory of shortcuts to your most recently used folders",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        watch: bool = typer.Option(False, "--watch", "-w", help="Keep running and rebuild when recent items change"),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report failures"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
    ) -> None:
        """Rebuild the recent folders directory (and optionally keep it up to date)."""
        if ctx.invoked_subcommand is None:
            _run(watch=watch, quiet=quiet, verbose=verbose)

    return app
