"""Config Typer app."""

import typer

from recent_folders.api.config.cmd_init import cmd_init
from recent_folders.api.config.cmd_show import cmd_show

from ._run_stage import _run_stage


def config() -> typer.Typer:
    """Create the ``config`` sub-app."""
    app = typer.Typer(
        name="config",
        help="Show or initialize configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def config_callback(ctx: typer.Context) -> None:
        """Configuration operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_command() -> None:
        """Print the effective configuration."""
        if not _run_stage(cmd_show()):
            raise typer.Exit(1)

    @app.command(name="init")
    def init_command(
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
    ) -> None:
        """Write a config file with default values."""
        if not _run_stage(cmd_init(force=force)):
            raise typer.Exit(1)

    return app
