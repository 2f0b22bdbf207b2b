"""Run a StageResult command and display it."""

from datetime import datetime

from rich.console import Console

from recent_folders.api.StageResult import StageResult


def _run_stage(result: StageResult, quiet: bool = False) -> bool:
    """Drive the 4-stage pattern: announce, progress, result, output.

    Announce, progress and result go to stderr; the output dict goes to
    stdout as JSON.

    Returns:
        ``result.success``
    """
    err = Console(stderr=True)
    out = Console()

    if not quiet:
        err.print(f"[bold]{result.announce}[/bold]")

    for progress, message in result.progress_callback(result):
        if not quiet:
            timestamp = datetime.now().strftime("%H:%M:%S")
            err.print(f"[dim]{timestamp}[/dim] {message} ({progress:.0%})")

    if not quiet:
        if result.success:
            err.print(f"[green]{result.result}[/green]")
        else:
            err.print(f"[red]{result.result}[/red]")
        out.print_json(data=result.output)
    elif not result.success:
        err.print(f"[red]{result.result}[/red]")

    return result.success
