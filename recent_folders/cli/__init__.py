"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    typer runs in standalone mode so that usage errors (exit 2), aborts such as
    Ctrl+C (exit 1) and ``typer.Exit`` are all turned into ``SystemExit`` by
    whichever click implementation typer ships with.
    """
    import typer

    from recent_folders.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from recent_folders.api.config.get_package_version import get_package_version

        print(f"recent-folders {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="recent-folders")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
