"""Entry point for running recent_folders as a module."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
