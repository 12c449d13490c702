"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from pearstate.cli._create_app import _create_app
    from pearstate.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    app = _create_app()
    try:
        app(argv, prog_name="pearstate")
        return 0
    except typer.Exit as e:
        return e.exit_code
    except SystemExit as e:
        # Usage errors surface here with exit code 2
        return e.code if isinstance(e.code, int) else 1
