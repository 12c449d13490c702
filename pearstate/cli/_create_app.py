"""Create the main Typer CLI app."""

import typer

from pearstate.api.config.cmd_version import cmd_version
from pearstate.cli._handle_stage_result import _handle_stage_result
from pearstate.cli.state import state


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="pearstate CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(state(), name="state")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        version: bool = typer.Option(False, "--version", "-v", help="Show version and exit"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if version:
            _handle_stage_result(cmd_version, ctx)()
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
