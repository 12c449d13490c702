"""State Typer app factory."""

import json

import typer

from pearstate.api.state.cmd_pkg import cmd_pkg
from pearstate.api.state.cmd_route import cmd_route
from pearstate.api.state.cmd_show import cmd_show
from pearstate.api.state.cmd_storage import cmd_storage
from pearstate.cli._handle_stage_result import _handle_stage_result
from pearstate.cli._parse_overrides import _parse_overrides


def state() -> typer.Typer:
    """Create and configure the state Typer app."""
    app = typer.Typer(
        name="state",
        help="Launch state resolution",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(
        name="show",
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )
    def show_cmd(
        ctx: typer.Context,
        link: str | None = typer.Argument(None, help="pear:// link, file:// link or path"),
        dir: str | None = typer.Option(None, "--dir", help="Project directory"),
        store: str | None = typer.Option(None, "--store", "-s", help="Explicit storage directory"),
        tmp_store: bool = typer.Option(False, "--tmp-store", "-t", help="Use temporary storage"),
        stage: bool = typer.Option(False, "--stage", help="Stage mode"),
        dev: bool = typer.Option(False, "--dev", help="Development mode"),
        run: bool = typer.Option(False, "--run", help="Resolve as a run"),
        pid: int | None = typer.Option(None, "--pid", help="Process id"),
    ) -> None:
        """Resolve and show launch state. Unknown --options pass through as flags."""
        flags = _parse_overrides(ctx.args)
        flags.update(stage=stage, dev=dev, tmpStore=tmp_store)
        if store:
            flags["store"] = store
        _handle_stage_result(cmd_show, ctx)(link, dir, flags, pid, run)

    @app.command(name="route")
    def route_cmd(
        ctx: typer.Context,
        route: str = typer.Argument(..., help="Route to resolve"),
        routes: str | None = typer.Option(None, "--routes", help="Route table as a JSON object"),
        unrouted: list[str] | None = typer.Option(None, "--unrouted", "-u", help="Unrouted prefix (repeatable)"),
    ) -> None:
        """Apply a route table to a route."""
        try:
            table = json.loads(routes) if routes else None
        except json.JSONDecodeError as e:
            typer.echo(f"Error: --routes is not valid JSON: {e}", err=True)
            raise typer.Exit(1) from None
        _handle_stage_result(cmd_route, ctx)(route, table, unrouted or [])

    @app.command(name="pkg")
    def pkg_cmd(
        ctx: typer.Context,
        dir: str | None = typer.Argument(None, help="Directory to start from (default: cwd)"),
    ) -> None:
        """Find the nearest package.json and application name."""
        _handle_stage_result(cmd_pkg, ctx)(dir)

    @app.command(name="storage")
    def storage_cmd(
        ctx: typer.Context,
        link: str = typer.Argument(..., help="pear:// link, file:// link or path"),
        dir: str | None = typer.Option(None, "--dir", help="Project directory keying by-random ids"),
    ) -> None:
        """Show the storage directory a link maps to."""
        _handle_stage_result(cmd_storage, ctx)(link, dir)

    return app
