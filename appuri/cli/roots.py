"""Roots Typer app factory."""

import typer

from appuri.api.roots.cmd_inbox import cmd_inbox
from appuri.api.roots.cmd_list import cmd_list
from appuri.api.roots.cmd_tmpdir import cmd_tmpdir
from appuri.cli._get_display_format import _get_display_format
from appuri.cli._handle_stage_result import _handle_stage_result


def roots() -> typer.Typer:
    """Create and configure the roots Typer app."""
    app = typer.Typer(
        name="roots",
        help="Storage root operations",
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

    @app.command(name="list")
    def list_cmd(ctx: typer.Context) -> None:
        """List the current location of every storage root."""
        _handle_stage_result(cmd_list, _get_display_format(ctx))()

    @app.command(name="inbox")
    def inbox_cmd(ctx: typer.Context) -> None:
        """Show the Documents inbox where other applications drop files."""
        _handle_stage_result(cmd_inbox, _get_display_format(ctx))()

    @app.command(name="tmpdir")
    def tmpdir_cmd(ctx: typer.Context) -> None:
        """Create a private temporary directory."""
        _handle_stage_result(cmd_tmpdir, _get_display_format(ctx))()

    return app
