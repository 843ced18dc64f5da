"""URI Typer app factory."""

import typer

from appuri.api.uri.cmd_absolute import cmd_absolute
from appuri.api.uri.cmd_classify import cmd_classify
from appuri.api.uri.cmd_persistable import cmd_persistable
from appuri.cli._get_display_format import _get_display_format
from appuri.cli._handle_stage_result import _handle_stage_result


def uri() -> typer.Typer:
    """Create and configure the uri Typer app."""
    app = typer.Typer(
        name="uri",
        help="Convert between file URIs and persistable URIs",
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

    @app.command(name="absolute")
    def absolute_cmd(
        ctx: typer.Context,
        value: str = typer.Argument(..., metavar="URI", help="Persistable or file URI"),
    ) -> None:
        """Resolve a URI to an absolute file URI for this run."""
        _handle_stage_result(cmd_absolute, _get_display_format(ctx))(value)

    @app.command(name="persistable")
    def persistable_cmd(
        ctx: typer.Context,
        value: str = typer.Argument(..., metavar="URI", help="File or persistable URI"),
    ) -> None:
        """Express a file URI relative to its storage root."""
        _handle_stage_result(cmd_persistable, _get_display_format(ctx))(value)

    @app.command(name="classify")
    def classify_cmd(
        ctx: typer.Context,
        value: str = typer.Argument(..., metavar="URI", help="Any URI"),
    ) -> None:
        """Report whether a URI is persistable, a file URI, or neither."""
        _handle_stage_result(cmd_classify, _get_display_format(ctx))(value)

    return app
