"""Update Typer app factory."""

import typer

from gbu.api.update.cmd_opendap import cmd_opendap
from gbu.api.update.cmd_s3 import cmd_s3
from gbu.cli._handle_stage_result import _handle_stage_result


def update() -> typer.Typer:
    """Create and configure the update Typer app."""
    app = typer.Typer(
        name="update",
        help="Update distribution links in granule metadata",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="opendap")
    def opendap_cmd(
        path: str = typer.Argument(..., help="Granule file (.xml ECHO10 or .json UMM-G)"),
        urls: str = typer.Argument(..., help="Comma-separated OPeNDAP URLs (at most one on-prem, one cloud)"),
        output: str | None = typer.Option(None, "--output", "-o", help="Write result here instead of in place"),
    ) -> None:
        """Add or update OPeNDAP links."""
        _handle_stage_result(cmd_opendap)(path=path, urls=urls, output=output)

    @app.command(name="s3")
    def s3_cmd(
        path: str = typer.Argument(..., help="UMM-G granule file (.json)"),
        urls: str = typer.Argument(..., help="Comma-separated s3:// URLs"),
        output: str | None = typer.Option(None, "--output", "-o", help="Write result here instead of in place"),
    ) -> None:
        """Replace S3 direct-access links."""
        _handle_stage_result(cmd_s3)(path=path, urls=urls, output=output)

    return app
