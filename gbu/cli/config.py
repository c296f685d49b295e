"""Config Typer app factory."""

import typer

from gbu.api.config.cmd_show import cmd_show
from gbu.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show the effective configuration."""
        if ctx.invoked_subcommand is None:
            _handle_stage_result(cmd_show)()

    return app
