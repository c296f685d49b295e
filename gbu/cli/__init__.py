"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from gbu.api.config.GbuConfig import GbuConfig
    from gbu.cli._create_app import _create_app
    from gbu.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    try:
        level = GbuConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level)

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
