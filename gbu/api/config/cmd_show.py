"""Config show API command.

CLI: gbuc config
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_show() -> StageResult:
    """Show the effective configuration."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .GbuConfig import GbuConfig

        yield (0.2, "Loading configuration...")
        path = GbuConfig.get_config_path()
        try:
            config = GbuConfig.load()
        except ValueError as e:
            result_obj.output = {"path": str(path), "exists": path.exists(), "content": {}, "errors": [str(e)]}
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = {"path": str(path), "exists": path.exists(), "content": config.to_dict(), "errors": []}
        result_obj.result = f"Configuration loaded from {path}" if path.exists() else "Using default configuration"
        result_obj.success = True

    return StageResult(announce="Loading configuration...", progress_callback=do_work)
