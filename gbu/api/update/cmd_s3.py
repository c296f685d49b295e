"""S3 link update API command.

CLI: gbuc update s3 <path> <urls> [--output PATH]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._update_granule import update_granule


def cmd_s3(path: str, urls: str, output: str | None = None) -> StageResult:
    """Replace the S3 direct-access links of a UMM-G granule file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from update_granule(result_obj, "s3", path, urls, output)

    return StageResult(announce=f"Updating S3 links in {path}...", progress_callback=do_work)
