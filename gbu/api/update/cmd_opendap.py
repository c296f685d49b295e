"""OPeNDAP link update API command.

CLI: gbuc update opendap <path> <urls> [--output PATH]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._update_granule import update_granule


def cmd_opendap(path: str, urls: str, output: str | None = None) -> StageResult:
    """Update the OPeNDAP links of an ECHO10 or UMM-G granule file.

    Args:
        path: Granule file, ``.xml`` for ECHO10 or ``.json`` for UMM-G.
        urls: Comma-separated on-prem and/or Hyrax-in-the-cloud URLs.
        output: File to write; defaults to overwriting ``path``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from update_granule(result_obj, "opendap", path, urls, output)

    return StageResult(announce=f"Updating OPeNDAP links in {path}...", progress_callback=do_work)
