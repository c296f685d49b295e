"""Shared work of the update commands: read, classify, merge, write."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Literal

from ..config.GbuConfig import GbuConfig
from ..DocumentFormatError import DocumentFormatError
from ..echo10 import merge_opendap_links as merge_echo10_opendap
from ..echo10 import parse_granule as parse_echo10
from ..echo10 import serialize_granule as serialize_echo10
from ..link.classify_urls import classify_urls
from ..link.LinkUpdateSet import LinkUpdateSet
from ..link.UrlValidationError import UrlValidationError
from ..StageResult import StageResult
from ..umm_g import merge_opendap_links as merge_umm_g_opendap
from ..umm_g import merge_s3_links
from ..umm_g import parse_granule as parse_umm_g
from ..umm_g import serialize_granule as serialize_umm_g
from .GranuleFormat import GranuleFormat
from .UpdateOutput import UpdateOutput
from ._write_granule import write_granule

logger = logging.getLogger(__name__)

LinkKind = Literal["opendap", "s3"]


def _check_applicable(kind: LinkKind, granule_format: GranuleFormat, updates: LinkUpdateSet) -> None:
    if kind == "opendap":
        if updates.s3:
            s3_urls = ", ".join(u.url for u in updates.s3)
            raise UrlValidationError(f"S3 URLs cannot be used in an OPeNDAP link update: {s3_urls}")
        return

    if granule_format is GranuleFormat.ECHO10:
        raise DocumentFormatError("S3 link update is only supported for UMM-G granules")
    if updates.has_opendap:
        others = [u.url for u in (updates.on_prem, updates.cloud) if u is not None]
        raise UrlValidationError("Only s3:// URLs can be used in an S3 link update: " + ", ".join(others))


def _merge(
    kind: LinkKind, granule_format: GranuleFormat, text: str, updates: LinkUpdateSet, config: GbuConfig
) -> tuple[str, list[str]]:
    """Merge and serialize; returns the new document text and its link URLs."""
    if granule_format is GranuleFormat.ECHO10:
        document = merge_echo10_opendap(parse_echo10(text), updates, config.links)
        container = document.getroot().find("OnlineResources")
        links = [e.findtext("URL") or "" for e in container.iterfind("OnlineResource")] if container is not None else []
        return serialize_echo10(document), links

    merge = merge_s3_links if kind == "s3" else merge_umm_g_opendap
    record = merge(parse_umm_g(text), updates, config.links)
    return serialize_umm_g(record), [str(u.get("URL", "")) for u in record.get("RelatedUrls", [])]


def update_granule(
    result_obj: StageResult, kind: LinkKind, path: str, urls: str, output: str | None
) -> Iterator[tuple[float, str]]:
    """Progress generator run by ``cmd_opendap`` and ``cmd_s3``."""
    source = Path(path).expanduser()
    target = Path(output).expanduser() if output else source
    out: dict[str, Any] = {
        "path": str(source),
        "output_path": None,
        "format": None,
        "urls": [],
        "links": [],
        "errors": [],
    }

    try:
        yield (0.1, "Loading configuration...")
        config = GbuConfig.load()

        yield (0.2, "Classifying URLs...")
        updates = classify_urls(urls, config.links)
        out["urls"] = [{"url": u.url, "category": u.category.value} for u in updates.urls()]

        yield (0.4, f"Reading {source.name}...")
        granule_format = GranuleFormat.from_path(source)
        out["format"] = granule_format.value
        _check_applicable(kind, granule_format, updates)
        text = source.read_text(encoding="utf-8")

        yield (0.6, f"Merging {kind} links...")
        updated, links = _merge(kind, granule_format, text, updates, config)
        out["links"] = links

        yield (0.8, f"Writing {target.name}...")
        write_granule(updated, target)
        out["output_path"] = str(target)
    except (UrlValidationError, DocumentFormatError, OSError, ValueError) as e:
        errors = e.errors if isinstance(e, UrlValidationError) else [str(e)]
        logger.warning("Link update of %s failed: %s", source, "; ".join(errors))
        out["errors"] = errors
        result_obj.output = UpdateOutput(**out).model_dump(mode="python")
        result_obj.result = f"Failed to update {kind} links in {source.name}: {errors[0]}"
        result_obj.success = False
        return

    yield (1.0, "Complete")
    logger.info("Updated %s links in %s -> %s", kind, source, target)
    result_obj.output = UpdateOutput(**out).model_dump(mode="python")
    result_obj.result = f"Updated {kind} links in {source.name} ({len(links)} links)"
    result_obj.success = True
