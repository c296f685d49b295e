"""Replace the S3 direct-access links of a UMM-G granule."""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from ..config.LinkConfig import LinkConfig
from ..link.LinkUpdateSet import LinkUpdateSet
from ._related_urls import related_urls

logger = logging.getLogger(__name__)


def merge_s3_links(
    record: Mapping[str, Any],
    updates: LinkUpdateSet,
    config: LinkConfig | None = None,
) -> dict[str, Any]:
    """Return a copy of a UMM-G record whose S3 links are the update's S3 URLs.

    Every existing direct-access entry is dropped, however many there were,
    even when the update carries no S3 URLs.
    New entries come first in the order supplied, followed by the remaining
    RelatedUrls in their original order. New entries always take the
    canonical type and description.

    Args:
        record: UMM-G granule record. It is not modified.
        updates: Classified URLs; only the S3 members apply.
        config: Link configuration (S3 type and description).

    Returns:
        New record.
    """
    config = config or LinkConfig()
    result = copy.deepcopy(dict(record))
    existing = related_urls(result)
    others = [entry for entry in existing if entry.get("Type") != config.s3_type]
    new_entries = [{"URL": u.url, "Type": config.s3_type, "Description": config.s3_description} for u in updates.s3]
    logger.debug("Replacing %d S3 link(s) with %d", len(existing) - len(others), len(new_entries))

    result["RelatedUrls"] = new_entries + others
    return result
