"""Merge OPeNDAP links into the RelatedUrls of a UMM-G granule."""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from ..config.LinkConfig import LinkConfig
from ..link.ClassifiedUrl import ClassifiedUrl
from ..link.LinkUpdateSet import LinkUpdateSet
from ..link.partition_opendap_slots import partition_opendap_slots
from ._related_urls import related_urls

logger = logging.getLogger(__name__)


def _fill_slot(
    update: ClassifiedUrl | None, existing: dict[str, Any] | None, config: LinkConfig
) -> dict[str, Any] | None:
    if update is None:
        return existing
    if existing is None:
        return {"URL": update.url, "Type": config.umm_g_opendap_type, "Subtype": config.umm_g_opendap_subtype}
    return {**existing, "URL": update.url}


def merge_opendap_links(
    record: Mapping[str, Any],
    updates: LinkUpdateSet,
    config: LinkConfig | None = None,
) -> dict[str, Any]:
    """Return a copy of a UMM-G record with its OPeNDAP links updated.

    Same slot rules as for ECHO10: ``[on_prem?, cloud?, ...others]``, the
    first OPeNDAP entry of each kind holds the slot, and an updated entry
    keeps every key but URL.
    """
    config = config or LinkConfig()
    result = copy.deepcopy(dict(record))
    if not updates.has_opendap:
        logger.debug("No OPeNDAP URLs in update, record left unchanged")
        return result

    subtype = config.umm_g_opendap_subtype.upper()
    slots = partition_opendap_slots(
        related_urls(result),
        is_opendap=lambda e: str(e.get("Subtype") or "").upper() == subtype,
        url_of=lambda e: str(e.get("URL") or ""),
        config=config,
    )

    merged = [_fill_slot(updates.on_prem, slots.on_prem, config), _fill_slot(updates.cloud, slots.cloud, config)]
    result["RelatedUrls"] = [entry for entry in merged if entry is not None] + slots.others
    return result
