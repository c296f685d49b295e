from collections.abc import Mapping
from typing import Any


def related_urls(record: Mapping[str, Any]) -> list[dict[str, Any]]:
    """RelatedUrls of a record; an absent or null field is empty."""
    return list(record.get("RelatedUrls") or [])
