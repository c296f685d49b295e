"""Parse UMM-G granule JSON."""

import json
from typing import Any

from ..DocumentFormatError import DocumentFormatError


def parse_granule(text: str | bytes) -> dict[str, Any]:
    """Parse UMM-G granule metadata into a record.

    Raises:
        DocumentFormatError: If the text is not JSON, is not an object, or its
            RelatedUrls is not a list of objects
    """
    try:
        record = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentFormatError(f"Invalid UMM-G granule JSON: {e}") from e

    if not isinstance(record, dict):
        raise DocumentFormatError(f"UMM-G granule must be a JSON object, found {type(record).__name__}")

    related_urls = record.get("RelatedUrls")
    if related_urls is not None:
        if not isinstance(related_urls, list) or not all(isinstance(u, dict) for u in related_urls):
            raise DocumentFormatError("UMM-G RelatedUrls must be a list of objects")
    return record
