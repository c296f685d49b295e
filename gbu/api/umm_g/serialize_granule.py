"""Serialize a UMM-G granule record."""

import json
from typing import Any


def serialize_granule(record: dict[str, Any]) -> str:
    """Render the record as indented JSON with a trailing newline."""
    return json.dumps(record, indent=2, ensure_ascii=False) + "\n"
