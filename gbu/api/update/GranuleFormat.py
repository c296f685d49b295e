"""Granule metadata formats."""

from enum import Enum
from pathlib import Path

from ..DocumentFormatError import DocumentFormatError


class GranuleFormat(str, Enum):
    ECHO10 = "echo10"
    UMM_G = "umm_g"

    @classmethod
    def from_path(cls, path: Path) -> "GranuleFormat":
        """Detect the format from the file extension."""
        suffix = path.suffix.lower()
        if suffix == ".xml":
            return cls.ECHO10
        if suffix == ".json":
            return cls.UMM_G
        raise DocumentFormatError(
            f"Cannot detect granule format of {path.name}: expected .xml (ECHO10) or .json (UMM-G)"
        )
