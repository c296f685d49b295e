"""ECHO10 granule link merging."""

from .GRANULE_ELEMENT_ORDER import GRANULE_ELEMENT_ORDER
from .merge_opendap_links import merge_opendap_links
from .parse_granule import parse_granule
from .ResourceEntry import ResourceEntry
from .serialize_granule import serialize_granule

__all__ = [
    "GRANULE_ELEMENT_ORDER",
    "ResourceEntry",
    "merge_opendap_links",
    "parse_granule",
    "serialize_granule",
]
