"""UMM-G granule link merging."""

from .merge_opendap_links import merge_opendap_links
from .merge_s3_links import merge_s3_links
from .parse_granule import parse_granule
from .serialize_granule import serialize_granule

__all__ = ["merge_opendap_links", "merge_s3_links", "parse_granule", "serialize_granule"]
