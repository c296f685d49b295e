"""Link API domain: classification of caller-supplied URLs."""

from .Category import Category
from .ClassifiedUrl import ClassifiedUrl
from .classify_urls import classify_urls
from .is_cloud_url import is_cloud_url
from .LinkUpdateSet import LinkUpdateSet
from .partition_opendap_slots import OpendapSlots, partition_opendap_slots
from .UrlValidationError import UrlValidationError

__all__ = [
    "Category",
    "ClassifiedUrl",
    "LinkUpdateSet",
    "OpendapSlots",
    "UrlValidationError",
    "classify_urls",
    "is_cloud_url",
    "partition_opendap_slots",
]
