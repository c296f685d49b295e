"""Classify a comma-separated URL list into a LinkUpdateSet."""

import logging
from urllib.parse import urlsplit

from ..config.LinkConfig import LinkConfig
from .Category import Category
from .ClassifiedUrl import ClassifiedUrl
from .LinkUpdateSet import LinkUpdateSet
from .UrlValidationError import UrlValidationError

logger = logging.getLogger(__name__)

_HTTP_SCHEMES = ("http", "https")


def _categorize(token: str, config: LinkConfig) -> Category | None:
    """Return the category of a single URL, or None if it cannot be parsed."""
    try:
        parts = urlsplit(token)
        host = parts.hostname
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if scheme == "s3":
        return Category.S3 if parts.netloc else None
    if scheme in _HTTP_SCHEMES and host:
        return Category.CLOUD if config.is_cloud_host(host) else Category.ON_PREM
    return None


def classify_urls(urls: str, config: LinkConfig | None = None) -> LinkUpdateSet:
    """Classify caller-supplied URLs.

    Args:
        urls: One or more URLs separated by commas. Surrounding whitespace of
            each URL is ignored.
        config: Link configuration holding the cloud host pattern.

    Returns:
        LinkUpdateSet with at most one on-prem and one cloud URL.

    Raises:
        UrlValidationError: With every problem found in the input.
    """
    config = config or LinkConfig()

    if urls is None or not urls.strip():
        raise UrlValidationError("No URLs supplied")

    errors: list[str] = []
    classified: list[ClassifiedUrl] = []
    for position, raw in enumerate(urls.split(","), start=1):
        token = raw.strip()
        if not token:
            errors.append(f"Empty URL at position {position} in [{urls}]")
            continue
        category = _categorize(token, config)
        if category is None:
            errors.append(f"Invalid URL [{token}]: expected http, https or s3 URL with a host")
            continue
        classified.append(ClassifiedUrl(url=token, category=category))

    on_prem = [c for c in classified if c.category is Category.ON_PREM]
    cloud = [c for c in classified if c.category is Category.CLOUD]
    s3 = tuple(c for c in classified if c.category is Category.S3)

    if len(on_prem) > 1:
        errors.append(
            "No more than one on-prem OPeNDAP URL can be provided: " + ", ".join(c.url for c in on_prem)
        )
    if len(cloud) > 1:
        errors.append(
            "No more than one Hyrax-in-the-cloud OPeNDAP URL can be provided: " + ", ".join(c.url for c in cloud)
        )

    if errors:
        raise UrlValidationError(errors)

    update_set = LinkUpdateSet(
        on_prem=on_prem[0] if on_prem else None,
        cloud=cloud[0] if cloud else None,
        s3=s3,
    )
    logger.debug("Classified %d URL(s): %s", len(classified), [(c.category.value, c.url) for c in classified])
    return update_set
