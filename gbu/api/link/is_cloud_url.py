from urllib.parse import urlsplit

from ..config.LinkConfig import LinkConfig


def is_cloud_url(url: str, config: LinkConfig | None = None) -> bool:
    """Return True if the URL's host is a Hyrax-in-the-cloud host.

    Unparseable URLs are never cloud URLs.
    """
    config = config or LinkConfig()
    try:
        host = urlsplit(url.strip()).hostname
    except ValueError:
        return False
    return config.is_cloud_host(host)
