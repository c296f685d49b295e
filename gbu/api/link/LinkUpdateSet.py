"""Link update set dataclass (UNO: single model)."""

from dataclasses import dataclass

from .ClassifiedUrl import ClassifiedUrl


@dataclass(frozen=True)
class LinkUpdateSet:
    """Classified URLs of one update request.

    Holds at most one on-prem and one cloud OPeNDAP URL, and any number of
    S3 URLs in the order they were supplied.
    """

    on_prem: ClassifiedUrl | None = None
    cloud: ClassifiedUrl | None = None
    s3: tuple[ClassifiedUrl, ...] = ()

    @property
    def has_opendap(self) -> bool:
        return self.on_prem is not None or self.cloud is not None

    def urls(self) -> list[ClassifiedUrl]:
        """All URLs, OPeNDAP slots first."""
        slots = [u for u in (self.on_prem, self.cloud) if u is not None]
        return slots + list(self.s3)
