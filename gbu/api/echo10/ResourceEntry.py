"""ECHO10 OnlineResource entry (UNO: single model)."""

from dataclasses import dataclass, field

from lxml import etree


@dataclass(frozen=True)
class ResourceEntry:
    """An OnlineResource read from a granule, with its original node."""

    url: str
    type: str
    description: str | None = None
    mime_type: str | None = None
    node: etree._Element | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_element(cls, element: etree._Element) -> "ResourceEntry":
        """Read an OnlineResource element."""
        return cls(
            url=(element.findtext("URL") or "").strip(),
            type=(element.findtext("Type") or "").strip(),
            description=element.findtext("Description"),
            mime_type=element.findtext("MimeType"),
            node=element,
        )

    def is_opendap(self, marker: str) -> bool:
        """True if the type carries the OPeNDAP marker, with or without a sub-format suffix."""
        return marker.upper() in self.type.upper()
