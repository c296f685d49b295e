"""Parse ECHO10 granule XML."""

from lxml import etree

from ..DocumentFormatError import DocumentFormatError

GRANULE_TAG = "Granule"


def parse_granule(xml: str | bytes) -> etree._ElementTree:
    """Parse ECHO10 granule metadata into an element tree.

    Whitespace between elements is kept so untouched parts of the document
    serialize back unchanged.

    Raises:
        DocumentFormatError: If the XML is malformed or its root is not Granule
    """
    data = xml.encode("utf-8") if isinstance(xml, str) else xml
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise DocumentFormatError(f"Invalid ECHO10 granule XML: {e}") from e

    if root.tag != GRANULE_TAG:
        raise DocumentFormatError(f"Expected ECHO10 root element <{GRANULE_TAG}>, found <{root.tag}>")
    return root.getroottree()
