"""Serialize an ECHO10 granule element tree."""

from lxml import etree

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _render(node: etree._Element) -> str:
    return etree.tostring(node, encoding="unicode", with_tail=False)


def serialize_granule(document: etree._ElementTree) -> str:
    """Render the document with an XML declaration and a trailing newline.

    Comments and processing instructions around the root element stay on
    lines of their own.
    """
    root = document.getroot()
    lines = [document.docinfo.doctype] if document.docinfo.doctype else []
    lines.extend(_render(node) for node in reversed(list(root.itersiblings(preceding=True))))
    lines.append(_render(root))
    lines.extend(_render(node) for node in root.itersiblings())
    return XML_DECLARATION + "\n" + "\n".join(lines) + "\n"
