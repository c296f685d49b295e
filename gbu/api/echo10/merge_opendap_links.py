"""Merge OPeNDAP links into the OnlineResources of an ECHO10 granule."""

import copy
import logging

from lxml import etree

from ..config.LinkConfig import LinkConfig
from ..DocumentFormatError import DocumentFormatError
from ..link.ClassifiedUrl import ClassifiedUrl
from ..link.LinkUpdateSet import LinkUpdateSet
from ..link.partition_opendap_slots import partition_opendap_slots
from ._layout import indent_subtree, whitespace_before
from .GRANULE_ELEMENT_ORDER import elements_after
from .parse_granule import GRANULE_TAG
from .ResourceEntry import ResourceEntry

logger = logging.getLogger(__name__)

CONTAINER_TAG = "OnlineResources"
ENTRY_TAG = "OnlineResource"


def _new_resource(url: str, resource_type: str) -> etree._Element:
    resource = etree.Element(ENTRY_TAG)
    etree.SubElement(resource, "URL").text = url
    etree.SubElement(resource, "Type").text = resource_type
    return resource


def _fill_slot(
    update: ClassifiedUrl | None, existing: ResourceEntry | None, config: LinkConfig
) -> etree._Element | None:
    """Build the node for one slot.

    An updated existing entry keeps everything but its URL, so a sub-format
    type such as "GET DATA : OPENDAP DATA (DODS)" survives.
    """
    if update is None:
        return copy.deepcopy(existing.node) if existing is not None else None
    if existing is None:
        return _new_resource(update.url, config.opendap_type)

    node = copy.deepcopy(existing.node)
    url = node.find("URL")
    if url is None:
        url = etree.Element("URL")
        node.insert(0, url)
    url.text = update.url
    return node


def _insertion_index(granule: etree._Element) -> int:
    """Index of the first child that the schema orders after OnlineResources."""
    followers = elements_after(CONTAINER_TAG)
    for index, child in enumerate(granule):
        if child.tag in followers:
            return index
    return len(granule)


def _splice(granule: etree._Element, index: int, container: etree._Element) -> None:
    """Insert ``container`` at ``index`` keeping sibling whitespace intact."""
    if index < len(granule):
        container.tail = whitespace_before(granule, index)
        granule.insert(index, container)
        return

    if len(granule):
        last = granule[-1]
        container.tail = last.tail
        last.tail = whitespace_before(granule, len(granule) - 1)
    granule.append(container)


def merge_opendap_links(
    document: etree._ElementTree,
    updates: LinkUpdateSet,
    config: LinkConfig | None = None,
) -> etree._ElementTree:
    """Return a copy of an ECHO10 granule with its OPeNDAP links updated.

    The rewritten OnlineResources holds the on-prem slot, the cloud slot, then
    every other existing OnlineResource in document order. An existing
    container stays where it is; a new one is placed before the first sibling
    the ECHO10 schema orders after it, or appended.

    Args:
        document: Parsed granule. It is not modified.
        updates: Classified URLs; only the on-prem and cloud members apply.
        config: Link configuration (cloud host pattern and OPeNDAP type).

    Returns:
        New element tree.

    Raises:
        DocumentFormatError: If the root element is not Granule
    """
    config = config or LinkConfig()
    result = copy.deepcopy(document)
    granule = result.getroot()
    if granule is None or granule.tag != GRANULE_TAG:
        raise DocumentFormatError(f"Expected ECHO10 root element <{GRANULE_TAG}>")

    if not updates.has_opendap:
        logger.debug("No OPeNDAP URLs in update, granule left unchanged")
        return result

    container = granule.find(CONTAINER_TAG)
    entries = [ResourceEntry.from_element(e) for e in container.iterfind(ENTRY_TAG)] if container is not None else []
    slots = partition_opendap_slots(
        entries,
        is_opendap=lambda e: e.is_opendap(config.opendap_type),
        url_of=lambda e: e.url,
        config=config,
    )
    logger.debug(
        "Existing OnlineResources: on_prem=%s cloud=%s others=%d",
        slots.on_prem.url if slots.on_prem else None,
        slots.cloud.url if slots.cloud else None,
        len(slots.others),
    )

    attrib = dict(container.attrib) if container is not None else {}
    new_container = etree.Element(CONTAINER_TAG, attrib=attrib)
    for node in (_fill_slot(updates.on_prem, slots.on_prem, config), _fill_slot(updates.cloud, slots.cloud, config)):
        if node is not None:
            new_container.append(node)
    for entry in slots.others:
        new_container.append(copy.deepcopy(entry.node))

    if container is not None:
        index = granule.index(container)
        new_container.tail = container.tail
        granule.replace(container, new_container)
    else:
        index = _insertion_index(granule)
        _splice(granule, index, new_container)

    indent_subtree(new_container, whitespace_before(granule, index))
    return result
