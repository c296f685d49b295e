"""Unit tests for gbu.api.echo10 parse and serialize."""

import pytest

from gbu.api.DocumentFormatError import DocumentFormatError
from gbu.api.echo10 import GRANULE_ELEMENT_ORDER, ResourceEntry, parse_granule, serialize_granule
from gbu.api.echo10.GRANULE_ELEMENT_ORDER import elements_after
from tests.conftest import ECHO10_NO_RESOURCES


def test_parse_accepts_str_and_bytes():
    assert parse_granule(ECHO10_NO_RESOURCES).getroot().tag == "Granule"
    assert parse_granule(ECHO10_NO_RESOURCES.encode("utf-8")).getroot().tag == "Granule"


def test_parse_accepts_declaration_in_str():
    document = parse_granule('<?xml version="1.0" encoding="UTF-8"?>\n<Granule/>')
    assert document.getroot().tag == "Granule"


@pytest.mark.parametrize("xml", ["", "<Granule>", "<Granule><a></b></Granule>", "not xml"])
def test_malformed_xml(xml):
    with pytest.raises(DocumentFormatError, match="Invalid ECHO10 granule XML"):
        parse_granule(xml)


def test_wrong_root():
    with pytest.raises(DocumentFormatError, match="found <Collection>"):
        parse_granule("<Collection/>")


def test_serialize_round_trip_keeps_whitespace():
    assert serialize_granule(parse_granule(ECHO10_NO_RESOURCES)) == (
        '<?xml version="1.0" encoding="UTF-8"?>\n' + ECHO10_NO_RESOURCES + "\n"
    )


def test_serialize_keeps_comments_around_root_on_own_lines():
    xml = "<!-- top -->\n<?stylesheet href='g.xsl'?>\n" + ECHO10_NO_RESOURCES + "\n<!-- bottom -->"
    assert serialize_granule(parse_granule(xml)) == '<?xml version="1.0" encoding="UTF-8"?>\n' + xml + "\n"


def test_elements_after_online_resources():
    followers = elements_after("OnlineResources")
    assert "Orderable" in followers
    assert "AssociatedBrowseImageUrls" in followers
    assert "OnlineAccessURLs" not in followers
    assert "OnlineResources" not in followers
    assert len(GRANULE_ELEMENT_ORDER) == len(set(GRANULE_ELEMENT_ORDER))


def test_resource_entry_from_element():
    document = parse_granule(
        "<Granule><OnlineResources><OnlineResource>"
        "<URL> http://example.com/x </URL><Description>d</Description>"
        "<Type>GET DATA : OPENDAP DATA (DODS)</Type>"
        "</OnlineResource></OnlineResources></Granule>"
    )
    entry = ResourceEntry.from_element(document.getroot().find("OnlineResources/OnlineResource"))
    assert entry.url == "http://example.com/x"
    assert entry.description == "d"
    assert entry.mime_type is None
    assert entry.is_opendap("GET DATA : OPENDAP DATA")
    assert not ResourceEntry(url="u", type="Browse").is_opendap("GET DATA : OPENDAP DATA")
