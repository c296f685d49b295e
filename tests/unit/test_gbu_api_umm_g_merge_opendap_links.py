"""Unit tests for gbu.api.umm_g.merge_opendap_links."""

from gbu.api.link import classify_urls
from gbu.api.umm_g import merge_opendap_links
from tests.conftest import DOC_RELATED_URL

ON_PREM = {
    "URL": "http://example.com/to_be_updated",
    "Type": "USE SERVICE API",
    "Subtype": "OPENDAP DATA",
    "Description": "OPeNDAP request URL",
}
CLOUD = {
    "URL": "https://opendap.earthdata.nasa.gov/to_be_updated",
    "Type": "USE SERVICE API",
    "Subtype": "OPENDAP DATA",
}


def _new(url: str) -> dict:
    return {"URL": url, "Type": "USE SERVICE API", "Subtype": "OPENDAP DATA"}


def test_added_to_record_without_related_urls():
    result = merge_opendap_links({"GranuleUR": "G1"}, classify_urls("http://example.com/foo"))
    assert result == {"GranuleUR": "G1", "RelatedUrls": [_new("http://example.com/foo")]}


def test_on_prem_updated_keeps_other_keys_and_moves_first():
    record = {"RelatedUrls": [DOC_RELATED_URL, ON_PREM]}
    result = merge_opendap_links(record, classify_urls("http://example.com/foo"))
    assert result["RelatedUrls"] == [{**ON_PREM, "URL": "http://example.com/foo"}, DOC_RELATED_URL]


def test_cloud_update_keeps_on_prem():
    record = {"RelatedUrls": [ON_PREM, DOC_RELATED_URL]}
    result = merge_opendap_links(record, classify_urls("https://opendap.earthdata.nasa.gov/foo"))
    assert result["RelatedUrls"] == [ON_PREM, _new("https://opendap.earthdata.nasa.gov/foo"), DOC_RELATED_URL]


def test_both_updated():
    record = {"RelatedUrls": [DOC_RELATED_URL, CLOUD, ON_PREM]}
    updates = classify_urls("https://opendap.earthdata.nasa.gov/foo, http://example.com/foo")
    result = merge_opendap_links(record, updates)
    assert [u["URL"] for u in result["RelatedUrls"]] == [
        "http://example.com/foo",
        "https://opendap.earthdata.nasa.gov/foo",
        DOC_RELATED_URL["URL"],
    ]
    assert merge_opendap_links(result, updates) == result
    assert record["RelatedUrls"][2] == ON_PREM


def test_s3_only_update_is_a_no_op():
    record = {"RelatedUrls": [ON_PREM]}
    assert merge_opendap_links(record, classify_urls("s3://abc/foo")) == record
