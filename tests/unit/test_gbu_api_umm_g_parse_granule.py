"""Unit tests for gbu.api.umm_g parse and serialize."""

import pytest

from gbu.api.DocumentFormatError import DocumentFormatError
from gbu.api.umm_g import parse_granule, serialize_granule


def test_parse_and_serialize():
    record = parse_granule('{"GranuleUR": "G1", "RelatedUrls": []}')
    assert record == {"GranuleUR": "G1", "RelatedUrls": []}
    assert serialize_granule(record) == '{\n  "GranuleUR": "G1",\n  "RelatedUrls": []\n}\n'


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("{", "Invalid UMM-G granule JSON"),
        ("[]", "must be a JSON object"),
        ('{"RelatedUrls": {}}', "must be a list of objects"),
        ('{"RelatedUrls": ["http://x"]}', "must be a list of objects"),
    ],
)
def test_parse_rejects(text, message):
    with pytest.raises(DocumentFormatError, match=message):
        parse_granule(text)
