"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register markers applied by location."""
    config.addinivalue_line("markers", "unit: fast tests of a single API unit")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample granules
# =============================================================================

ECHO10_NO_RESOURCES = """<Granule>
  <GranuleUR>Q2011143115400.L1A_SCI</GranuleUR>
  <InsertTime>2011-08-26T11:10:44.490Z</InsertTime>
  <Collection>
    <EntryId>AQUARIUS_L1A_SSS</EntryId>
  </Collection>
</Granule>"""

ECHO10_WITH_ORDERABLE = """<Granule>
  <GranuleUR>Q2011143115400.L1A_SCI</GranuleUR>
  <Collection>
    <EntryId>AQUARIUS_L1A_SSS</EntryId>
  </Collection>
  <Orderable>false</Orderable>
</Granule>"""

ECHO10_EMPTY_RESOURCES = """<Granule>
  <GranuleUR>Q2011143115400.L1A_SCI</GranuleUR>
  <Collection>
    <EntryId>AQUARIUS_L1A_SSS</EntryId>
  </Collection>
  <OnlineResources/>
  <Orderable>false</Orderable>
</Granule>"""


def online_resource(url: str, resource_type: str) -> str:
    return f"<OnlineResource><URL>{url}</URL><Type>{resource_type}</Type></OnlineResource>"


DOC = ("http://example.com/doc", "Documentation")
BROWSE = ("http://example.com/Browse", "Browse")
ON_PREM = ("http://example.com/to_be_updated", "GET DATA : OPENDAP DATA")
CLOUD = ("https://opendap.earthdata.nasa.gov/to_be_updated", "GET DATA : OPENDAP DATA")


def echo10_granule(*resources: tuple[str, str]) -> str:
    """ECHO10 granule holding the given (URL, Type) OnlineResources before Orderable."""
    entries = "\n    ".join(online_resource(url, resource_type) for url, resource_type in resources)
    return f"""<Granule>
  <GranuleUR>Q2011143115400.L1A_SCI</GranuleUR>
  <Collection>
    <EntryId>AQUARIUS_L1A_SSS</EntryId>
  </Collection>
  <OnlineResources>
    {entries}
  </OnlineResources>
  <Orderable>false</Orderable>
</Granule>"""


DOC_RELATED_URL = {
    "URL": "http://example.com/doc.html",
    "Type": "VIEW RELATED INFORMATION",
    "Subtype": "USER'S GUIDE",
    "Description": "ORNL DAAC Data Set Documentation",
    "Format": "HTML",
    "MimeType": "text/html",
}

S3_RELATED_URLS = [
    DOC_RELATED_URL,
    {
        "URL": "s3://abc/to_be_updated",
        "Type": "GET DATA VIA DIRECT ACCESS",
        "Subtype": "MAP",
        "Description": "some S3 description",
    },
    {
        "URL": "s3://abc/to_be_updated_2",
        "Type": "GET DATA VIA DIRECT ACCESS",
        "Description": "other s3 link",
    },
]

S3_DESCRIPTION = "This link provides direct download access via S3 to the granule."


def s3_entry(url: str) -> dict:
    return {"URL": url, "Type": "GET DATA VIA DIRECT ACCESS", "Description": S3_DESCRIPTION}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def gbu_home(tmp_path: Path, monkeypatch) -> Path:
    """Point GBU_HOME at an empty directory so no user config leaks into tests."""
    home = tmp_path / ".gbu"
    home.mkdir()
    monkeypatch.setenv("GBU_HOME", str(home))
    return home


@pytest.fixture
def write_config(gbu_home: Path):
    """Write a config.json into GBU_HOME."""

    def _write(config: dict) -> Path:
        path = gbu_home / "config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    """Pytest fixture exposing run_cmd."""
    return run_cmd
