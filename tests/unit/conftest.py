"""Unit test fixtures.

Sample granules and helpers live in tests/conftest.py.
"""

import pytest

from gbu.api.config.LinkConfig import LinkConfig


@pytest.fixture
def link_config() -> LinkConfig:
    """Default link configuration."""
    return LinkConfig()
