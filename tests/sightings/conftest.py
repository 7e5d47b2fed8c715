"""
Sightings Test Fixtures

The realistic NASA feed (nasa_feed_bytes) lives in tests/conftest.py so the
scheduler tests can use it too.
"""

import pytest

from sightings.implementations.mock_feed_source import MockFeedSource


@pytest.fixture
def mock_feed_source(nasa_feed_bytes):
    """MockFeedSource serving the realistic feed on every fetch."""
    source = MockFeedSource(nasa_feed_bytes)
    yield source
    source.close()
