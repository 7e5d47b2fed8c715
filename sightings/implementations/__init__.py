"""
Sightings Implementations Package

- HTTPFeedSource: fetches the feed with requests
- MockFeedSource: replays canned feed bytes for tests
"""

from sightings.implementations.http_feed_source import HTTPFeedSource
from sightings.implementations.mock_feed_source import MockFeedSource

__all__ = [
    "HTTPFeedSource",
    "MockFeedSource",
]
