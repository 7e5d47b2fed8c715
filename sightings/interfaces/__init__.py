"""
Sightings Interfaces Package
"""

from sightings.interfaces.feed_source_interface import (
    FeedSourceInterface,
    FeedTransportError,
)

__all__ = [
    "FeedSourceInterface",
    "FeedTransportError",
]
