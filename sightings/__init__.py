"""
Sightings Module

Everything about the ISS sightings feed: fetching it and parsing it.

Architecture mirrors the hardware module:
- interfaces/: Abstract feed source contract
- implementations/: HTTP and mock feed sources
- models/: Sighting data structures
- parser.py: Pure feed bytes → sightings transform
"""

from sightings.implementations.http_feed_source import HTTPFeedSource
from sightings.implementations.mock_feed_source import MockFeedSource
from sightings.interfaces.feed_source_interface import (
    FeedSourceInterface,
    FeedTransportError,
)
from sightings.models.sighting import Sighting, SkyLocation
from sightings.parser import (
    BadDurationError,
    BadElevationError,
    BadSkyLocationError,
    BadTimestampError,
    MalformedFeedError,
    MissingFieldError,
    SightingParseError,
    parse_sightings,
)

# Public API - what users import
__all__ = [
    "BadDurationError",
    "BadElevationError",
    "BadSkyLocationError",
    "BadTimestampError",
    "FeedSourceInterface",
    "FeedTransportError",
    "HTTPFeedSource",
    "MalformedFeedError",
    "MissingFieldError",
    "MockFeedSource",
    "Sighting",
    "SightingParseError",
    "SkyLocation",
    "parse_sightings",
]
