"""
Sighting Parser

Turns the raw bytes of a "Spot the Station" RSS feed into Sighting records.

Pipeline:
    bytes → RSS items → items titled "ISS Sighting" → description fields
          → Sighting → sorted by time

Pure: no I/O, same bytes in, same sightings out. Any malformed sighting item
raises a specific SightingParseError subclass instead of being skipped.
"""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Dict, List, Optional, Union

import pytz

from sightings.constants import (
    COMPASS_POINTS,
    DEFAULT_TIMEZONE,
    DESCRIPTION_LINE_PREFIX,
    DESCRIPTION_LINE_SUFFIX,
    DESCRIPTION_SEPARATOR,
    DURATION_PATTERN,
    FIELD_APPROACH,
    FIELD_DATE,
    FIELD_DEPARTURE,
    FIELD_DURATION,
    FIELD_MAX_ELEVATION,
    FIELD_TIME,
    MAX_ELEVATION,
    MAX_ELEVATION_PATTERN,
    MIN_ELEVATION,
    REQUIRED_FIELDS,
    SKY_LOCATION_PATTERN,
    TIMESTAMP_FORMAT,
    TITLE_MARKER,
)
from sightings.models.sighting import Sighting, SkyLocation

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, pytz.BaseTzInfo]


# =============================================================================
# ERRORS
# =============================================================================


class SightingParseError(Exception):
    """Base class for everything that can go wrong turning a feed into sightings"""


class MalformedFeedError(SightingParseError):
    """Feed bytes are not an RSS document"""


class MissingFieldError(SightingParseError):
    """A sighting description lacks a required field"""

    def __init__(self, field: str):
        super().__init__(f"Sighting description has no '{field}' field")
        self.field = field


class BadTimestampError(SightingParseError):
    """Date + Time do not match the feed's timestamp format"""


class BadSkyLocationError(SightingParseError):
    """Approach/Departure is not '<degrees>° above <compass point>'"""


class BadDurationError(SightingParseError):
    """Duration is not '<n> minute(s)'"""


class BadElevationError(SightingParseError):
    """Maximum Elevation is not '<degrees>°' within 0-90"""


# =============================================================================
# FIELD PARSERS
# =============================================================================


def _resolve_timezone(tz: Optional[TimezoneLike]) -> pytz.BaseTzInfo:
    if tz is None:
        tz = DEFAULT_TIMEZONE
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def _check_elevation(elevation: int) -> bool:
    return MIN_ELEVATION <= elevation <= MAX_ELEVATION


def parse_timestamp(
    date: str,
    time: str,
    tz: Optional[TimezoneLike] = None,
) -> datetime:
    """
    Parse the feed's Date and Time fields into an aware datetime.

    Args:
        date: e.g. "Friday Jan 03, 2025"
        time: e.g. "9:45 PM"
        tz: Timezone the feed is written in (name or pytz zone)

    Returns:
        Timezone-aware datetime localized in `tz`

    Raises:
        BadTimestampError: If the text does not match TIMESTAMP_FORMAT
    """
    text = f"{date} {time}"
    try:
        naive = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise BadTimestampError(f"Cannot parse timestamp '{text}': {e}") from e

    return _resolve_timezone(tz).localize(naive)


def parse_sky_location(text: str) -> SkyLocation:
    """
    Parse "10° above NW" into a SkyLocation.

    Raises:
        BadSkyLocationError: On pattern mismatch, unknown compass point or
            elevation outside 0-90
    """
    match = SKY_LOCATION_PATTERN.fullmatch(text.strip())
    if match is None:
        raise BadSkyLocationError(f"Cannot parse sky location '{text}'")

    direction = match["direction"]
    elevation = int(match["elevation"])

    if direction not in COMPASS_POINTS:
        raise BadSkyLocationError(f"Unknown compass direction '{direction}' in '{text}'")
    if not _check_elevation(elevation):
        raise BadSkyLocationError(f"Elevation {elevation}° out of range in '{text}'")

    return SkyLocation(direction=direction, elevation=elevation)


def parse_duration(text: str) -> int:
    """
    Parse "6 minutes" into 6.

    Raises:
        BadDurationError: If no "<n> minute" is found
    """
    match = DURATION_PATTERN.search(text)
    if match is None:
        raise BadDurationError(f"Cannot parse duration '{text}'")
    return int(match["duration"])


def parse_max_elevation(text: str) -> int:
    """
    Parse "52°" into 52.

    Raises:
        BadElevationError: On pattern mismatch or value outside 0-90
    """
    match = MAX_ELEVATION_PATTERN.fullmatch(text.strip())
    if match is None:
        raise BadElevationError(f"Cannot parse maximum elevation '{text}'")

    elevation = int(match["elevation"])
    if not _check_elevation(elevation):
        raise BadElevationError(f"Maximum elevation {elevation}° out of range")
    return elevation


# =============================================================================
# DESCRIPTION → SIGHTING
# =============================================================================


def description_to_fields(description: str) -> Dict[str, str]:
    """
    Split an item description into its "Key: Value" fields.

    Each line loses its leading tabs and trailing " <br/>", then splits on the
    first ": ". Lines without a separator are ignored.

    Example:
        description_to_fields("Date: Friday Jan 3, 2025 <br/>\\n\\tTime: 9:45 PM <br/>")
        # {'Date': 'Friday Jan 3, 2025', 'Time': '9:45 PM'}
    """
    fields = {}
    for line in description.split("\n"):
        line = line.lstrip(DESCRIPTION_LINE_PREFIX).rstrip()
        line = line.removesuffix(DESCRIPTION_LINE_SUFFIX)

        key, separator, value = line.partition(DESCRIPTION_SEPARATOR)
        if not separator:
            continue
        fields[key] = value
    return fields


def fields_to_sighting(
    fields: Dict[str, str],
    tz: Optional[TimezoneLike] = None,
) -> Sighting:
    """
    Build a Sighting from description fields.

    Raises:
        MissingFieldError: If a required field is absent
        BadTimestampError, BadSkyLocationError, BadDurationError,
        BadElevationError: If a field value is malformed
    """
    for field in REQUIRED_FIELDS:
        if field not in fields:
            raise MissingFieldError(field)

    return Sighting(
        when=parse_timestamp(fields[FIELD_DATE], fields[FIELD_TIME], tz),
        approach=parse_sky_location(fields[FIELD_APPROACH]),
        departure=parse_sky_location(fields[FIELD_DEPARTURE]),
        duration_minutes=parse_duration(fields[FIELD_DURATION]),
        max_elevation_degrees=parse_max_elevation(fields[FIELD_MAX_ELEVATION]),
    )


def parse_sightings(
    raw: bytes,
    tz: Optional[TimezoneLike] = None,
) -> List[Sighting]:
    """
    Parse a raw RSS feed into sightings, earliest first.

    Args:
        raw: Feed bytes as returned by the feed source
        tz: Timezone of the feed's local times (defaults to FEED_TIMEZONE)

    Returns:
        Sightings sorted by time; ties keep feed order

    Raises:
        SightingParseError: Subclass naming what was malformed
    """
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise MalformedFeedError(f"Feed is not valid XML: {e}") from e

    channel = root if root.tag == "channel" else root.find("channel")
    if channel is None:
        raise MalformedFeedError(f"Feed has no <channel> (root is <{root.tag}>)")

    zone = _resolve_timezone(tz)
    sightings = []
    for item in channel.findall("item"):
        title = item.findtext("title")
        if not title or TITLE_MARKER not in title:
            continue

        description = item.findtext("description")
        if description is None:
            raise MissingFieldError("description")

        sightings.append(fields_to_sighting(description_to_fields(description), zone))

    sightings.sort(key=lambda sighting: sighting.when)

    logger.debug(f"Parsed {len(sightings)} sightings from {len(raw)} bytes")
    return sightings
