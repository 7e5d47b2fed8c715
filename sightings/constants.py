"""
Sightings Constants

Field names, formats and patterns of the NASA "Spot the Station" RSS feed.

A sighting item's description looks like:

    Date: Friday Jan 3, 2025 <br/>
    \tTime: 9:45 PM <br/>
    \tDuration: 6 minutes <br/>
    \tMaximum Elevation: 52° <br/>
    \tApproach: 10° above NW <br/>
    \tDeparture: 45° above NE <br/>
"""

import re

from config.settings import FEED_TIMEZONE, FEED_TITLE_MARKER

# =============================================================================
# FEED STRUCTURE
# =============================================================================

# Import from central config.settings to maintain single source of truth
TITLE_MARKER = FEED_TITLE_MARKER
DEFAULT_TIMEZONE = FEED_TIMEZONE

# Description line convention
DESCRIPTION_LINE_PREFIX = "\t"
DESCRIPTION_LINE_SUFFIX = " <br/>"
DESCRIPTION_SEPARATOR = ": "


# =============================================================================
# DESCRIPTION FIELDS
# =============================================================================

FIELD_DATE = "Date"
FIELD_TIME = "Time"
FIELD_APPROACH = "Approach"
FIELD_DEPARTURE = "Departure"
FIELD_DURATION = "Duration"
FIELD_MAX_ELEVATION = "Maximum Elevation"

REQUIRED_FIELDS = (
    FIELD_DATE,
    FIELD_TIME,
    FIELD_APPROACH,
    FIELD_DEPARTURE,
    FIELD_DURATION,
    FIELD_MAX_ELEVATION,
)


# =============================================================================
# VALUE FORMATS
# =============================================================================

# "Friday Jan 03, 2025 9:45 PM" (strptime treats runs of spaces as one)
TIMESTAMP_FORMAT = "%A %b %d, %Y %I:%M %p"

# "10° above NW" (whole value; a sign is captured so "-5°" fails the range check)
SKY_LOCATION_PATTERN = re.compile(r"(?P<elevation>-?[0-9]+)° above (?P<direction>[NSEW]+)")

# "6 minutes", "less than 1 minute" (not "-3 minutes")
DURATION_PATTERN = re.compile(r"(?<![-0-9])(?P<duration>[0-9]+) minute")

# "52°"
MAX_ELEVATION_PATTERN = re.compile(r"(?P<elevation>[0-9]+)°")

MIN_ELEVATION = 0
MAX_ELEVATION = 90

COMPASS_POINTS = frozenset(
    {
        "N", "NNE", "NE", "ENE",
        "E", "ESE", "SE", "SSE",
        "S", "SSW", "SW", "WSW",
        "W", "WNW", "NW", "NNW",
    },
)
