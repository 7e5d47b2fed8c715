"""
Shared Test Configuration and Fixtures

Fixtures here are visible to every test directory. Area-specific fixtures live
in tests/<area>/conftest.py.

To use pytest:
    pip install -e ".[test]"
    pytest tests/
"""

import threading
from datetime import datetime, timezone
from typing import Optional
from xml.sax.saxutils import escape

import pytest
import pytz

LOCAL_TZ = pytz.timezone("America/Los_Angeles")


# =============================================================================
# FEED FIXTURES
# =============================================================================


# Three sightings listed out of order plus one unrelated item.
# Both "Saturday Jan 4" entries are at 6:12 AM (sort stability).
NASA_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
<channel>
<title>Spot The Station - Redwood City, California</title>
<link>https://spotthestation.nasa.gov</link>
<description>Satellite Sightings Information</description>
<language>en-us</language>
<item>
<title>2025-01-05 ISS Sighting</title>
<description>Date: Sunday Jan 5, 2025 &lt;br/&gt;
	Time: 5:20 AM &lt;br/&gt;
	Duration: 3 minutes &lt;br/&gt;
	Maximum Elevation: 17° &lt;br/&gt;
	Approach: 10° above SSW &lt;br/&gt;
	Departure: 11° above ESE &lt;br/&gt;
	</description>
<guid isPermaLink="false">2025-01-05 ISS Sighting 5:20 AM</guid>
</item>
<item>
<title>2025-01-04 ISS Sighting</title>
<description>Date: Saturday Jan 4, 2025 &lt;br/&gt;
	Time: 6:12 AM &lt;br/&gt;
	Duration: 6 minutes &lt;br/&gt;
	Maximum Elevation: 52° &lt;br/&gt;
	Approach: 10° above NW &lt;br/&gt;
	Departure: 45° above NE &lt;br/&gt;
	</description>
<guid isPermaLink="false">2025-01-04 ISS Sighting 6:12 AM</guid>
</item>
<item>
<title>Spot The Station Mobile App</title>
<description>Get sighting alerts on your phone.</description>
</item>
<item>
<title>2025-01-04 ISS Sighting</title>
<description>Date: Saturday Jan 4, 2025 &lt;br/&gt;
	Time: 6:12 AM &lt;br/&gt;
	Duration: less than  1 minute &lt;br/&gt;
	Maximum Elevation: 11° &lt;br/&gt;
	Approach: 11° above W &lt;br/&gt;
	Departure: 10° above WSW &lt;br/&gt;
	</description>
<guid isPermaLink="false">2025-01-04 ISS Sighting 6:12 AM (2)</guid>
</item>
</channel>
</rss>
"""


class FeedBuilder:
    """
    Builds "Spot the Station" RSS documents for tests.

    Usage:
        feed = feed_builder.feed([
            feed_builder.item(when),
            feed_builder.item(when2, approach="20° above SW"),
        ])
    """

    tz = LOCAL_TZ

    def description(
        self,
        when: datetime,
        approach: str = "10° above NW",
        departure: str = "45° above NE",
        duration: str = "6 minutes",
        max_elevation: str = "52°",
        omit: Optional[str] = None,
    ) -> str:
        """Description block in the feed's tab/<br/> line convention"""
        fields = [
            ("Date", when.strftime("%A %b %d, %Y")),
            ("Time", when.strftime("%I:%M %p").lstrip("0")),
            ("Duration", duration),
            ("Maximum Elevation", max_elevation),
            ("Approach", approach),
            ("Departure", departure),
        ]
        lines = [f"{key}: {value} <br/>" for key, value in fields if key != omit]
        return "\n\t".join(lines) + "\n\t"

    def item(
        self,
        when: datetime,
        title: Optional[str] = None,
        **description_fields,
    ) -> str:
        """One <item>; `when` is local wall time in the feed timezone"""
        if title is None:
            title = f"{when:%Y-%m-%d} ISS Sighting"
        description = self.description(when, **description_fields)
        return (
            "<item>"
            f"<title>{escape(title)}</title>"
            f"<description>{escape(description)}</description>"
            "<guid>" + escape(f"{title}-{when.isoformat()}") + "</guid>"
            "</item>"
        )

    def feed(self, items: list[str]) -> bytes:
        """Complete RSS document as bytes"""
        body = "\n".join(items)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<rss version="2.0">\n'
            "<channel>\n"
            "<title>Spot The Station - Redwood City, California</title>\n"
            f"{body}\n"
            "</channel>\n"
            "</rss>\n"
        ).encode("utf-8")

    def local(self, *args) -> datetime:
        """Naive wall-clock datetime (feed times have minute resolution)"""
        return datetime(*args)

    def aware(self, naive: datetime) -> datetime:
        """The aware datetime the parser should produce for `naive`"""
        return self.tz.localize(naive)


@pytest.fixture
def feed_builder():
    """Provide a FeedBuilder for synthesizing feeds."""
    return FeedBuilder()


@pytest.fixture
def local_tz():
    """Timezone the test feeds are written in."""
    return LOCAL_TZ


@pytest.fixture
def nasa_feed_bytes():
    """A realistic feed: 3 sightings (unsorted, one tie) and 1 unrelated item."""
    return NASA_FEED.encode("utf-8")


# =============================================================================
# CLOCK FIXTURES
# =============================================================================


class SteppedClock:
    """
    Clock that returns scripted times, then repeats the last one.

    Injected as `clock=` into the scheduler and the animation engine so tests
    control exactly when deadlines pass.
    """

    def __init__(self, *times: datetime):
        if not times:
            raise ValueError("SteppedClock needs at least one time")
        self._times = list(times)
        self._lock = threading.Lock()
        self.calls = 0

    def __call__(self) -> datetime:
        with self._lock:
            index = min(self.calls, len(self._times) - 1)
            self.calls += 1
            return self._times[index]


@pytest.fixture
def stepped_clock():
    """
    Provide the SteppedClock class.

    Usage:
        def test_deadline(stepped_clock):
            clock = stepped_clock(t0, t0, deadline)
    """
    return SteppedClock


@pytest.fixture
def utc_base():
    """A fixed "now" for clock-driven tests."""
    return datetime(2025, 1, 4, 13, 0, tzinfo=timezone.utc)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Markers let you categorize and selectively run tests:
        pytest -m unit          # Only unit tests
        pytest -m integration   # Only integration tests
        pytest -m "not slow"    # Skip slow tests
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (may be slower)")
    config.addinivalue_line("markers", "slow: Slow tests (use sparingly)")
    config.addinivalue_line("markers", "hardware: Tests requiring real hardware")
