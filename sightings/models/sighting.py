"""
Sighting Models

Data classes for one predicted ISS pass, as parsed from the feed.
Built once per poll cycle and never mutated.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SkyLocation:
    """Where in the sky the ISS appears or disappears"""

    direction: str  # Compass point: N, NNE, NE, ... NNW
    elevation: int  # Degrees above the horizon, 0-90


@dataclass(frozen=True)
class Sighting:
    """
    One visibility window of the ISS.

    `when` is timezone-aware, in the feed's configured timezone.
    """

    when: datetime
    approach: SkyLocation
    departure: SkyLocation
    duration_minutes: int  # How long the ISS stays visible
    max_elevation_degrees: int  # Highest point of the pass, 0-90

    def describe(self) -> str:
        """One-line summary for logs"""
        return (
            f"{self.when:%a %b %d %H:%M %Z}, {self.duration_minutes} min, "
            f"max {self.max_elevation_degrees}°, "
            f"{self.approach.direction} {self.approach.elevation}° → "
            f"{self.departure.direction} {self.departure.elevation}°"
        )
