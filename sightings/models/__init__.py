from sightings.models.sighting import Sighting, SkyLocation

__all__ = [
    "Sighting",
    "SkyLocation",
]
