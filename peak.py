"""Peak data structure definitions."""

from typing import NamedTuple

from geo import GeoPoint


class Peak(NamedTuple):
    """A named mountain peak from the catalog."""
    name: str
    country: str
    mountain_range: str
    latitude: float
    longitude: float
    elevation: int

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class RankedPeak(NamedTuple):
    """A peak paired with its distance from the reference point in km."""
    peak: Peak
    distance_km: float
