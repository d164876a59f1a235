"""
Great-circle helpers for finding peaks near a location.

Distances use the haversine ("as the crow flies") formula on a sphere with
Earth's mean radius. The bounding box is a cheap lat/lon pre-filter; it does
not wrap across the antimeridian and widens without limit near the poles.
"""

import math
from typing import NamedTuple

# Earth's mean radius in km
EARTH_RADIUS_KM = 6371.0


class GeoPoint(NamedTuple):
    """Latitude and longitude pair in decimal degrees."""
    latitude: float
    longitude: float


class BoundingBox(NamedTuple):
    """Axis-aligned lat/lon rectangle, inclusive on every edge."""
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.min_lat <= latitude <= self.max_lat
            and self.min_lon <= longitude <= self.max_lon
        )


def haversine(current: GeoPoint, target: GeoPoint) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        current: Starting point
        target: Destination point

    Returns:
        float: Distance in km, rounded to 3 decimal places
    """
    lat1 = math.radians(current.latitude)
    lat2 = math.radians(target.latitude)

    d_lat = math.radians(target.latitude - current.latitude)
    d_lon = math.radians(target.longitude - current.longitude)

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # rounding can push a just past 1 for near-antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round(EARTH_RADIUS_KM * c * 1000) / 1000.0


def validate_radius(radius_km: float) -> float:
    """Return radius_km as float, raising ValueError unless it is finite and > 0."""
    radius = float(radius_km)
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"Search radius must be a positive number of km, got {radius_km!r}")
    return radius


def bounding_box(center: GeoPoint, radius_km: float) -> BoundingBox:
    """
    Approximate a circle of radius_km around center with a lat/lon box.

    Args:
        center: Reference point
        radius_km: Search radius in km, must be > 0

    Returns:
        BoundingBox: The rectangle enclosing the search circle
    """
    radius = validate_radius(radius_km)
    angular_radius = radius / EARTH_RADIUS_KM
    if angular_radius > 1.0:
        raise ValueError(
            f"Search radius {radius} km exceeds Earth's radius ({EARTH_RADIUS_KM} km)"
        )

    lat_delta = math.degrees(angular_radius)
    lon_delta = math.degrees(
        math.asin(angular_radius) / math.cos(math.radians(center.latitude))
    )

    return BoundingBox(
        min_lat=center.latitude - lat_delta,
        max_lat=center.latitude + lat_delta,
        min_lon=center.longitude - lon_delta,
        max_lon=center.longitude + lon_delta,
    )
