"""Find catalog peaks within a radius of a location, nearest first."""

import logging
from typing import List, Sequence

import numpy as np

from geo import BoundingBox, GeoPoint, bounding_box, haversine, validate_radius
from peak import Peak, RankedPeak

logger = logging.getLogger(__name__)


def filter_within_bounding_box(
    reference: GeoPoint, radius_km: float, peaks: Sequence[Peak]
) -> List[Peak]:
    """
    Keep peaks inside the bounding box of a circle around reference.

    The box over-approximates the circle, so survivors still need a real
    distance check. Input order is preserved.

    Args:
        reference: Center of the search
        radius_km: Search radius in km, must be > 0
        peaks: Catalog to filter

    Returns:
        List of peaks whose coordinates fall inside the box (edges included)
    """
    box = bounding_box(reference, radius_km)
    return _peaks_in_box(box, peaks)


def _peaks_in_box(box: BoundingBox, peaks: Sequence[Peak]) -> List[Peak]:
    if not peaks:
        return []

    lats = np.fromiter((p.latitude for p in peaks), dtype=np.float64, count=len(peaks))
    lons = np.fromiter((p.longitude for p in peaks), dtype=np.float64, count=len(peaks))

    inside = (
        (lats >= box.min_lat)
        & (lats <= box.max_lat)
        & (lons >= box.min_lon)
        & (lons <= box.max_lon)
    )
    return [peaks[i] for i in np.flatnonzero(inside)]


def rank_by_distance(reference: GeoPoint, peaks: Sequence[Peak]) -> List[RankedPeak]:
    """
    Pair each peak with its haversine distance and sort ascending.

    Peaks at equal distance keep their input order.
    """
    ranked = [RankedPeak(peak, haversine(reference, peak.point)) for peak in peaks]
    return sorted(ranked, key=lambda r: r.distance_km)


class NearbyPeakFinder:
    """Bounding-box pre-filter followed by exact distance ranking."""

    def __init__(self, reference: GeoPoint, radius_km: float):
        """
        Initialize finder.

        Args:
            reference: Location to search around
            radius_km: Search radius in km

        Raises:
            ValueError: If radius_km is not a positive finite number
        """
        self.reference = reference
        self.radius_km = validate_radius(radius_km)
        self.bounding_box = bounding_box(reference, self.radius_km)

    def find(self, peaks: Sequence[Peak]) -> List[RankedPeak]:
        """
        Rank the peaks that fall inside the search box.

        Args:
            peaks: Loaded catalog

        Returns:
            List of RankedPeak ordered nearest first
        """
        candidates = _peaks_in_box(self.bounding_box, peaks)
        logger.debug(
            "%d of %d peaks inside %s", len(candidates), len(peaks), self.bounding_box
        )
        return rank_by_distance(self.reference, candidates)
