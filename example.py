"""
Example usage of the NearbyPeakFinder class.
"""

from geo import GeoPoint
from main import CATALOG_FILE
from nearby_peaks import NearbyPeakFinder
from peak_loader import PeakLoader
from plot_nearby import NearbyPeaksPlot
from report import print_ranked_peaks

celje = GeoPoint(latitude=46.2194828, longitude=15.2719759)

peaks = PeakLoader(CATALOG_FILE).load()

finder = NearbyPeakFinder(celje, radius_km=10.0)
ranked = finder.find(peaks)

print(f"Found {len(ranked)} of {len(peaks)} peaks within {finder.radius_km} km\n")
print_ranked_peaks(ranked)

plot = NearbyPeaksPlot(celje, finder.radius_km, finder.bounding_box, ranked)
print(f"\nMap saved to {plot.save()}")
