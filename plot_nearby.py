"""Plot the search area and the ranked peaks around a reference point."""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from geo import BoundingBox, GeoPoint
from peak import RankedPeak


class NearbyPeaksPlot:
    """Render a lat/lon map of a nearby-peaks search."""

    def __init__(
        self,
        reference: GeoPoint,
        radius_km: float,
        box: BoundingBox,
        ranked_peaks: Sequence[RankedPeak],
    ):
        """
        Initialize plot.

        Args:
            reference: Search center
            radius_km: Search radius in km (used in the title and file name)
            box: Bounding box used by the pre-filter
            ranked_peaks: Finder results, nearest first
        """
        self.reference = reference
        self.radius_km = radius_km
        self.box = box
        self.ranked_peaks = ranked_peaks

    def default_filename(self) -> str:
        return (
            f"nearby_peaks_{self.reference.latitude:.4f}_"
            f"{self.reference.longitude:.4f}_{int(round(self.radius_km))}km.png"
        )

    def save(self, filename: Optional[str] = None) -> str:
        """
        Draw the map and save it.

        Args:
            filename: Output PNG path; derived from reference and radius if omitted

        Returns:
            str: The path the figure was written to
        """
        filename = filename or self.default_filename()

        fig, ax = plt.subplots(figsize=(8, 8))

        ax.add_patch(
            Rectangle(
                (self.box.min_lon, self.box.min_lat),
                self.box.max_lon - self.box.min_lon,
                self.box.max_lat - self.box.min_lat,
                fill=False,
                edgecolor="royalblue",
                linestyle="--",
                linewidth=1.5,
                label="Search box",
            )
        )
        ax.plot(
            self.reference.longitude,
            self.reference.latitude,
            marker="*",
            markersize=14,
            color="crimson",
            linestyle="",
            label="Reference point",
        )

        if self.ranked_peaks:
            ax.plot(
                [r.peak.longitude for r in self.ranked_peaks],
                [r.peak.latitude for r in self.ranked_peaks],
                marker="^",
                color="sienna",
                linestyle="",
                label="Peaks",
            )
            for r in self.ranked_peaks:
                ax.annotate(
                    f"{r.peak.name} ({r.distance_km} km)",
                    (r.peak.longitude, r.peak.latitude),
                    textcoords="offset points",
                    xytext=(5, 5),
                    fontsize=9,
                )

        ax.set_xlim(self.box.min_lon, self.box.max_lon)
        ax.set_ylim(self.box.min_lat, self.box.max_lat)
        ax.set_xlabel("Longitude (deg)", fontsize=11)
        ax.set_ylabel("Latitude (deg)", fontsize=11)
        ax.set_title(f"Peaks within {self.radius_km} km", fontsize=13)
        ax.legend(loc="best")
        ax.grid(True, alpha=0.3)
        fig.tight_layout()

        fig.savefig(filename)
        plt.close(fig)
        return filename
