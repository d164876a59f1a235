"""Build the peak catalog from OpenStreetMap via the Overpass API."""

import json
import logging
import os
from typing import Any, Dict, List, Tuple

import requests

logger = logging.getLogger(__name__)

OVERPASS_URL = "https://overpass-api.de/api/interpreter"


class PeakPrefetcher:
    """Fetch peaks for a region and save them in the catalog format."""

    CATALOG_FILE = os.path.join("data", "slovenia_peaks.json")
    # (country, south, north, west, east)
    REGION = ("Slovenia", 45.42, 46.88, 13.37, 16.61)

    def __init__(
        self,
        catalog_file: str = CATALOG_FILE,
        region: Tuple[str, float, float, float, float] = REGION,
        timeout: float = 90,
    ):
        """
        Initialize peak prefetcher.

        Args:
            catalog_file: Where to write the JSON catalog
            region: Tuple of (country, south, north, west, east)
            timeout: HTTP timeout in seconds for the Overpass request
        """
        self.catalog_file = catalog_file
        self.region = region
        self.timeout = timeout

    def _query(self) -> str:
        _, south, north, west, east = self.region
        return f"""
        [out:json][timeout:60];
        (
          node["natural"="peak"]({south},{west},{north},{east});
        );
        out body;
        """

    def _to_record(self, element: Dict[str, Any]) -> Dict[str, Any]:
        """Convert an Overpass node into a catalog record; raises on bad data."""
        tags = element["tags"]
        return {
            "name": tags.get("name", f"Peak_{element['id']}"),
            "country": self.region[0],
            "mountain_range": tags.get("mountain_range", ""),
            "latitude": element["lat"],
            "longitude": element["lon"],
            "elevation": int(round(float(tags["ele"]))),
        }

    def fetch_peaks(self) -> List[Dict[str, Any]]:
        """
        Fetch peak records for the region.

        Returns:
            List of catalog records; empty if the request failed
        """
        records: List[Dict[str, Any]] = []

        try:
            logger.info("Fetching peaks for %s from Overpass API...", self.region[0])
            response = requests.post(
                OVERPASS_URL, data={"data": self._query()}, timeout=self.timeout
            )
            if response.status_code != 200:
                logger.warning("API request failed with status %s", response.status_code)
                return records
            data = response.json()
        except requests.RequestException as e:
            logger.warning("Error fetching peaks: %s", e)
            return records

        for element in data.get("elements", []):
            if "ele" not in element.get("tags", {}):
                continue
            try:
                records.append(self._to_record(element))
            except (ValueError, KeyError):
                continue

        logger.info("Found %d peaks", len(records))
        return records

    def prefetch_peaks(self) -> bool:
        """
        Fetch peaks and save them to the catalog file.

        Returns:
            bool: True if a new catalog was written, False if it already existed
        """
        if os.path.exists(self.catalog_file):
            logger.info("Catalog %s already exists. Skipping prefetch.", self.catalog_file)
            return False

        records = self.fetch_peaks()

        directory = os.path.dirname(self.catalog_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.catalog_file, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)

        logger.info("Saved %d peaks to %s", len(records), self.catalog_file)
        return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    PeakPrefetcher().prefetch_peaks()
