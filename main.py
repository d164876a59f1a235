"""Print catalog peaks within the search radius of the reference point, nearest first."""

import logging
import os
from typing import Optional, TextIO

from geo import GeoPoint
from nearby_peaks import NearbyPeakFinder
from peak_loader import ParseError, PeakLoader
from report import print_ranked_peaks

REFERENCE_LATITUDE = 46.2194828
REFERENCE_LONGITUDE = 15.2719759
SEARCH_RADIUS_KM = 10.0
CATALOG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "slovenia_peaks.json")

logger = logging.getLogger(__name__)


def main(catalog_file: str = CATALOG_FILE, out: Optional[TextIO] = None) -> int:
    """
    Load the catalog, find nearby peaks and print them.

    Args:
        catalog_file: Path to the JSON peak catalog
        out: Stream for result lines (stdout by default)

    Returns:
        int: 0 on success, 1 if the catalog could not be read or parsed
    """
    reference = GeoPoint(latitude=REFERENCE_LATITUDE, longitude=REFERENCE_LONGITUDE)
    finder = NearbyPeakFinder(reference, SEARCH_RADIUS_KM)

    try:
        peaks = PeakLoader(catalog_file).load()
    except OSError as e:
        logger.error("Cannot read peak catalog %s: %s", catalog_file, e)
        return 1
    except ParseError as e:
        logger.error("Malformed peak catalog %s: %s", catalog_file, e)
        return 1

    ranked = finder.find(peaks)
    print_ranked_peaks(ranked, out=out)
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
    )
    raise SystemExit(main())
