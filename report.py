"""Console output for ranked peaks."""

import sys
from typing import Iterable, Optional, TextIO

from peak import RankedPeak

MESSAGE_TEMPLATE = "{name} je oddaljen {distance}km"


def format_ranked_peak(ranked: RankedPeak, template: str = MESSAGE_TEMPLATE) -> str:
    """Render one result line, e.g. "Boč je oddaljen 5.123km"."""
    return template.format(name=ranked.peak.name, distance=ranked.distance_km)


def print_ranked_peaks(
    ranked_peaks: Iterable[RankedPeak],
    out: Optional[TextIO] = None,
    template: str = MESSAGE_TEMPLATE,
):
    """Write one line per ranked peak to out (stdout by default)."""
    out = out or sys.stdout
    for ranked in ranked_peaks:
        print(format_ranked_peak(ranked, template), file=out)
