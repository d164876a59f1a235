"""Load the peak catalog from a JSON file."""

import json
import logging
import math
import warnings
from typing import Any, Dict, List

from geopy.point import Point

from peak import Peak

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when the catalog is malformed or a record is invalid."""


class PeakLoader:
    """Read peak records (name, country, range, coordinates, elevation) from JSON."""

    TEXT_FIELDS = ("name", "country", "mountain_range")

    def __init__(self, catalog_file: str, decimal_comma: bool = False):
        """
        Initialize loader.

        Args:
            catalog_file: Path to a JSON file containing an array of peak records
            decimal_comma: Accept coordinates given as strings with a comma
                decimal separator (e.g. "46,3725"); empty strings become 0.0
        """
        self.catalog_file = catalog_file
        self.decimal_comma = decimal_comma

    def load(self) -> List[Peak]:
        """
        Load all peaks in file order.

        Returns:
            List of Peak records

        Raises:
            OSError: If the file cannot be read
            ParseError: If the file or any record is malformed
        """
        with open(self.catalog_file, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ParseError(f"{self.catalog_file}: invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise ParseError(
                f"{self.catalog_file}: expected an array of peaks, got {type(data).__name__}"
            )

        peaks = [self._parse_record(index, record) for index, record in enumerate(data)]
        logger.debug("Loaded %d peaks from %s", len(peaks), self.catalog_file)
        return peaks

    def _parse_record(self, index: int, record: Any) -> Peak:
        if not isinstance(record, dict):
            raise ParseError(f"record {index}: expected an object, got {type(record).__name__}")

        name, country, mountain_range = (
            self._text_field(index, record, key) for key in self.TEXT_FIELDS
        )
        latitude = self._coordinate(index, record, "latitude")
        longitude = self._coordinate(index, record, "longitude")

        if abs(longitude) > 180:
            raise ParseError(
                f"record {index}: longitude {longitude} outside [-180, 180]"
            )
        try:
            # geopy warns about latitude normalization before raising
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", UserWarning)
                point = Point(latitude, longitude)
        except ValueError as e:
            raise ParseError(f"record {index}: invalid coordinates: {e}") from e

        return Peak(
            name=name,
            country=country,
            mountain_range=mountain_range,
            latitude=point.latitude,
            longitude=longitude,
            elevation=self._elevation(index, record),
        )

    @staticmethod
    def _required(index: int, record: Dict[str, Any], key: str) -> Any:
        if key not in record:
            raise ParseError(f"record {index}: missing required field '{key}'")
        return record[key]

    def _text_field(self, index: int, record: Dict[str, Any], key: str) -> str:
        value = self._required(index, record, key)
        if not isinstance(value, str):
            raise ParseError(f"record {index}: field '{key}' must be a string")
        return value

    def _coordinate(self, index: int, record: Dict[str, Any], key: str) -> float:
        value = self._required(index, record, key)

        if isinstance(value, str) and self.decimal_comma:
            value = value.replace(",", ".").strip() or "0.0"
            try:
                value = float(value)
            except ValueError as e:
                raise ParseError(f"record {index}: field '{key}' is not a number") from e

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParseError(f"record {index}: field '{key}' must be a number")
        if not math.isfinite(value):
            raise ParseError(f"record {index}: field '{key}' must be finite")
        return float(value)

    def _elevation(self, index: int, record: Dict[str, Any]) -> int:
        value = self._required(index, record, "elevation")
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParseError(f"record {index}: field 'elevation' must be an integer")
        return value
