"""Shared fixtures for the nearby-peaks tests."""

import json

import pytest

from geo import GeoPoint
from peak import Peak

CELJE = GeoPoint(latitude=46.2194828, longitude=15.2719759)


def make_peak(name="Peak", latitude=0.0, longitude=0.0, elevation=1000):
    return Peak(
        name=name,
        country="Slovenia",
        mountain_range="Test Range",
        latitude=latitude,
        longitude=longitude,
        elevation=elevation,
    )


def peak_record(name="Peak", latitude=46.0, longitude=15.0, elevation=1000, **overrides):
    record = {
        "name": name,
        "country": "Slovenia",
        "mountain_range": "Test Range",
        "latitude": latitude,
        "longitude": longitude,
        "elevation": elevation,
    }
    record.update(overrides)
    return record


@pytest.fixture
def reference():
    return CELJE


@pytest.fixture
def write_catalog(tmp_path):
    """Write records (or raw text) to a catalog file and return its path."""

    def _write(records, filename="peaks.json"):
        path = tmp_path / filename
        if isinstance(records, str):
            path.write_text(records, encoding="utf-8")
        else:
            path.write_text(json.dumps(records), encoding="utf-8")
        return str(path)

    return _write
