"""End-to-end tests for the main script."""

import io
import logging

import pytest

import main
from geo import GeoPoint, haversine
from conftest import peak_record


@pytest.fixture
def run(write_catalog):
    def _run(records):
        out = io.StringIO()
        status = main.main(write_catalog(records), out=out)
        return status, out.getvalue()

    return _run


def test_far_peak_excluded(run):
    status, output = run([peak_record("Triglav", 46.3725, 13.8371, 2864)])
    assert status == 0
    assert output == ""


def test_near_peak_reported_with_distance(run):
    status, output = run(
        [
            peak_record("Triglav", 46.3725, 13.8371, 2864),
            peak_record("Blizu", 46.25, 15.30, 500),
        ]
    )
    reference = GeoPoint(main.REFERENCE_LATITUDE, main.REFERENCE_LONGITUDE)
    distance = haversine(reference, GeoPoint(46.25, 15.30))

    assert status == 0
    assert 3.5 < distance < 4.5
    assert output == f"Blizu je oddaljen {distance}km\n"


def test_output_is_nearest_first(run):
    status, output = run(
        [
            peak_record("Resevna", 46.2261, 15.3839, 683),
            peak_record("Tovst", 46.17, 15.285, 834),
            peak_record("Hom", 46.2594, 15.19, 558),
        ]
    )
    assert status == 0
    assert [line.split(" je oddaljen ")[0] for line in output.splitlines()] == [
        "Tovst",
        "Hom",
        "Resevna",
    ]


def test_pipeline_is_idempotent(run):
    records = [
        peak_record("Tovst", 46.17, 15.285, 834),
        peak_record("Hom", 46.2594, 15.19, 558),
    ]
    assert run(records) == run(records)


def test_bundled_catalog():
    out = io.StringIO()
    assert main.main(out=out) == 0
    names = [line.split(" je oddaljen ")[0] for line in out.getvalue().splitlines()]
    assert names == ["Tovst", "Hom", "Resevna"]


def test_missing_catalog_returns_error(tmp_path, caplog):
    out = io.StringIO()
    with caplog.at_level(logging.ERROR):
        status = main.main(str(tmp_path / "missing.json"), out=out)
    assert status == 1
    assert out.getvalue() == ""
    assert "Cannot read peak catalog" in caplog.text


def test_malformed_catalog_prints_nothing(write_catalog, caplog):
    path = write_catalog([peak_record("Tovst", 46.17, 15.285, 834), {"name": "Broken"}])
    out = io.StringIO()
    with caplog.at_level(logging.ERROR):
        status = main.main(path, out=out)
    assert status == 1
    assert out.getvalue() == ""
    assert "Malformed peak catalog" in caplog.text


def test_undecodable_catalog_returns_error(tmp_path, caplog):
    path = tmp_path / "peaks.json"
    path.write_bytes(b'[{"name": "\xff\xfe"}]')
    out = io.StringIO()
    with caplog.at_level(logging.ERROR):
        status = main.main(str(path), out=out)
    assert status == 1
    assert out.getvalue() == ""
    assert "Malformed peak catalog" in caplog.text
