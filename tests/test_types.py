"""
Unit tests for the value types and the error hierarchy.
"""

import math

import pytest

from common.constants import GridConstants
from common.errors import (
    InsufficientInformationError,
    MalformedUsngError,
    NoMatchError,
    UsngError,
)
from common.types import GeographicPoint, UpsPoint, UsngLocation, normalize_longitude


class TestNormalizeLongitude:

    @pytest.mark.parametrize("lon, expected", [
        (0.0, 0.0),
        (180.0, 180.0),
        (-180.0, 180.0),
        (267.11, 267.11 - 360.0),
        (540.0, 180.0),
        (-181.0, 179.0),
    ])
    def test_wraps_into_half_open_range(self, lon, expected):
        assert normalize_longitude(lon) == pytest.approx(expected)

    def test_result_always_in_range(self):
        for lon in range(-900, 900, 37):
            wrapped = normalize_longitude(float(lon))
            assert -180.0 < wrapped <= 180.0


class TestGeographicPoint:

    def test_longitude_normalized_on_construction(self):
        assert GeographicPoint(lat=45.0, lon=267.11).lon == pytest.approx(-92.89)

    def test_rejects_latitude_out_of_range(self):
        with pytest.raises(ValueError):
            GeographicPoint(lat=91.0, lon=0.0)

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            GeographicPoint(lat=float("nan"), lon=0.0)
        with pytest.raises(ValueError):
            GeographicPoint(lat=0.0, lon=float("inf"))

    def test_poles_are_valid(self):
        assert GeographicPoint(lat=90.0, lon=0.0).lat == 90.0
        assert GeographicPoint(lat=-90.0, lon=0.0).lat == -90.0

    def test_to_radians(self):
        lat_rad, lon_rad = GeographicPoint(lat=90.0, lon=-90.0).to_radians()
        assert lat_rad == pytest.approx(math.pi / 2)
        assert lon_rad == pytest.approx(-math.pi / 2)

    def test_is_immutable(self):
        point = GeographicPoint(lat=1.0, lon=2.0)
        with pytest.raises(AttributeError):
            point.lat = 3.0


def test_ups_point_hemisphere():
    assert UpsPoint("Z", 2e6, 2e6, 0, "Z AH").is_north
    assert not UpsPoint("B", 2e6, 2e6, 0, "B AN").is_north


def test_location_point():
    location = UsngLocation(lat=44.0, lon=-93.0, precision=0, usng="15T VK")
    assert location.point == GeographicPoint(lat=44.0, lon=-93.0)


def test_errors_are_value_errors():
    for error in (MalformedUsngError, NoMatchError, InsufficientInformationError):
        assert issubclass(error, UsngError)
        assert issubclass(error, ValueError)


def test_meter_digits_is_a_constant_record():
    assert GridConstants.METER_DIGITS.value == 5
    assert GridConstants.METER_DIGITS.unit == "digits"
    assert 10 ** GridConstants.METER_DIGITS.value == GridConstants.GRID_SQUARE_SIZE.value
