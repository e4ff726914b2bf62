"""
Tests for the cell corners of a USNG reference.
"""

import pytest

from common.errors import UnsupportedZoneError
from usng.converter import to_lon_lat, to_square
from usng.square import precision_label


DEG_TOL = 1e-5


@pytest.mark.parametrize("precision, label", [
    (0, "100 km"),
    (1, "10 km"),
    (2, "1 km"),
    (3, "100 m"),
    (4, "10 m"),
    (5, "1 m"),
    (6, "0.1 m"),
    (7, "0.01 m"),
])
def test_precision_label(precision, label):
    assert precision_label(precision) == label


class TestSquare:

    def test_label_from_reference(self):
        assert to_square("15T VK").precision == "100 km"
        assert to_square("15T VK 12 34").precision == "1 km"
        assert to_square("15T VK 123 456").precision == "100 m"

    def test_sw_is_decoded_point(self):
        square = to_square("15T VK 1234 5678")
        location = to_lon_lat("15T VK 1234 5678")
        assert square.sw.lat == pytest.approx(location.lat, abs=1e-9)
        assert square.sw.lon == pytest.approx(location.lon, abs=1e-9)

    def test_corner_layout(self):
        square = to_square("15T VK 12 34")
        assert square.nw.lat > square.sw.lat
        assert square.se.lon > square.sw.lon
        assert square.ne.lat > square.se.lat
        assert square.ne.lon > square.nw.lon
        assert square.sw.lat < square.center.lat < square.nw.lat
        assert square.sw.lon < square.center.lon < square.se.lon

    def test_cell_size(self):
        # 1 km north is about 0.009 degrees of latitude
        square = to_square("15T VK 12 34")
        assert square.nw.lat - square.sw.lat == pytest.approx(0.009, abs=5e-4)

    def test_truncated_with_reference(self, minneapolis):
        square = to_square("vk", minneapolis)
        location = to_lon_lat("vk", minneapolis)
        assert location.precision == 0
        assert square.sw.lat == pytest.approx(location.lat, abs=DEG_TOL)
        assert square.sw.lon == pytest.approx(location.lon, abs=DEG_TOL)
        # the center sits half a cell north-east of the decoded corner
        assert square.center.lat > location.lat
        assert square.center.lon > location.lon

    def test_polar_reference_unsupported(self):
        with pytest.raises(UnsupportedZoneError):
            to_square("B AN")
