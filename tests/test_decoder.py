"""
Tests for decoding complete references and the strict/non-strict checks.
"""

import pytest

from common.errors import InvalidGridDesignatorError, OutOfRangeError, ZoneMismatchError
from common.types import UpsPoint, UtmPoint
from usng.decoder import decode_complete, decode_ups, decode_utm
from usng.parser import parse_usng


DEG_TOL = 1e-5


class TestDecodeUtm:

    def test_precision_zero_square(self):
        decoded = decode_utm(parse_usng("15T VK"), strict=True)
        assert isinstance(decoded.planar, UtmPoint)
        assert decoded.planar.easting == 400_000
        assert decoded.planar.northing == 4_900_000
        assert decoded.planar.usng == "15T VK"
        assert decoded.exact
        assert decoded.lat == pytest.approx(44.24637, abs=DEG_TOL)
        assert decoded.lon == pytest.approx(-94.25248, abs=DEG_TOL)

    def test_canonical_string(self):
        decoded = decode_utm(parse_usng("15t vk 1234 5678"), strict=False)
        assert decoded.planar.usng == "15T VK 1234 5678"
        assert decoded.planar.precision == 4
        assert decoded.planar.easting == 412_340
        assert decoded.planar.northing == 4_956_780

    def test_southern_hemisphere(self):
        decoded = decode_utm(parse_usng("37D EC 3816 3381"), strict=True)
        assert decoded.planar.northing < 0
        assert decoded.lat == pytest.approx(-70.0, abs=1e-3)
        assert decoded.lon == pytest.approx(40.0, abs=1e-3)

    def test_band_fallback_moves_toward_equator(self):
        # U's approximate start puts VK a cycle too far north
        decoded = decode_utm(parse_usng("15U VK"), strict=False)
        assert decoded.planar.northing == 4_900_000
        assert not decoded.exact

    def test_strict_rejects_wrong_band(self):
        with pytest.raises(ZoneMismatchError):
            decode_utm(parse_usng("15U VK"), strict=True)

    def test_strict_rejects_wrong_zone(self):
        # 800 km easting at 44 N is east of -90, in zone 16
        with pytest.raises(ZoneMismatchError):
            decode_utm(parse_usng("15T ZK"), strict=True)

    def test_non_strict_tolerates_neighbouring_zone(self):
        decoded = decode_utm(parse_usng("15T ZK"), strict=False)
        assert decoded.lon > -90.0
        assert not decoded.exact
        assert decoded.planar.zone == 15

    def test_latitude_beyond_utm(self):
        for strict in (True, False):
            with pytest.raises(OutOfRangeError):
                decode_utm(parse_usng("15C VK"), strict=strict)

    def test_invalid_square(self):
        with pytest.raises(InvalidGridDesignatorError):
            decode_utm(parse_usng("14T VK"), strict=False)


class TestDecodeUps:

    def test_south_pole(self):
        decoded = decode_ups(parse_usng("B AN"))
        assert isinstance(decoded.planar, UpsPoint)
        assert (decoded.planar.x, decoded.planar.y) == (2_000_000, 2_000_000)
        assert decoded.lat == pytest.approx(-90.0, abs=DEG_TOL)

    def test_north_pole(self):
        decoded = decode_ups(parse_usng("Z AH"))
        assert decoded.lat == pytest.approx(90.0, abs=DEG_TOL)

    def test_western_zone(self):
        decoded = decode_ups(parse_usng("Y ZP 12345 12345"))
        assert decoded.planar.x == 1_912_345
        assert decoded.planar.y == 2_612_345
        assert decoded.lat == pytest.approx(84.43254784831868, abs=DEG_TOL)
        assert decoded.lon == pytest.approx(-171.85365493260602, abs=DEG_TOL)

    def test_invalid_square(self):
        with pytest.raises(InvalidGridDesignatorError):
            decode_ups(parse_usng("A VK 0 0"))

    def test_north_zone_below_84(self):
        with pytest.raises(OutOfRangeError):
            decode_ups(parse_usng("Z JP"))

    def test_south_zone_above_minus_80(self):
        with pytest.raises(OutOfRangeError):
            decode_ups(parse_usng("B LA"))


def test_decode_complete_dispatches_on_zone_kind():
    assert isinstance(decode_complete(parse_usng("B AN"), strict=True).planar, UpsPoint)
    assert isinstance(decode_complete(parse_usng("15T VK"), strict=True).planar, UtmPoint)
