"""
Tests for resolving truncated references against a reference point.
"""

import pytest

from common.errors import InsufficientInformationError, NoMatchError, ZoneMismatchError
from common.types import GeographicPoint, UtmPoint
from usng.decoder import DecodedReference, decode_complete
from usng.disambiguation import (
    TrialOutcome,
    candidate_tokens,
    disambiguate,
    evaluate_trial,
    resolve_tokens,
    select_nearest,
)
from usng.parser import parse_usng


DEG_TOL = 1e-5


def _outcome(distance, exact, label):
    planar = UtmPoint(zone=15, grid_zone="T", easting=4e5, northing=4.9e6, precision=0, usng=label)
    decoded = DecodedReference(planar=planar, lat=44.0, lon=-93.0, exact=exact)
    return TrialOutcome(tokens=parse_usng(label), decoded=decoded, distance=distance)


class TestCandidates:

    def test_square_known(self, minneapolis):
        candidates = list(candidate_tokens(parse_usng("VK 1234 5678"), minneapolis))
        # 3 zones x 20 bands, plus Y and Z
        assert len(candidates) == 62
        assert {c.utm_zone for c in candidates} == {14, 15, 16, None}
        assert all(c.grid_square == "VK" and c.is_complete for c in candidates)

    def test_square_missing(self, minneapolis):
        candidates = list(candidate_tokens(parse_usng("1234 5678"), minneapolis))
        # 3 zones x bands S-U x 160 squares, plus 2 x 18 x 14 northern polar squares
        assert len(candidates) == 3 * 3 * 160 + 2 * 18 * 14
        assert {c.grid_zone.letter for c in candidates} == {"S", "T", "U", "Y", "Z"}

    def test_southern_reference_searches_southern_polar_zones(self):
        reference = GeographicPoint(lat=-78.0, lon=10.0)
        candidates = list(candidate_tokens(parse_usng("1234 5678"), reference))
        polar = [c for c in candidates if c.grid_zone.is_polar]
        assert len(polar) == 2 * 18 * 24
        assert {c.grid_zone.letter for c in polar} == {"A", "B"}

    def test_band_clipped_at_table_edge(self):
        reference = GeographicPoint(lat=-79.0, lon=10.0)
        candidates = list(candidate_tokens(parse_usng("1234 5678"), reference, search_polar=False))
        assert {c.grid_zone.letter for c in candidates} == {"C", "D"}

    def test_zones_wrap_at_antimeridian(self):
        reference = GeographicPoint(lat=10.0, lon=179.0)
        candidates = list(candidate_tokens(parse_usng("1234 5678"), reference, search_polar=False))
        assert {c.utm_zone for c in candidates} == {59, 60, 1}

    def test_given_band_stays_fixed(self, minneapolis):
        candidates = list(candidate_tokens(parse_usng("T VK 1234 5678"), minneapolis))
        assert len(candidates) == 3
        assert all(c.grid_zone.letter == "T" for c in candidates)

    def test_given_zone_stays_fixed(self, minneapolis):
        candidates = list(candidate_tokens(parse_usng("15T 1234 5678"), minneapolis))
        assert len(candidates) == 160
        assert {c.utm_zone for c in candidates} == {15}

    def test_polar_search_can_be_disabled(self, minneapolis):
        candidates = list(candidate_tokens(parse_usng("VK"), minneapolis, search_polar=False))
        assert len(candidates) == 60
        assert not any(c.grid_zone.is_polar for c in candidates)


class TestTrials:

    def test_failed_trial_is_an_outcome(self, minneapolis):
        outcome = evaluate_trial(parse_usng("14T VK"), minneapolis)
        assert not outcome.ok
        assert outcome.error is not None
        assert outcome.decoded is None

    def test_successful_trial_measures_distance(self, minneapolis):
        outcome = evaluate_trial(parse_usng("15T VK"), minneapolis)
        assert outcome.ok
        assert 0.0 < outcome.distance < 0.05

    def test_trials_default_to_non_strict(self, minneapolis):
        with pytest.raises(ZoneMismatchError):
            decode_complete(parse_usng("15U VK"), strict=True)
        assert evaluate_trial(parse_usng("15U VK"), minneapolis).ok

    def test_strict_trial_rejects_neighbouring_label(self, minneapolis):
        outcome = evaluate_trial(parse_usng("15U VK"), minneapolis, strict=True)
        assert not outcome.ok
        assert isinstance(outcome.error, ZoneMismatchError)

    def test_select_skips_failures(self):
        failed = TrialOutcome(tokens=parse_usng("14T VK"), error=NoMatchError("x"))
        best = _outcome(0.2, True, "15T VK")
        assert select_nearest(iter([failed, best])) is best

    def test_select_prefers_exact_on_tie(self):
        loose = _outcome(0.1, False, "15U VK")
        exact = _outcome(0.1, True, "15T VK")
        assert select_nearest(iter([loose, exact])) is exact

    def test_select_keeps_first_of_equal_candidates(self):
        first = _outcome(0.1, True, "15T VK")
        second = _outcome(0.1, True, "15T VK")
        assert select_nearest(iter([first, second])) is first

    def test_select_nothing(self):
        assert select_nearest(iter([])) is None


class TestResolve:

    def test_complete_tokens_need_no_reference(self):
        decoded = resolve_tokens(parse_usng("15t vk 1234 5678"), None, strict=True)
        assert decoded.lat == pytest.approx(44.75904, abs=DEG_TOL)
        assert decoded.lon == pytest.approx(-94.10759, abs=DEG_TOL)

    def test_truncated_matches_full(self, minneapolis):
        full = resolve_tokens(parse_usng("15t vk 1234 5678"), None, strict=False)
        truncated = resolve_tokens(parse_usng("vk 1234 5678"), minneapolis, strict=False)
        assert truncated.lat == pytest.approx(full.lat, abs=DEG_TOL)
        assert truncated.lon == pytest.approx(full.lon, abs=DEG_TOL)
        assert truncated.planar.usng == "15T VK 1234 5678"

    def test_digits_only(self, minneapolis):
        decoded = resolve_tokens(parse_usng("1234 5678"), minneapolis, strict=False)
        assert decoded.lat == pytest.approx(43.86401, abs=DEG_TOL)
        assert decoded.lon == pytest.approx(-92.84644, abs=DEG_TOL)

    def test_strict_search_near_zone_edge(self):
        # just inside zone 14, where the nearest loose candidate is labelled 15T
        reference = GeographicPoint(lat=44.0, lon=-96.9)
        decoded = resolve_tokens(parse_usng("1234 5678"), reference, strict=True)
        assert decoded.exact
        assert decoded.planar.usng.startswith("14T ")
        assert decoded.planar.usng.endswith(" 1234 5678")

    def test_square_prefers_labelled_band(self, minneapolis):
        tokens = disambiguate(parse_usng("vk"), minneapolis)
        assert (tokens.utm_zone, tokens.grid_zone.letter) == (15, "T")

    def test_missing_reference(self):
        with pytest.raises(InsufficientInformationError):
            resolve_tokens(parse_usng("vk 1234 5678"), None, strict=False)

    def test_no_match(self, minneapolis):
        # Z is neither a UTM row letter nor a northern UPS row letter
        with pytest.raises(NoMatchError):
            resolve_tokens(parse_usng("ZZ"), minneapolis, strict=False)
