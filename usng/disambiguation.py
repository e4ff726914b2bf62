"""
Disambiguation of Truncated USNG References.

A reference missing its zone, band or grid square names many positions on
the globe, one per possible prefix. Given an approximate location, the
search tries every prefix that could plausibly apply near it and keeps the
decoded position closest to the reference point.

Search space
------------
- Square known, zone missing: zones ref±1 × the 20 bands (or the band
  given), plus the two polar zones of the reference's hemisphere.
- Square missing: zones ref±1 × bands ref±1 × the 160 squares of each zone,
  plus every square of both polar zones of the hemisphere (18×14 north,
  18×24 south).

Any prefix token that is present stays fixed. Each trial is decoded in the
caller's validation mode and yields a ``TrialOutcome``; a trial that fails is
simply not a candidate, so a strict search only ranks candidates that lie in
the zone and band they name. Equal distances prefer a candidate whose label matches
where it actually falls, then the earlier candidate in search order.

The worst case is a few thousand trials, each a constant amount of work.
"""

from dataclasses import dataclass
from itertools import product
from typing import Iterator, List, Optional

from common.errors import InsufficientInformationError, NoMatchError, UsngError
from common.logging_config import get_logger
from common.types import GeographicPoint
from geospatial.coordinate_models import utm_zone_for_longitude, wrap_zone
from geospatial.distance_calculations import great_circle_arc
from usng.decoder import DecodedReference, decode_complete
from usng.grid_letters import (
    BAND_LETTERS,
    POLAR_NORTH_LETTERS,
    POLAR_SOUTH_LETTERS,
    X_LETTERS,
    YN_LETTERS,
    YS_LETTERS,
    GridZone,
    band_index_for_latitude,
    letter_set_for_zone,
)
from usng.parser import ParsedUsngTokens

logger = get_logger(__name__)


@dataclass(frozen=True)
class TrialOutcome:
    """Result of decoding one candidate prefix.

    Exactly one of ``decoded`` and ``error`` is set.
    """
    tokens: ParsedUsngTokens
    decoded: Optional[DecodedReference] = None
    error: Optional[UsngError] = None
    distance: float = float("inf")

    @property
    def ok(self) -> bool:
        return self.decoded is not None


def evaluate_trial(tokens: ParsedUsngTokens, reference: GeographicPoint, strict: bool = False) -> TrialOutcome:
    """Decode one candidate and measure its distance to the reference."""
    try:
        decoded = decode_complete(tokens, strict)
        position = GeographicPoint(lat=decoded.lat, lon=decoded.lon)
    except UsngError as e:
        return TrialOutcome(tokens=tokens, error=e)
    return TrialOutcome(
        tokens=tokens,
        decoded=decoded,
        distance=great_circle_arc(reference, position),
    )


def _candidate_zones(tokens: ParsedUsngTokens, reference: GeographicPoint) -> List[int]:
    if tokens.utm_zone is not None:
        return [tokens.utm_zone]
    ref_zone = utm_zone_for_longitude(reference.lon)
    return [wrap_zone(ref_zone + offset) for offset in (-1, 0, 1)]


def _candidate_bands(tokens: ParsedUsngTokens, reference: GeographicPoint) -> List[str]:
    if tokens.grid_zone is not None:
        return [] if tokens.grid_zone.is_polar else [tokens.grid_zone.letter]
    if tokens.grid_square is not None:
        return list(BAND_LETTERS)
    ref_idx = band_index_for_latitude(reference.lat)
    low = max(0, ref_idx - 1)
    high = min(len(BAND_LETTERS) - 1, ref_idx + 1)
    return list(BAND_LETTERS[low:high + 1])


def _candidate_polar_zones(tokens: ParsedUsngTokens, reference: GeographicPoint) -> List[str]:
    if tokens.grid_zone is not None:
        return [tokens.grid_zone.letter] if tokens.grid_zone.is_polar else []
    if tokens.utm_zone is not None:
        return []
    return list(POLAR_NORTH_LETTERS if reference.lat > 0 else POLAR_SOUTH_LETTERS)


def _utm_squares(zone: int) -> Iterator[str]:
    letters = letter_set_for_zone(zone)
    for row, column in product(letters.northing, letters.easting):
        yield column + row


def _polar_squares(grid_zone: GridZone) -> Iterator[str]:
    rows = YN_LETTERS if grid_zone.is_north else YS_LETTERS
    for row, column in product(rows, X_LETTERS):
        yield column + row


def candidate_tokens(
    tokens: ParsedUsngTokens,
    reference: GeographicPoint,
    search_polar: bool = True
) -> Iterator[ParsedUsngTokens]:
    """Every complete reference that the truncated ``tokens`` could stand for near ``reference``."""
    bands = _candidate_bands(tokens, reference)
    for zone in _candidate_zones(tokens, reference):
        for band in bands:
            grid_zone = GridZone.from_letter(band)
            if tokens.grid_square is not None:
                squares = [tokens.grid_square]
            else:
                squares = _utm_squares(zone)
            for square in squares:
                yield tokens.with_prefix(zone, grid_zone, square)

    if not search_polar:
        return
    for letter in _candidate_polar_zones(tokens, reference):
        grid_zone = GridZone.from_letter(letter)
        if tokens.grid_square is not None:
            squares = [tokens.grid_square]
        else:
            squares = _polar_squares(grid_zone)
        for square in squares:
            yield tokens.with_prefix(None, grid_zone, square)


def select_nearest(outcomes: Iterator[TrialOutcome]) -> Optional[TrialOutcome]:
    """Closest successful outcome, preferring exact labels on ties."""
    best = None
    for outcome in outcomes:
        if not outcome.ok:
            continue
        if best is None or (outcome.distance, not outcome.decoded.exact) < (best.distance, not best.decoded.exact):
            best = outcome
    return best


def disambiguate(
    tokens: ParsedUsngTokens,
    reference: GeographicPoint,
    search_polar: bool = True,
    strict: bool = False
) -> ParsedUsngTokens:
    """Fill in the missing prefix of ``tokens`` from a nearby reference point.

    Parameters
    ----------
    tokens : ParsedUsngTokens
        Parsed, incomplete reference.
    reference : GeographicPoint
        Approximate location of the intended position. The result need not
        share its zone, band or square.
    search_polar : bool
        Whether UPS zones are candidates.
    strict : bool
        Validation mode of every trial decode.

    Returns
    -------
    ParsedUsngTokens
        Complete tokens of the nearest candidate.

    Raises
    ------
    NoMatchError
        If no candidate decodes.
    """
    candidates = list(candidate_tokens(tokens, reference, search_polar))
    logger.debug(
        f"Disambiguating {tokens} near ({reference.lat:.5f}, {reference.lon:.5f}): "
        f"{len(candidates)} trials"
    )

    best = select_nearest(evaluate_trial(candidate, reference, strict) for candidate in candidates)

    if best is None:
        logger.warning(
            f"No grid zone matches {tokens.grid_square or ''}{tokens.digits} "
            f"near ({reference.lat:.5f}, {reference.lon:.5f})"
        )
        raise NoMatchError("USNG: Couldn't find a match")

    logger.debug(f"Resolved to {best.decoded.planar.usng} at arc distance {best.distance:.6e} rad")
    return best.tokens


def resolve_tokens(
    tokens: ParsedUsngTokens,
    reference: Optional[GeographicPoint],
    strict: bool,
    search_polar: bool = True
) -> DecodedReference:
    """Decode tokens, searching near ``reference`` for any missing prefix.

    Raises
    ------
    InsufficientInformationError
        If the prefix is incomplete and no reference point is given.
    """
    if not tokens.is_complete:
        if reference is None:
            raise InsufficientInformationError("USNG: Not enough information to locate point.")
        tokens = disambiguate(tokens, reference, search_polar, strict)
    return decode_complete(tokens, strict)
