"""
USNG Decoder for Complete References.

Given a zone, band (or polar zone), grid square and digits, reconstruct the
full planar coordinate and check it against what the reference claims.

Northing reconstruction
-----------------------
Row letters repeat every 2,000,000 m, so the grid square only fixes the
northing modulo that cycle. The band letter gives an approximate minimum
northing; the northing is moved to the first cycle at or above it, then
projected back. If the recovered latitude is not in the claimed band the
approximation was off by one cycle and the northing is moved one cycle
toward the equator.

Validation modes
----------------
strict
    Latitude within [-80, 84] and the recomputed zone and band equal the
    supplied ones.
non-strict
    Latitude within [-79.5, 84.5] (the UTM/UPS overlap), easting within
    [100000, 900000], zone within ±2 (wrapping 60→1) and band within ±1.
    100 km squares stay unique under these tolerances, so a reference just
    outside its nominal zone still decodes to one position.
"""

from dataclasses import dataclass
from typing import Union

import numpy as np

from common.constants import GridConstants
from common.errors import OutOfRangeError, ZoneMismatchError
from common.logging_config import get_logger
from common.types import UpsPoint, UtmPoint
from geospatial.coordinate_models import utm_zone_for_longitude, zone_distance
from geospatial.projections import ups_inverse, utm_inverse
from usng.encoder import join_reference
from usng.grid_letters import (
    band_for_latitude,
    band_index,
    band_min_northing,
    decode_grid_square,
    decode_polar_square,
)
from usng.parser import ParsedUsngTokens

logger = get_logger(__name__)


@dataclass(frozen=True)
class DecodedReference:
    """A decoded reference with its geographic position.

    Attributes
    ----------
    planar : UtmPoint or UpsPoint
        Planar coordinate of the south-west corner of the cell.
    lat, lon : float
        The same position in degrees.
    exact : bool
        Whether the position lies in the zone and band the reference names,
        as opposed to only within the non-strict tolerance.
    """
    planar: Union[UtmPoint, UpsPoint]
    lat: float
    lon: float
    exact: bool = True


def _locate(zone: int, easting: float, northing: float):
    lon, lat = utm_inverse(zone, easting, northing)
    return lon, lat, utm_zone_for_longitude(lon), band_for_latitude(lat)


def decode_utm(tokens: ParsedUsngTokens, strict: bool) -> DecodedReference:
    """Decode a reference with numeric zone, band and grid square.

    Raises
    ------
    InvalidGridDesignatorError
        If the square's letters do not belong to the zone.
    OutOfRangeError
        If the latitude is outside the UTM range of the active mode.
    ZoneMismatchError
        If the recomputed zone or band disagrees beyond the active mode.
    """
    zone = tokens.utm_zone
    band = tokens.grid_zone.letter
    cycle = GridConstants.NORTHING_CYCLE.value

    base_easting, base_northing = decode_grid_square(zone, tokens.grid_square)
    easting = base_easting + tokens.easting_offset       # [100,000, 900,000]
    northing = base_northing + tokens.northing_offset    # [0, 2,000,000)

    # TODO: band min northing ignores easting; use the band corner nearest the zone edge
    min_northing = band_min_northing(band)
    northing += cycle * np.ceil((min_northing - northing) / cycle)

    lon, lat, calc_zone, calc_band = _locate(zone, easting, northing)
    if calc_band != band:
        northing -= cycle
        lon, lat, calc_zone, calc_band = _locate(zone, easting, northing)

    supplied = f"{zone}{band}"
    calculated = f"{calc_zone}{calc_band}"

    if strict:
        if calculated != supplied:
            logger.debug(f"Strict decode of {tokens} recomputed {calculated} at ({lat:.5f}, {lon:.5f})")
        if lat > GridConstants.UTM_MAX_LATITUDE.value or lat < GridConstants.UTM_MIN_LATITUDE.value:
            raise OutOfRangeError(f"USNG: Latitude {lat} outside valid UTM range.")
        if calc_zone != zone:
            raise ZoneMismatchError(
                f"USNG: calculated coordinate not in correct UTM zone! "
                f"Supplied: {zone} Calculated: {calc_zone}"
            )
        if calc_band != band:
            raise ZoneMismatchError(
                f"USNG: calculated coordinate not in correct grid zone! "
                f"Supplied: {supplied} Calculated: {calculated}"
            )
    else:
        overlap = GridConstants.UTM_OVERLAP.value
        if (lat > GridConstants.UTM_MAX_LATITUDE.value + overlap
                or lat < GridConstants.UTM_MIN_LATITUDE.value + overlap):
            raise OutOfRangeError(f"USNG: Latitude {lat} outside valid UTM range.")
        if not (GridConstants.MIN_GRID_EASTING.value <= easting <= GridConstants.MAX_GRID_EASTING.value):
            raise ZoneMismatchError(
                f"USNG: calculated coordinate not in correct UTM zone! "
                f"Supplied: {supplied} Calculated: {calculated}"
            )
        # 100km squares are unique E-W within +/- 2 zones at 84.5N
        if zone_distance(calc_zone, zone) > 2:
            raise ZoneMismatchError(
                f"USNG: calculated coordinate not in correct UTM zone! "
                f"Supplied: {supplied} Calculated: {calculated}"
            )
        # and N-S within +/- 2,000,000 m, about one band either side
        if abs(band_index(calc_band) - band_index(band)) > 1:
            raise ZoneMismatchError(
                f"USNG: calculated coordinate not in correct grid zone! "
                f"Supplied: {supplied} Calculated: {calculated}"
            )

    exact = (
        calc_zone == zone
        and calc_band == band
        and GridConstants.UTM_MIN_LATITUDE.value <= lat <= GridConstants.UTM_MAX_LATITUDE.value
    )
    usng = join_reference(supplied, tokens.grid_square, tokens.easting_digits, tokens.northing_digits)
    planar = UtmPoint(
        zone=zone,
        grid_zone=band,
        easting=float(easting),
        northing=float(northing),
        precision=tokens.precision,
        usng=usng,
    )
    return DecodedReference(planar=planar, lat=lat, lon=lon, exact=exact)


def decode_ups(tokens: ParsedUsngTokens) -> DecodedReference:
    """Decode a reference in polar zone A, B, Y or Z.

    Raises
    ------
    InvalidGridDesignatorError
        If the square does not exist in the polar zone.
    OutOfRangeError
        If the position is not poleward of the UTM limit for its pole.
    """
    grid_zone = tokens.grid_zone
    origin = GridConstants.UPS_FALSE_ORIGIN.value

    x_offset, y_offset = decode_polar_square(grid_zone, tokens.grid_square)
    x = origin + x_offset + tokens.easting_offset
    y = origin + y_offset + tokens.northing_offset

    lon, lat = ups_inverse(grid_zone.is_north, x, y)
    if not (np.isfinite(lat) and np.isfinite(lon)):
        raise OutOfRangeError(
            f"USNG: polar position ({x:.0f}, {y:.0f}) cannot be projected in zone {grid_zone.letter}."
        )

    if grid_zone.is_north:
        if lat < GridConstants.UTM_MAX_LATITUDE.value:
            raise OutOfRangeError(f"USNG: Grid Zone Y or Z but Latitude {lat} < 84.")
    elif lat > GridConstants.UTM_MIN_LATITUDE.value:
        raise OutOfRangeError(f"USNG: Grid Zone A or B but Latitude {lat} > -80.")

    usng = join_reference(grid_zone.letter, tokens.grid_square, tokens.easting_digits, tokens.northing_digits)
    planar = UpsPoint(
        grid_zone=grid_zone.letter,
        x=float(x),
        y=float(y),
        precision=tokens.precision,
        usng=usng,
    )
    return DecodedReference(planar=planar, lat=lat, lon=lon)


def decode_complete(tokens: ParsedUsngTokens, strict: bool) -> DecodedReference:
    """Decode tokens that need no search, dispatching on the zone kind."""
    if tokens.grid_zone.is_polar:
        return decode_ups(tokens)
    return decode_utm(tokens, strict)
