"""
USNG Encoder.

Turns UTM and UPS points into canonical USNG strings of the form
``"15T VK 1234 5678"`` (UTM) or ``"Z BF 4274 2988"`` (UPS).

Precision is the number of digits per coordinate: 0 = 100 km square only,
1 = 10 km, 2 = 1 km, 3 = 100 m, 4 = 10 m, 5 = 1 m. Precisions above 5 append
fractional meter digits.
"""

import numpy as np

from common.constants import GridConstants
from common.errors import InvalidGridDesignatorError
from common.types import GeographicPoint
from geospatial.coordinate_models import utm_zone_for_longitude
from geospatial.projections import ups_forward, utm_forward
from usng.grid_letters import (
    GridZone,
    band_for_latitude,
    encode_grid_square,
    encode_polar_square,
)


def _check_precision(precision: int) -> None:
    if int(precision) != precision or precision < 0:
        raise ValueError(f"Precision must be a non-negative integer, got {precision!r}")


def format_coordinate_digits(value: float, precision: int) -> str:
    """Digits of a coordinate within its 100 km square.

    Parameters
    ----------
    value : float
        Easting, northing, x or y in meters.
    precision : int
        Number of digits to keep.

    Returns
    -------
    str
        The meter value inside the square, zero padded to five digits and
        truncated (never rounded) to ``precision`` digits, or extended with
        ``precision - 5`` fractional digits.
    """
    meters_width = GridConstants.METER_DIGITS.value
    whole = int(np.floor(value % GridConstants.GRID_SQUARE_SIZE.value))
    digits = str(whole).zfill(meters_width)

    if precision > meters_width:
        extra = precision - meters_width
        fraction = f"{value % 1:.{extra}f}"
        return digits + fraction[2:2 + extra]
    return digits[:precision]


def join_reference(prefix: str, grid_square: str, easting_digits: str, northing_digits: str) -> str:
    """Assemble the space separated canonical form, dropping empty digit groups."""
    parts = [prefix, grid_square]
    if easting_digits:
        parts.extend([easting_digits, northing_digits])
    return " ".join(parts)


def from_utm(zone: int, grid_zone: str, easting: float, northing: float, precision: int) -> str:
    """Encode a UTM point as a USNG string.

    Parameters
    ----------
    zone : int
        UTM zone number.
    grid_zone : str
        Latitude band letter, computed by the caller from the latitude.
    easting, northing : float
        UTM coordinates in meters (signed northing).
    precision : int
        Digits per coordinate.

    Examples
    --------
    >>> from_utm(15, "T", 491000, 4978600, 2)
    '15T VK 91 78'
    """
    _check_precision(precision)
    grid_square = encode_grid_square(zone, easting, northing)
    return join_reference(
        f"{zone}{grid_zone}",
        grid_square,
        format_coordinate_digits(easting, precision),
        format_coordinate_digits(northing, precision),
    )


def from_ups(grid_zone: str, x: float, y: float, precision: int) -> str:
    """Encode a UPS point as a USNG string."""
    _check_precision(precision)
    zone = GridZone.from_letter(grid_zone)
    if not zone.is_polar:
        raise InvalidGridDesignatorError(f"UPS only valid in zones A, B, Y, and Z, not {grid_zone}")
    grid_square = encode_polar_square(zone, x, y)
    return join_reference(
        zone.letter,
        grid_square,
        format_coordinate_digits(x, precision),
        format_coordinate_digits(y, precision),
    )


def from_lon_lat(point: GeographicPoint, precision: int) -> str:
    """Encode a geographic point as a USNG string.

    Points with -80 < lat < 84 use UTM; the rest use UPS, with zones
    A/Y west of Greenwich and B/Z east of it.
    """
    _check_precision(precision)
    lat, lon = point.lat, point.lon

    if not (GridConstants.UTM_MIN_LATITUDE.value < lat < GridConstants.UTM_MAX_LATITUDE.value):
        north = lat > 0
        x, y = ups_forward(north, lon, lat)
        if north:
            grid_zone = "Y" if lon < 0 else "Z"
        else:
            grid_zone = "A" if lon < 0 else "B"
        return from_ups(grid_zone, x, y, precision)

    zone = utm_zone_for_longitude(lon)
    grid_zone = band_for_latitude(lat)
    easting, northing = utm_forward(zone, lon, lat)
    return from_utm(zone, grid_zone, easting, northing, precision)
