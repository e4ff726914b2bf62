"""
Cell Geometry of a USNG Reference.

A reference of precision p designates a square cell of side
``10**(5 - p)`` meters whose south-west corner is the decoded position.
The other corners and the center are found by offsetting the planar
coordinate and inverting the projection again, so the returned
quadrilateral follows the curvature of the grid, not a lat/lon box.
"""

from typing import Optional

import numpy as np

from common.errors import UnsupportedZoneError
from common.types import GeographicPoint, UpsPoint, UsngSquare
from geospatial.projections import utm_inverse
from usng.disambiguation import resolve_tokens
from usng.parser import ParsedUsngTokens


_NAMED_SIZES = {0: "100 km", 1: "10 km", 2: "1 km"}


def precision_label(precision: int) -> str:
    """Human-readable cell size for a precision.

    Examples
    --------
    >>> precision_label(1)
    '10 km'
    >>> precision_label(4)
    '10 m'
    >>> precision_label(6)
    '0.1 m'
    """
    if precision in _NAMED_SIZES:
        return _NAMED_SIZES[precision]
    scale = 10.0 ** (5 - precision)
    return f"{scale:.{max(0, precision - 5)}f} m"


def to_square(
    tokens: ParsedUsngTokens,
    reference: Optional[GeographicPoint] = None,
    search_polar: bool = True
) -> UsngSquare:
    """Corners and center of the cell a reference designates.

    Parameters
    ----------
    tokens : ParsedUsngTokens
        Parsed reference, possibly truncated.
    reference : GeographicPoint, optional
        Approximate location, needed when the prefix is incomplete.
    search_polar : bool
        Whether UPS zones are considered when resolving a truncated
        reference.

    Returns
    -------
    UsngSquare
        Precision label, four corners and center.

    Raises
    ------
    UnsupportedZoneError
        If the reference resolves to a polar (UPS) zone.
    """
    decoded = resolve_tokens(tokens, reference, strict=False, search_polar=search_polar)
    sw = decoded.planar
    if isinstance(sw, UpsPoint):
        raise UnsupportedZoneError(f"USNG: cell corners are not available for polar zone {sw.grid_zone}.")

    size = tokens.scale
    eastings = sw.easting + np.array([0.0, 0.0, size, size, size / 2.0])
    northings = sw.northing + np.array([0.0, size, size, 0.0, size / 2.0])
    lons, lats = utm_inverse(sw.zone, eastings, northings)

    sw_pt, nw_pt, ne_pt, se_pt, center = (
        GeographicPoint(lat=float(lat), lon=float(lon)) for lat, lon in zip(lats, lons)
    )
    return UsngSquare(
        precision=precision_label(sw.precision),
        sw=sw_pt,
        nw=nw_pt,
        ne=ne_pt,
        se=se_pt,
        center=center,
    )
