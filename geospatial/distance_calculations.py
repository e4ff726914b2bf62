"""
Distances Between Geographic Points.

Two measures are provided:

1. ``great_circle_arc``: central angle on the sphere in RADIANS. This is
   the ranking metric of the USNG disambiguation search: it only has to
   order candidates, so the spherical model is sufficient and cheap.

2. ``geodesic_distance_m``: WGS84 geodesic length in METERS via
   `pyproj`, for callers who need a user-facing distance.

References
----------
- Vincenty, T. (1975). Direct and inverse solutions of geodesics on the
  ellipsoid. Survey Review 23(176). (Special case for the sphere.)
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
"""

import numpy as np

from pyproj import Geod

from common.types import GeographicPoint


# Create the geodesic calculator for WGS84
_wgs84_geod = Geod(ellps='WGS84')


def great_circle_arc(start: GeographicPoint, end: GeographicPoint) -> float:
    """Compute the central angle between two points.

    Parameters
    ----------
    start, end : GeographicPoint
        Points in degrees.

    Returns
    -------
    float
        Angle in radians, in [0, π].

    Notes
    -----
    Uses the atan2 form of the great-circle formula, which stays well
    conditioned for both tiny and near-antipodal separations.
    """
    lat_s = np.radians(start.lat)
    lat_f = np.radians(end.lat)
    d_lon = np.radians(end.lon - start.lon)

    cos_s, sin_s = np.cos(lat_s), np.sin(lat_s)
    cos_f, sin_f = np.cos(lat_f), np.sin(lat_f)
    cos_d = np.cos(d_lon)

    y = np.sqrt(
        (cos_f * np.sin(d_lon)) ** 2
        + (cos_s * sin_f - sin_s * cos_f * cos_d) ** 2
    )
    x = sin_s * sin_f + cos_s * cos_f * cos_d
    return float(np.arctan2(y, x))


def geodesic_distance_m(start: GeographicPoint, end: GeographicPoint) -> float:
    """Compute the WGS84 geodesic distance between two points in meters."""
    _, _, distance_m = _wgs84_geod.inv(start.lon, start.lat, end.lon, end.lat)
    return float(distance_m)
