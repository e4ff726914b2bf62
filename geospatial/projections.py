"""
Map Projections for the Universal Grids.

This module provides the two projections underlying USNG/MGRS:

- Universal Transverse Mercator, evaluated with the closed-form ellipsoidal
  series of USGS Professional Paper 1395 (no external dependency).
- Universal Polar Stereographic, delegated to `pyproj`. The grid code only
  supplies the fixed north/south parameter sets and interprets the results.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Conformal projections of the ellipsoid

Accuracy
--------
The transverse Mercator series is truncated after the fifth/sixth order term
in the longitude difference. Inside a zone (and the usual ±2 zone overlap)
it round-trips to well under a millimeter. Far outside a zone the error grows
without being reported; this is a known property of the series and not an
error condition.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- NGA TM 8358.2: The Universal Grids: UTM and UPS.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Tuple

import numpy as np

from pyproj import CRS, Transformer

from common.constants import GridConstants
from geospatial.coordinate_models import (
    EllipsoidParameters,
    FloatOrArray,
    UsngEllipsoid,
    central_meridian,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)


def _as_output(value):
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value, dtype=np.float64)


class ProjectionAdapter(ABC):
    """Abstract base class for the grid projections.

    Coordinates are exchanged in degrees (geographic) and meters (planar),
    with the geographic side always in (lat, lon) order.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection."""
        pass

    @property
    @abstractmethod
    def proj4_string(self) -> str:
        """PROJ.4 definition string equivalent to this projection."""
        pass

    @abstractmethod
    def to_projected(self, lat: FloatOrArray, lon: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
        """Transform geodetic coordinates to projected coordinates.

        Parameters
        ----------
        lat, lon : float or ndarray
            Geodetic coordinates in degrees.

        Returns
        -------
        Tuple
            (x, y) projected coordinates in meters.
        """
        pass

    @abstractmethod
    def to_geodetic(self, x: FloatOrArray, y: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
        """Transform projected coordinates to geodetic.

        Parameters
        ----------
        x, y : float or ndarray
            Projected coordinates in meters.

        Returns
        -------
        Tuple
            (lat, lon) geodetic coordinates in degrees.
        """
        pass


class TransverseMercator(ProjectionAdapter):
    """Transverse Mercator projection of one UTM zone.

    Parameters
    ----------
    zone : int
        UTM zone number. Zone 0 and zone 61 are accepted and behave as the
        neighbours of zones 1 and 60.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: GRS80 as used by USNG).

    Notes
    -----
    Northings are signed: there is no 10,000,000 m false northing south of
    the equator. The grid code only ever uses northings modulo 2,000,000 m,
    so both conventions produce the same references.
    """

    def __init__(self, zone: int, ellipsoid: EllipsoidParameters = UsngEllipsoid):
        self.zone = zone
        self._ellipsoid = ellipsoid
        self._central_meridian = central_meridian(zone)
        self._k0 = GridConstants.UTM_SCALE_FACTOR.value
        self._false_easting = GridConstants.UTM_FALSE_EASTING.value

    @property
    def name(self) -> str:
        return f"UTM zone {self.zone} (CM={self._central_meridian}°)"

    @property
    def central_meridian(self) -> float:
        return self._central_meridian

    @property
    def proj4_string(self) -> str:
        return (
            f"+proj=tmerc +lat_0=0 +lon_0={self._central_meridian} "
            f"+k={self._k0} +x_0={self._false_easting} +y_0=0 "
            f"+a={self._ellipsoid.a} +b={self._ellipsoid.b} +units=m +no_defs"
        )

    def to_projected(self, lat, lon):
        return self.forward(lon, lat)

    def to_geodetic(self, x, y):
        lon, lat = self.inverse(x, y)
        return lat, lon

    def forward(self, lon: FloatOrArray, lat: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
        """Project longitude/latitude in degrees to (easting, northing)."""
        ell = self._ellipsoid
        ep2 = ell.ep2
        k0 = self._k0

        d_lon = np.asarray(lon, dtype=np.float64) - self._central_meridian
        d_lon = np.where(d_lon > 180.0, d_lon - 360.0, d_lon)
        d_lon = np.where(d_lon < -180.0, d_lon + 360.0, d_lon)

        lat_rad = np.radians(lat)
        lat_sin = np.sin(lat_rad)
        lat_cos = np.cos(lat_rad)
        lat_tan = lat_sin / lat_cos
        tan2 = lat_tan * lat_tan
        tan4 = tan2 * tan2

        n = radius_of_curvature_prime_vertical(lat_rad, ell)
        c = ep2 * (lat_cos * lat_cos)
        a = lat_cos * np.radians(d_lon)
        m = ell.meridian_distance(lat_rad)

        temp5 = 1.0 - tan2 + c
        temp6 = 5.0 - 18.0 * tan2 + tan4 + 72.0 * c - 58.0 * ep2
        a5 = a ** 5

        easting = k0 * n * (a + (temp5 * a ** 3) / 6.0 + temp6 * a5 / 120.0) + self._false_easting

        temp7 = (5.0 - tan2 + 9.0 * c + 4.0 * (c * c)) * a ** 4 / 24.0
        temp8 = 61.0 - 58.0 * tan2 + tan4 + 600.0 * c - 330.0 * ep2
        temp9 = a5 * a / 720.0

        northing = k0 * (m + n * lat_tan * ((a * a) / 2.0 + temp7 + temp8 * temp9))

        return _as_output(easting), _as_output(northing)

    def inverse(self, easting: FloatOrArray, northing: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
        """Unproject (easting, northing) in meters to (lon, lat) in degrees."""
        ell = self._ellipsoid
        ep2 = ell.ep2
        k0 = self._k0

        x = np.asarray(easting, dtype=np.float64) - self._false_easting

        mu = (np.asarray(northing, dtype=np.float64) / k0) / ell.meridian_factor
        lat1 = ell.footpoint_latitude(mu)

        sin1 = np.sin(lat1)
        cos1 = np.cos(lat1)
        tan1 = sin1 / cos1
        n1 = radius_of_curvature_prime_vertical(lat1, ell)
        r1 = radius_of_curvature_meridian(lat1, ell)
        t2 = tan1 * tan1
        c1 = ep2 * cos1 * cos1

        d1 = x / (n1 * k0)
        d2 = d1 * d1
        d3 = d1 * d2
        d4 = d2 * d2
        d5 = d1 * d4
        d6 = d3 * d3

        t12 = t2 * t2
        c12 = c1 * c1

        temp1 = n1 * tan1 / r1
        temp2 = 5.0 + 3.0 * t2 + 10.0 * c1 - 4.0 * c12 - 9.0 * ep2
        temp4 = 61.0 + 90.0 * t2 + 298.0 * c1 + 45.0 * t12 - 252.0 * ep2 - 3.0 * c12
        temp5 = (1.0 + 2.0 * t2 + c1) * d3 / 6.0
        temp6 = 5.0 - 2.0 * c1 + 28.0 * t2 - 3.0 * c12 + 8.0 * ep2 + 24.0 * t12

        lat = np.degrees(lat1 - temp1 * (d2 / 2.0 - temp2 * (d4 / 24.0) + temp4 * d6 / 720.0))
        lon = self._central_meridian + np.degrees((d1 - temp5 + temp6 * d5 / 120.0) / cos1)

        return _as_output(lon), _as_output(lat)


class PolarStereographic(ProjectionAdapter):
    """Universal Polar Stereographic projection backed by pyproj.

    Parameters
    ----------
    north : bool
        True for the north polar zone (Y, Z), False for the south (A, B).

    Notes
    -----
    The true-scale latitude is the pole itself so PROJ honours the 0.994
    scale factor. Both zones use a 2,000,000 m false easting and northing.
    """

    def __init__(self, north: bool):
        self.north = north
        pole = 90 if north else -90
        k0 = GridConstants.UPS_SCALE_FACTOR.value
        origin = GridConstants.UPS_FALSE_ORIGIN.value

        self._proj4 = (
            f"+proj=stere +lat_0={pole} +lat_ts={pole} +lon_0=0 "
            f"+k={k0} +x_0={origin:.0f} +y_0={origin:.0f} "
            "+ellps=WGS84 +datum=WGS84 +units=m +no_defs"
        )

        self._crs_geo = CRS.from_epsg(4326)  # WGS84
        self._crs_proj = CRS.from_proj4(self._proj4)
        self._to_proj = Transformer.from_crs(self._crs_geo, self._crs_proj, always_xy=True)
        self._to_geo = Transformer.from_crs(self._crs_proj, self._crs_geo, always_xy=True)

    @property
    def name(self) -> str:
        return "UPS North" if self.north else "UPS South"

    @property
    def proj4_string(self) -> str:
        return self._proj4

    def to_projected(self, lat, lon):
        x, y = self._to_proj.transform(lon, lat)
        return _as_output(x), _as_output(y)

    def to_geodetic(self, x, y):
        lon, lat = self._to_geo.transform(x, y)
        return _as_output(lat), _as_output(lon)


@lru_cache(maxsize=None)
def utm_projection(zone: int) -> TransverseMercator:
    """Shared projection for a UTM zone."""
    return TransverseMercator(zone)


@lru_cache(maxsize=None)
def ups_projection(north: bool) -> PolarStereographic:
    """Shared polar projection; the pyproj transformers are built once."""
    return PolarStereographic(north)


def utm_forward(zone: int, lon: FloatOrArray, lat: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
    """Convert lon/lat in degrees to (easting, northing) in the given UTM zone.

    No zone validation is done; the caller chooses a zone consistent with
    the point.
    """
    return utm_projection(zone).forward(lon, lat)


def utm_inverse(zone: int, easting: FloatOrArray, northing: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
    """Convert (easting, northing) in the given UTM zone to (lon, lat) in degrees."""
    return utm_projection(zone).inverse(easting, northing)


def ups_forward(north: bool, lon: FloatOrArray, lat: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
    """Convert lon/lat in degrees to UPS (x, y)."""
    return ups_projection(north).to_projected(lat, lon)


def ups_inverse(north: bool, x: FloatOrArray, y: FloatOrArray) -> Tuple[FloatOrArray, FloatOrArray]:
    """Convert UPS (x, y) to (lon, lat) in degrees."""
    lat, lon = ups_projection(north).to_geodetic(x, y)
    return lon, lat
