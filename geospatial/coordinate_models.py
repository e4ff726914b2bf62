"""
Coordinate Models for the UTM Ellipsoid.

This module holds the reference ellipsoid used by the transverse Mercator
series and the small helpers that relate longitudes to UTM zones.

Scientific Context
------------------
Domain: Geodesy, map projections
Model: GRS80/NAD83-compatible ellipsoid (a = 6378137 m, b = 6356752.3 m)

The ellipsoid is defined by its two axes rather than by the flattening so
that the eccentricity terms match the published USNG series constants to
the last digit.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- NGA TM 8358.2: The Universal Grids: UTM and UPS.
"""

from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray

from common.constants import GridConstants
from common.types import normalize_longitude


FloatOrArray = Union[float, NDArray[np.float64]]


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    b : float
        Semi-minor axis (polar radius) in meters.
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    ep2 : float
        Second eccentricity squared: e'² = e² / (1 - e²)
    e1 : float
        (1 - sqrt(1 - e²)) / (1 + sqrt(1 - e²)), used by the footpoint series.
    """
    a: float
    b: float
    name: str

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return (self.a * self.a - self.b * self.b) / (self.a * self.a)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1.0 - self.e2)

    @property
    def e1(self) -> float:
        root = np.sqrt(1.0 - self.e2)
        return float((1.0 - root) / (1.0 + root))

    @property
    def meridian_factor(self) -> float:
        """Leading coefficient of the meridian distance series."""
        e2 = self.e2
        e4 = e2 * e2
        e6 = e2 * e4
        return self.a * (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256)

    def meridian_distance(self, latitude_rad: FloatOrArray) -> FloatOrArray:
        """Compute the distance along the meridian from the equator.

        Parameters
        ----------
        latitude_rad : float or ndarray
            Geodetic latitude in radians.

        Returns
        -------
        float or ndarray
            Meridian arc length in meters (negative south of the equator).

        Notes
        -----
        USGS Professional Paper 1395, equation 3-21, truncated after e⁶.
        """
        e2 = self.e2
        e4 = e2 * e2
        e6 = e2 * e4
        c1 = self.meridian_factor
        c2 = -self.a * (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024)
        c3 = self.a * (15 * e4 / 256 + 45 * e6 / 1024)
        c4 = -self.a * 35 * e6 / 3072
        return (
            c1 * latitude_rad
            + c2 * np.sin(latitude_rad * 2)
            + c3 * np.sin(latitude_rad * 4)
            + c4 * np.sin(latitude_rad * 6)
        )

    def footpoint_latitude(self, mu: FloatOrArray) -> FloatOrArray:
        """Latitude whose meridian distance corresponds to rectifying latitude ``mu``.

        USGS Professional Paper 1395, equation 3-26.
        """
        e1 = self.e1
        e12 = e1 * e1
        e13 = e1 * e12
        e14 = e12 * e12
        return (
            mu
            + (1.5 * e1 - (27.0 / 32.0) * e13) * np.sin(2 * mu)
            + ((21.0 / 16.0) * e12 - (55.0 / 32.0) * e14) * np.sin(4 * mu)
            + (151.0 * e13 / 96.0) * np.sin(6.0 * mu)
        )


# Ellipsoid for the UTM series
UsngEllipsoid = EllipsoidParameters(
    a=GridConstants.SEMI_MAJOR_AXIS.value,
    b=GridConstants.SEMI_MINOR_AXIS.value,
    name="GRS80"
)


def radius_of_curvature_prime_vertical(
    latitude_rad: FloatOrArray,
    ellipsoid: EllipsoidParameters = UsngEllipsoid
) -> FloatOrArray:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float or ndarray
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid.

    Returns
    -------
    float or ndarray
        Radius of curvature N in meters.

    Notes
    -----
    N = a / (1 - e² sin²φ)^(1/2)
    """
    sin_lat = np.sin(latitude_rad)
    return ellipsoid.a / np.sqrt(1 - ellipsoid.e2 * sin_lat * sin_lat)


def radius_of_curvature_meridian(
    latitude_rad: FloatOrArray,
    ellipsoid: EllipsoidParameters = UsngEllipsoid
) -> FloatOrArray:
    """Compute the radius of curvature in the meridian plane.

    Notes
    -----
    M = a(1 - e²) / (1 - e² sin²φ)^(3/2)
    """
    sin_lat = np.sin(latitude_rad)
    temp = 1.0 - ellipsoid.e2 * sin_lat * sin_lat
    return ellipsoid.a * (1.0 - ellipsoid.e2) / np.sqrt(temp * temp * temp)


def central_meridian(zone: int) -> float:
    """Longitude of the central meridian of a UTM zone, in degrees."""
    return -((30 - zone) * 6 + 3)


def utm_zone_for_longitude(lon: float) -> int:
    """UTM zone number containing a longitude.

    (-180, -174) is zone 1, [-174, -168) is zone 2, ..., [174, 180] is zone 60.
    The longitude is normalized to (-180, 180] first, so -180 and 180 both
    fall in zone 60.
    """
    lon = normalize_longitude(lon)
    zone = int(np.floor((lon + 180.0) / GridConstants.UTM_ZONE_WIDTH.value)) + 1
    return min(zone, 60)


def wrap_zone(zone: int) -> int:
    """Wrap a zone number such as 0 or 61 back into 1..60."""
    return (zone - 1) % 60 + 1


def zone_distance(zone_a: int, zone_b: int) -> int:
    """Number of zones between two zone numbers, going the short way round."""
    diff = abs(zone_a - zone_b) % 60
    return min(diff, 60 - diff)
