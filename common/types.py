"""
Value Types for Grid Conversion.

This module defines the immutable dataclasses passed between the projection
engine, the USNG encoder/decoder and callers. Angles are in DEGREES and
planar coordinates in METERS throughout.

Design Rationale
----------------
Frozen dataclasses instead of dicts provide:
1. Self-documenting fields
2. Hashable, shareable values with no mutation after construction
3. Validation of geographic ranges in one place
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude into (-180, 180]."""
    while lon <= -180.0:
        lon += 360.0
    while lon > 180.0:
        lon -= 360.0
    return lon


@dataclass(frozen=True)
class GeographicPoint:
    """A latitude/longitude pair on the reference ellipsoid.

    Attributes
    ----------
    lat : float
        Geodetic latitude in degrees. Range: [-90, 90].
    lon : float
        Longitude in degrees, normalized to (-180, 180] on construction.

    Examples
    --------
    >>> GeographicPoint(lat=45.0, lon=-181.0).lon
    179.0
    """
    lat: float
    lon: float

    def __post_init__(self):
        """Validate latitude and normalize longitude."""
        if not (np.isfinite(self.lat) and np.isfinite(self.lon)):
            raise ValueError(f"Coordinate ({self.lat}, {self.lon}) is not finite")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(
                f"Latitude {self.lat} out of range [-90, 90]. "
                f"Did you swap latitude and longitude?"
            )
        object.__setattr__(self, "lat", float(self.lat))
        object.__setattr__(self, "lon", normalize_longitude(float(self.lon)))

    def to_radians(self) -> Tuple[float, float]:
        """Return (lat_rad, lon_rad)."""
        return float(np.radians(self.lat)), float(np.radians(self.lon))


@dataclass(frozen=True)
class UtmPoint:
    """A decoded UTM position.

    Attributes
    ----------
    zone : int
        UTM zone number, 1-60.
    grid_zone : str
        Latitude band letter (C-X).
    easting : float
        Easting in meters including the 500,000 m false easting.
    northing : float
        Signed northing in meters; negative south of the equator.
    precision : int
        Number of digits per coordinate in the source reference.
    usng : str
        Canonical USNG string for this position.
    """
    zone: int
    grid_zone: str
    easting: float
    northing: float
    precision: int
    usng: str


@dataclass(frozen=True)
class UpsPoint:
    """A decoded UPS position.

    Attributes
    ----------
    grid_zone : str
        Polar zone letter: A, B (south) or Y, Z (north).
    x, y : float
        Planar coordinates in meters with the 2,000,000 m false origin.
    precision : int
        Number of digits per coordinate in the source reference.
    usng : str
        Canonical USNG string for this position.
    """
    grid_zone: str
    x: float
    y: float
    precision: int
    usng: str

    @property
    def is_north(self) -> bool:
        return self.grid_zone in ("Y", "Z")


@dataclass(frozen=True)
class UsngLocation:
    """Geographic result of decoding a USNG string.

    The position is the south-west corner of the designated cell.
    """
    lat: float
    lon: float
    precision: int
    usng: str

    @property
    def point(self) -> GeographicPoint:
        return GeographicPoint(lat=self.lat, lon=self.lon)


@dataclass(frozen=True)
class UsngSquare:
    """Corners and center of the cell designated by a USNG string.

    Attributes
    ----------
    precision : str
        Human-readable cell size, e.g. ``"1 km"``.
    sw, nw, ne, se : GeographicPoint
        Corners of the cell.
    center : GeographicPoint
        Center of the cell.
    """
    precision: str
    sw: GeographicPoint
    nw: GeographicPoint
    ne: GeographicPoint
    se: GeographicPoint
    center: GeographicPoint
