"""
Geodetic and Grid Constants for USNG Conversion.

This module provides the fixed parameters used by the projection engine and
the grid encoder, each with its unit and provenance.

References
----------
- USGS Professional Paper 1395 (Snyder, 1987), equations 3-21 and 8-9 to 8-25
- NGA TM 8358.1: Datums, Ellipsoids, Grids, and Grid Reference Systems
- FGDC-STD-011-2001: United States National Grid
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A fixed parameter with provenance.

    Attributes
    ----------
    value : float
        The nominal value.
    unit : str
        Unit of the value.
    source : str
        Reference for the value.
    description : str
        Human-readable description.
    """
    value: float
    unit: str
    source: str
    description: str


class GridConstants:
    """Registry of constants used by the UTM, UPS and USNG code.

    Ellipsoid
    ---------
    The UTM series use a NAD83/GRS80-compatible ellipsoid given by its
    semi-major and semi-minor axes. The minor axis is rounded to 0.1 m,
    which is well below the resolution of a USNG reference.

    Grid
    ----
    Sizes of the 100 km squares, the 2,000,000 m lettering cycle and the
    latitude limits of the UTM and UPS systems.
    """

    # =========================================================================
    # Ellipsoid
    # =========================================================================

    SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        unit="m",
        source="GRS80 / WGS84",
        description="Semi-major axis (equatorial radius)"
    )

    SEMI_MINOR_AXIS: Final[Constant] = Constant(
        value=6_356_752.3,
        unit="m",
        source="GRS80, rounded to 0.1 m",
        description="Semi-minor axis (polar radius)"
    )

    # =========================================================================
    # Universal Transverse Mercator
    # =========================================================================

    UTM_SCALE_FACTOR: Final[Constant] = Constant(
        value=0.9996,
        unit="dimensionless",
        source="NGA TM 8358.2",
        description="Scale factor on the central meridian"
    )

    UTM_FALSE_EASTING: Final[Constant] = Constant(
        value=500_000.0,
        unit="m",
        source="NGA TM 8358.2",
        description="False easting added to every UTM zone"
    )

    UTM_ZONE_WIDTH: Final[Constant] = Constant(
        value=6.0,
        unit="deg",
        source="NGA TM 8358.2",
        description="Longitudinal width of a UTM zone"
    )

    UTM_MIN_LATITUDE: Final[Constant] = Constant(
        value=-80.0,
        unit="deg",
        source="NGA TM 8358.1",
        description="Southern limit of the UTM grid"
    )

    UTM_MAX_LATITUDE: Final[Constant] = Constant(
        value=84.0,
        unit="deg",
        source="NGA TM 8358.1",
        description="Northern limit of the UTM grid"
    )

    UTM_OVERLAP: Final[Constant] = Constant(
        value=0.5,
        unit="deg",
        source="NGA TM 8358.1, section 2-6.3.1",
        description="Overlap of the UTM grid into the UPS areas (80°30'S, 84°30'N)"
    )

    BAND_HEIGHT: Final[Constant] = Constant(
        value=8.0,
        unit="deg",
        source="NGA TM 8358.1",
        description="Latitudinal height of a grid-zone band"
    )

    BAND_NORTHING_PER_DEGREE: Final[Constant] = Constant(
        value=110_946.259,
        unit="m/deg",
        source="2 * pi * 6356752.3 / 360",
        description="Approximate northing per degree used to unwrap grid-square northings"
    )

    # =========================================================================
    # Universal Polar Stereographic
    # =========================================================================

    UPS_SCALE_FACTOR: Final[Constant] = Constant(
        value=0.994,
        unit="dimensionless",
        source="NGA TM 8358.2",
        description="Scale factor at the pole"
    )

    UPS_FALSE_ORIGIN: Final[Constant] = Constant(
        value=2_000_000.0,
        unit="m",
        source="NGA TM 8358.2",
        description="False easting and false northing of both UPS zones"
    )

    # =========================================================================
    # USNG grid
    # =========================================================================

    GRID_SQUARE_SIZE: Final[Constant] = Constant(
        value=100_000.0,
        unit="m",
        source="FGDC-STD-011-2001",
        description="Side of a 100 km grid square"
    )

    NORTHING_CYCLE: Final[Constant] = Constant(
        value=2_000_000.0,
        unit="m",
        source="FGDC-STD-011-2001",
        description="Northing period after which the row letters repeat"
    )

    MIN_GRID_EASTING: Final[Constant] = Constant(
        value=100_000.0,
        unit="m",
        source="FGDC-STD-011-2001",
        description="Smallest easting with a column letter"
    )

    MAX_GRID_EASTING: Final[Constant] = Constant(
        value=900_000.0,
        unit="m",
        source="FGDC-STD-011-2001",
        description="Largest easting with a column letter"
    )

    METER_DIGITS: Final[Constant] = Constant(
        value=5,
        unit="digits",
        source="FGDC-STD-011-2001",
        description="Digits per coordinate at 1 m resolution"
    )
