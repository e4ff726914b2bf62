"""
Geospatial Module for USNG Conversion.

All projection and distance math used by the grid code lives here:
- Reference ellipsoid and UTM zone helpers
- UTM series projection and pyproj-backed UPS projection
- Great-circle and geodesic distances
"""

from geospatial.coordinate_models import (
    EllipsoidParameters,
    UsngEllipsoid,
    central_meridian,
    utm_zone_for_longitude,
    wrap_zone,
    zone_distance,
)

from geospatial.distance_calculations import (
    great_circle_arc,
    geodesic_distance_m,
)

from geospatial.projections import (
    ProjectionAdapter,
    TransverseMercator,
    PolarStereographic,
    utm_forward,
    utm_inverse,
    ups_forward,
    ups_inverse,
)

__all__ = [
    # Coordinate models
    "EllipsoidParameters",
    "UsngEllipsoid",
    "central_meridian",
    "utm_zone_for_longitude",
    "wrap_zone",
    "zone_distance",
    # Distance calculations
    "great_circle_arc",
    "geodesic_distance_m",
    # Projections
    "ProjectionAdapter",
    "TransverseMercator",
    "PolarStereographic",
    "utm_forward",
    "utm_inverse",
    "ups_forward",
    "ups_inverse",
]
