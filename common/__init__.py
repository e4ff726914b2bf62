"""
Common infrastructure for the USNG conversion library.

This package provides foundational components used across all modules:
- Geodetic and grid constants with provenance
- Immutable value types for geographic and planar points
- The error hierarchy
- Logging configuration
"""

from common.constants import Constant, GridConstants
from common.types import (
    GeographicPoint,
    UtmPoint,
    UpsPoint,
    UsngLocation,
    UsngSquare,
    normalize_longitude,
)
from common.errors import (
    UsngError,
    MalformedUsngError,
    InvalidGridDesignatorError,
    OutOfRangeError,
    ZoneMismatchError,
    NoMatchError,
    InsufficientInformationError,
    UnsupportedZoneError,
)
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GridConstants",
    "GeographicPoint",
    "UtmPoint",
    "UpsPoint",
    "UsngLocation",
    "UsngSquare",
    "normalize_longitude",
    "UsngError",
    "MalformedUsngError",
    "InvalidGridDesignatorError",
    "OutOfRangeError",
    "ZoneMismatchError",
    "NoMatchError",
    "InsufficientInformationError",
    "UnsupportedZoneError",
    "get_logger",
]
