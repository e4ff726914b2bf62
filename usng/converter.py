"""
USNG Converter.

Front end of the library: converts geographic points to USNG strings and
back, resolves truncated strings against a reference point, and reports the
cell a string designates.

Usage
-----
>>> from common.types import GeographicPoint
>>> from usng.converter import from_lon_lat
>>> from_lon_lat(GeographicPoint(lat=38.894, lon=-77.043), 5)
'18S UJ 22821 06997'

The module-level functions share one default ``UsngConverter``. Build a
converter with a ``ConverterConfig`` to change the validation mode, the
polar search or the log level.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from common.logging_config import get_logger, set_package_level
from common.types import GeographicPoint, UpsPoint, UsngLocation, UsngSquare, UtmPoint
from usng import encoder
from usng.disambiguation import resolve_tokens
from usng.parser import parse_usng
from usng.square import to_square as _to_square


@dataclass
class ConverterConfig:
    """Configuration for USNG conversion.

    Attributes
    ----------
    strict : bool
        Default validation mode for decoding. Strict decoding requires the
        position to fall in exactly the zone and band named; non-strict
        tolerates the overlap near zone and band edges.
    search_polar : bool
        Whether truncated references may resolve to UPS zones.
    log_level : int
        Level applied to all of the library's loggers, process-wide.
    """
    strict: bool = False
    search_polar: bool = True
    log_level: int = logging.WARNING


class UsngConverter:
    """Converter between geographic points and USNG strings.

    Apart from ``log_level`` the converter holds only its configuration, so
    one instance can be shared freely. ``log_level`` is applied to every
    logger of the package when a converter is built, so it also changes
    what the module-level functions and other converters log.

    Parameters
    ----------
    config : ConverterConfig, optional
        Conversion settings (default: non-strict, polar search on).
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self._logger = get_logger(f"{__name__}.UsngConverter", self.config.log_level)
        set_package_level(self.config.log_level)

    def _strict(self, strict: Optional[bool]) -> bool:
        return self.config.strict if strict is None else strict

    def from_lon_lat(self, point: GeographicPoint, precision: int) -> str:
        """Encode a geographic point at the given precision.

        Parameters
        ----------
        point : GeographicPoint
            Position to encode. Longitudes outside (-180, 180] are wrapped.
        precision : int
            Digits per coordinate: 0 = 100 km, ..., 5 = 1 m; more digits
            add fractions of a meter.

        Returns
        -------
        str
            Canonical USNG string, e.g. ``"15T WK 0866 8295"``.
        """
        return encoder.from_lon_lat(point, precision)

    def from_utm(self, zone: int, grid_zone: str, easting: float, northing: float, precision: int) -> str:
        """Encode a UTM point whose band is already known."""
        return encoder.from_utm(zone, grid_zone, easting, northing, precision)

    def from_ups(self, grid_zone: str, x: float, y: float, precision: int) -> str:
        """Encode a UPS point in polar zone A, B, Y or Z."""
        return encoder.from_ups(grid_zone, x, y, precision)

    def to_utm(
        self,
        usng: str,
        reference: Optional[GeographicPoint] = None,
        strict: Optional[bool] = None
    ) -> Union[UtmPoint, UpsPoint]:
        """Decode a USNG string to its planar south-west corner.

        Parameters
        ----------
        usng : str
            Full or truncated reference; case and whitespace are ignored.
        reference : GeographicPoint, optional
            Approximate location, required when the zone, band or square
            is missing.
        strict : bool, optional
            Validation mode; defaults to ``config.strict``.

        Returns
        -------
        UtmPoint or UpsPoint
            Planar coordinate with precision and canonical string.

        Raises
        ------
        UsngError
            Subclass naming why the string could not be decoded.
        """
        tokens = parse_usng(usng)
        return resolve_tokens(tokens, reference, self._strict(strict), self.config.search_polar).planar

    def to_lon_lat(
        self,
        usng: str,
        reference: Optional[GeographicPoint] = None,
        strict: Optional[bool] = None
    ) -> UsngLocation:
        """Decode a USNG string to the latitude/longitude of its south-west corner.

        Parameters and errors are those of ``to_utm``.

        Only the returned ``usng`` string round-trips. The corner is
        recovered through the inverse projection and can land a fraction of
        a meter below its grid line, so encoding ``lat``/``lon`` again may
        give the neighbouring cell to the south or west.

        Examples
        --------
        >>> loc = UsngConverter().to_lon_lat("B AN")
        >>> (round(loc.lat, 6), loc.precision)
        (-90.0, 0)
        """
        tokens = parse_usng(usng)
        decoded = resolve_tokens(tokens, reference, self._strict(strict), self.config.search_polar)
        self._logger.debug(f"{usng!r} -> ({decoded.lat:.6f}, {decoded.lon:.6f})")
        return UsngLocation(
            lat=float(decoded.lat),
            lon=float(decoded.lon),
            precision=decoded.planar.precision,
            usng=decoded.planar.usng,
        )

    def to_square(self, usng: str, reference: Optional[GeographicPoint] = None) -> UsngSquare:
        """Corners and center of the cell a USNG string designates.

        Always decodes non-strictly. Only UTM cells are supported.

        Raises
        ------
        UnsupportedZoneError
            If the string resolves to a polar zone.
        """
        return _to_square(parse_usng(usng), reference, self.config.search_polar)


_default_converter = UsngConverter()


def from_lon_lat(point: GeographicPoint, precision: int) -> str:
    """Encode a geographic point with the default converter."""
    return _default_converter.from_lon_lat(point, precision)


def from_utm(zone: int, grid_zone: str, easting: float, northing: float, precision: int) -> str:
    return _default_converter.from_utm(zone, grid_zone, easting, northing, precision)


def from_ups(grid_zone: str, x: float, y: float, precision: int) -> str:
    return _default_converter.from_ups(grid_zone, x, y, precision)


def to_utm(
    usng: str,
    reference: Optional[GeographicPoint] = None,
    strict: Optional[bool] = None
) -> Union[UtmPoint, UpsPoint]:
    """Decode a USNG string to a planar point with the default converter."""
    return _default_converter.to_utm(usng, reference, strict)


def to_lon_lat(
    usng: str,
    reference: Optional[GeographicPoint] = None,
    strict: Optional[bool] = None
) -> UsngLocation:
    """Decode a USNG string to a geographic location with the default converter."""
    return _default_converter.to_lon_lat(usng, reference, strict)


def to_square(usng: str, reference: Optional[GeographicPoint] = None) -> UsngSquare:
    """Corners and center of a USNG cell with the default converter."""
    return _default_converter.to_square(usng, reference)
