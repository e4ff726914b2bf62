"""
Exceptions raised by the USNG conversion code.

Every failure is a ``UsngError``, which is also a ``ValueError`` so callers
that only care about bad input can catch the builtin.
"""


class UsngError(ValueError):
    """Base class for all conversion failures."""


class MalformedUsngError(UsngError):
    """The string cannot be split into zone, band, square and digit tokens."""


class InvalidGridDesignatorError(UsngError):
    """Grid-square letters are not defined for the zone they are paired with."""


class OutOfRangeError(UsngError):
    """The decoded latitude lies outside the band or polar zone claimed."""


class ZoneMismatchError(UsngError):
    """The recomputed UTM zone or band disagrees with the supplied one."""


class NoMatchError(UsngError):
    """A disambiguation search found no candidate that decodes."""


class InsufficientInformationError(UsngError):
    """Not enough prefix information and no reference point to fill it in."""


class UnsupportedZoneError(UsngError):
    """The operation is only defined for UTM grid zones."""
