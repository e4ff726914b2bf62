"""
USNG String Parser.

Splits a possibly truncated USNG string into its tokens. Tokens are taken
from the right, so any prefix may be missing:

    Full USNG:  14TPU3467
    Truncated:    TPU3467
    Truncated:     PU3467
    Truncated:       3467
    Truncated:  14TPU
    Truncated:  14T
    Truncated:     PU

Whitespace is ignored and letters are case-insensitive.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional

from common.constants import GridConstants
from common.errors import MalformedUsngError
from usng.grid_letters import GridZone


# zone+band and square are optional; trailing digits may be empty
_USNG_PATTERN = re.compile(r"^(?:(\d{1,2})?([A-Z]))??([A-Z]{2})?(\d*)$")


@dataclass(frozen=True)
class ParsedUsngTokens:
    """What is known about a USNG reference after parsing.

    Attributes
    ----------
    utm_zone : int, optional
        Numeric UTM zone, if given.
    grid_zone : GridZone, optional
        Band or polar zone letter, if given.
    grid_square : str, optional
        Two-letter 100 km square, if given.
    digits : str
        The trailing digit run, possibly empty.
    """
    utm_zone: Optional[int] = None
    grid_zone: Optional[GridZone] = None
    grid_square: Optional[str] = None
    digits: str = ""

    @property
    def precision(self) -> int:
        return len(self.digits) // 2

    @property
    def scale(self) -> float:
        """Meters per unit of the last digit."""
        return 10 ** (GridConstants.METER_DIGITS.value - self.precision)

    @property
    def easting_digits(self) -> str:
        return self.digits[:self.precision]

    @property
    def northing_digits(self) -> str:
        return self.digits[self.precision:]

    @property
    def easting_offset(self) -> float:
        """Offset of the reference into its square, east, in meters."""
        if not self.digits:
            return 0
        return int(self.easting_digits) * self.scale

    @property
    def northing_offset(self) -> float:
        """Offset of the reference into its square, north, in meters."""
        if not self.digits:
            return 0
        return int(self.northing_digits) * self.scale

    @property
    def is_complete(self) -> bool:
        """Whether the reference locates a point without any search."""
        if self.grid_square is None or self.grid_zone is None:
            return False
        return self.utm_zone is not None or self.grid_zone.is_polar

    def with_prefix(
        self,
        utm_zone: Optional[int],
        grid_zone: GridZone,
        grid_square: str
    ) -> "ParsedUsngTokens":
        """Copy with the zone, band and square filled in."""
        return replace(self, utm_zone=utm_zone, grid_zone=grid_zone, grid_square=grid_square)


def parse_usng(usng: str) -> ParsedUsngTokens:
    """Parse a USNG string into tokens.

    Parameters
    ----------
    usng : str
        A full or truncated USNG reference.

    Returns
    -------
    ParsedUsngTokens
        The tokens present in the string.

    Raises
    ------
    MalformedUsngError
        If the string is empty, contains other characters, has an odd
        number of digits, or names an unknown zone or band.
    """
    text = re.sub(r"\s+", "", usng).upper()
    if not text:
        raise MalformedUsngError("USNG: empty reference.")

    fields = _USNG_PATTERN.match(text)
    if fields is None:
        raise MalformedUsngError(f"USNG: cannot parse '{usng}'.")

    zone_text, zone_letter, grid_square, digits = fields.groups()

    if len(digits) % 2:
        raise MalformedUsngError(
            f"USNG: '{usng}' has an odd number of digits ({len(digits)}); "
            f"easting and northing need the same precision."
        )

    utm_zone = None
    grid_zone = None
    if zone_letter:
        grid_zone = GridZone.from_letter(zone_letter)
    if zone_text:
        utm_zone = int(zone_text)
        if not 1 <= utm_zone <= 60:
            raise MalformedUsngError(f"USNG: UTM zone {utm_zone} is not in 1-60.")
        if grid_zone.is_polar:
            raise MalformedUsngError(
                f"USNG: polar zone {grid_zone.letter} does not take a UTM zone number."
            )

    return ParsedUsngTokens(
        utm_zone=utm_zone,
        grid_zone=grid_zone,
        grid_square=grid_square,
        digits=digits,
    )
