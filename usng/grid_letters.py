"""
Grid Letter Tables.

Static lookup tables that map 100 km grid-square indices to letters, for
UTM (three column sets and two row sets rotating with the zone number) and
for UPS (one column set and one row set per pole). Also the latitude bands
(grid-zone designators) and the approximate northing at which each band
starts.

Letters I and O are never used. All grid locations refer to the south-west
corner of a square, since eastings and northings only grow to the north-east.

Notes
-----
UTM zones fall into six sets by ``zone % 6`` (set 6 computes as 0):

=====  =============  ==========
set    column letters row letters
=====  =============  ==========
1, 4   A-H            set 1 rows
2, 5   J-R            set 2 rows
3, 6   S-Z            ...
=====  =============  ==========

with odd sets using rows starting at A and even sets rows starting at F.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from common.constants import GridConstants
from common.errors import (
    InvalidGridDesignatorError,
    MalformedUsngError,
    OutOfRangeError,
)


#                    0   1   2   3   4   5   6   7   8   9  10  11  12  13  14  15  16  17  18  19   x 100,000m northing
NS_LETTERS_ODD = ('A','B','C','D','E','F','G','H','J','K','L','M','N','P','Q','R','S','T','U','V')
NS_LETTERS_EVEN = ('F','G','H','J','K','L','M','N','P','Q','R','S','T','U','V','A','B','C','D','E')

#                  1   2   3   4   5   6   7   8   x 100,000m easting
EW_LETTERS_14 = ('A','B','C','D','E','F','G','H')
EW_LETTERS_25 = ('J','K','L','M','N','P','Q','R')
EW_LETTERS_36 = ('S','T','U','V','W','X','Y','Z')

# Latitude bands of 8 degrees from -80; X is stretched to cover 72-84.
BAND_LETTERS = ('C','D','E','F','G','H','J','K','L','M','N','P','Q','R','S','T','U','V','W','X')
BAND_START_DEG = (-80, -72, -64, -56, -48, -40, -32, -24, -16, -8, 0, 8, 16, 24, 32, 40, 48, 56, 64, 72)

# UPS grid letters
#                0    1    2    3    4    5    6    7    8    9   10   11   12   13   14   15   16   17
X_LETTERS = ('A', 'B', 'C', 'F', 'G', 'H', 'J', 'K', 'L', 'P', 'Q', 'R', 'S', 'T', 'U', 'X', 'Y', 'Z')
YN_LETTERS = ('H', 'J', 'K', 'L', 'M', 'N', 'P', 'A', 'B', 'C', 'D', 'E', 'F', 'G')
YS_LETTERS = ('N', 'P', 'Q', 'R', 'S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z',
              'A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'J', 'K', 'L', 'M')

POLAR_SOUTH_LETTERS = ('A', 'B')
POLAR_NORTH_LETTERS = ('Y', 'Z')


class GridZoneKind(Enum):
    """What kind of area a grid-zone letter designates."""
    UTM = "utm"
    POLAR_SOUTH = "polar_south"
    POLAR_NORTH = "polar_north"


@dataclass(frozen=True)
class GridZone:
    """A grid-zone letter resolved once into its kind.

    Attributes
    ----------
    letter : str
        The designator letter.
    kind : GridZoneKind
        UTM latitude band or one of the polar zones.
    """
    letter: str
    kind: GridZoneKind

    @classmethod
    def from_letter(cls, letter: str) -> "GridZone":
        letter = letter.upper()
        if letter in POLAR_SOUTH_LETTERS:
            return cls(letter, GridZoneKind.POLAR_SOUTH)
        if letter in POLAR_NORTH_LETTERS:
            return cls(letter, GridZoneKind.POLAR_NORTH)
        if letter in BAND_LETTERS:
            return cls(letter, GridZoneKind.UTM)
        raise MalformedUsngError(f"USNG: '{letter}' is not a grid zone designator.")

    @property
    def is_polar(self) -> bool:
        return self.kind is not GridZoneKind.UTM

    @property
    def is_north(self) -> bool:
        return self.kind is GridZoneKind.POLAR_NORTH

    @property
    def west(self) -> bool:
        """True for the western half-hemisphere polar zones A and Y."""
        return self.letter in ("A", "Y")


@dataclass(frozen=True)
class LetterSet:
    """Column and row letters applicable to one UTM zone."""
    easting: Tuple[str, ...]
    northing: Tuple[str, ...]


_LETTER_SETS = {
    1: LetterSet(EW_LETTERS_14, NS_LETTERS_ODD),
    2: LetterSet(EW_LETTERS_25, NS_LETTERS_EVEN),
    3: LetterSet(EW_LETTERS_36, NS_LETTERS_ODD),
    4: LetterSet(EW_LETTERS_14, NS_LETTERS_EVEN),
    5: LetterSet(EW_LETTERS_25, NS_LETTERS_ODD),
    0: LetterSet(EW_LETTERS_36, NS_LETTERS_EVEN),  # set 6
}


def letter_set_for_zone(zone: int) -> LetterSet:
    """Column and row letters for a UTM zone number."""
    return _LETTER_SETS[zone % 6]


def encode_grid_square(zone: int, easting: float, northing: float) -> str:
    """Two-letter 100 km grid square containing a UTM point.

    Parameters
    ----------
    zone : int
        UTM zone number.
    easting : float
        Easting in meters, expected within [100000, 900000).
    northing : float
        Signed northing in meters.

    Returns
    -------
    str
        Column letter followed by row letter.
    """
    size = GridConstants.GRID_SQUARE_SIZE.value
    letters = letter_set_for_zone(zone)

    ew_idx = int(np.floor(easting / size)) - 1
    # Python's modulo is already non-negative, which folds southern northings
    ns_idx = int(np.floor((northing % GridConstants.NORTHING_CYCLE.value) / size))

    if not 0 <= ew_idx < len(letters.easting):
        raise OutOfRangeError(
            f"USNG: easting {easting:.0f} has no 100km column letter in UTM zone {zone}."
        )
    return letters.easting[ew_idx] + letters.northing[ns_idx]


def decode_grid_square(zone: int, grid_square: str) -> Tuple[float, float]:
    """Base easting and northing (modulo 2,000,000 m) of a UTM grid square.

    Raises
    ------
    InvalidGridDesignatorError
        If either letter is not in the letter set of ``zone``.
    """
    letters = letter_set_for_zone(zone)
    size = GridConstants.GRID_SQUARE_SIZE.value
    try:
        ew_idx = letters.easting.index(grid_square[0])
        ns_idx = letters.northing.index(grid_square[1])
    except ValueError:
        raise InvalidGridDesignatorError(
            f"USNG: Invalid USNG 100km grid designator {grid_square} for UTM zone {zone}."
        ) from None
    return (ew_idx + 1) * size, ns_idx * size


def band_index_for_latitude(lat: float) -> int:
    """Index into the band table for a latitude; 80-84 maps onto X."""
    idx = int(np.floor((lat - GridConstants.UTM_MIN_LATITUDE.value) / GridConstants.BAND_HEIGHT.value))
    if idx == len(BAND_LETTERS):
        idx -= 1
    return idx


def band_for_latitude(lat: float) -> Optional[str]:
    """Band letter for a latitude, or None beyond the table."""
    idx = band_index_for_latitude(lat)
    if 0 <= idx < len(BAND_LETTERS):
        return BAND_LETTERS[idx]
    return None


def band_index(letter: str) -> int:
    return BAND_LETTERS.index(letter)


def band_min_northing(letter: str) -> float:
    """Approximate northing of the southern edge of a band.

    This ignores the dependence on longitude, so callers must be ready for
    the true northing to lie one 2,000,000 m cycle away.
    """
    return GridConstants.BAND_NORTHING_PER_DEGREE.value * BAND_START_DEG[band_index(letter)]


def encode_polar_square(grid_zone: GridZone, x: float, y: float) -> str:
    """Two-letter 100 km grid square containing a UPS point."""
    size = GridConstants.GRID_SQUARE_SIZE.value
    origin = GridConstants.UPS_FALSE_ORIGIN.value

    x_idx = int(np.floor((x - origin) / size))
    y_idx = int(np.floor((y - origin) / size))

    if x_idx < 0:
        x_idx += len(X_LETTERS)

    if grid_zone.kind is GridZoneKind.POLAR_SOUTH:
        y_letters = YS_LETTERS
    else:
        y_letters = YN_LETTERS
    if y_idx < 0:
        y_idx += len(y_letters)

    if not (0 <= x_idx < len(X_LETTERS) and 0 <= y_idx < len(y_letters)):
        raise OutOfRangeError(f"USNG: UPS point ({x:.0f}, {y:.0f}) is outside zone {grid_zone.letter}.")
    return X_LETTERS[x_idx] + y_letters[y_idx]


def decode_polar_square(grid_zone: GridZone, grid_square: str) -> Tuple[float, float]:
    """Offset of a UPS grid square's south-west corner from the pole, in meters.

    The western half-hemisphere zones (A, Y) reuse the column letters with
    indices shifted by one full letter cycle.

    Raises
    ------
    InvalidGridDesignatorError
        If the letters do not exist in the polar zone.
    """
    size = GridConstants.GRID_SQUARE_SIZE.value

    if grid_square[0] not in X_LETTERS:
        raise InvalidGridDesignatorError(
            f"USNG: Invalid grid square {grid_square} for polar zone {grid_zone.letter}."
        )
    x_idx = X_LETTERS.index(grid_square[0])
    if grid_zone.west:
        x_idx -= len(X_LETTERS)

    if grid_zone.kind is GridZoneKind.POLAR_SOUTH:
        y_letters, x_min, x_max, half = YS_LETTERS, -12, 11, 11
    elif grid_zone.kind is GridZoneKind.POLAR_NORTH:
        y_letters, x_min, x_max, half = YN_LETTERS, -7, 6, 6
    else:
        raise InvalidGridDesignatorError(
            f"UPS only valid in zones A, B, Y, and Z, not {grid_zone.letter}."
        )

    y_idx = y_letters.index(grid_square[1]) if grid_square[1] in y_letters else -1
    if x_idx < x_min or x_idx > x_max or y_idx < 0:
        raise InvalidGridDesignatorError(
            f"USNG: Invalid grid square {grid_square} for polar zone {grid_zone.letter}."
        )
    if y_idx > half:
        y_idx -= len(y_letters)

    return x_idx * size, y_idx * size
