"""
USNG / MGRS Grid References.

Conversion between geographic coordinates and US National Grid strings
through UTM and UPS:
- Grid letter tables and the grid-zone kinds
- Parsing of full and truncated references
- Encoding, decoding and disambiguation against a reference point
- Cell corners of a reference
"""

from usng.grid_letters import GridZone, GridZoneKind
from usng.parser import ParsedUsngTokens, parse_usng
from usng.decoder import DecodedReference
from usng.disambiguation import TrialOutcome
from usng.converter import (
    ConverterConfig,
    UsngConverter,
    from_lon_lat,
    from_utm,
    from_ups,
    to_utm,
    to_lon_lat,
    to_square,
)

__all__ = [
    # Grid letters
    "GridZone",
    "GridZoneKind",
    # Parsing and decoding
    "ParsedUsngTokens",
    "parse_usng",
    "DecodedReference",
    "TrialOutcome",
    # Conversion
    "ConverterConfig",
    "UsngConverter",
    "from_lon_lat",
    "from_utm",
    "from_ups",
    "to_utm",
    "to_lon_lat",
    "to_square",
]
