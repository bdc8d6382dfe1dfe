"""
British National Grid references (e.g. ``TQ 30047 80418``).

The two-letter prefix names a 100 km square of the OSGB36 grid; the digit
groups are the easting and northing within that square.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from coordkit import osgb
from coordkit.degrees import validate
from coordkit.exceptions import (
    CoordinateOutOfRange,
    CoordinateParseError,
    InvalidCoordinates,
)
from coordkit.models import Coordinate, FormatError

logger = logging.getLogger(__name__)

NOTATION = "BNG"

# 100 km squares, row 0 = southernmost band (0-99 km northing)
GRID_LETTERS: tuple[tuple[str, ...], ...] = (
    ("SV", "SW", "SX", "SY", "SZ", "TV", "TW"),  # 0-99km
    ("SQ", "SR", "SS", "ST", "SU", "TQ", "TR"),  # 100-199km
    ("SL", "SM", "SN", "SO", "SP", "TL", "TM"),  # 200-299km
    ("SF", "SG", "SH", "SJ", "SK", "TF", "TG"),  # 300-399km
    ("SA", "SB", "SC", "SD", "SE", "TA", "TB"),  # 400-499km
    ("NV", "NW", "NX", "NY", "NZ", "OV", "OW"),  # 500-599km
    ("NQ", "NR", "NS", "NT", "NU", "OQ", "OR"),  # 600-699km
    ("NL", "NM", "NN", "NO", "NP", "OL", "OM"),  # 700-799km
    ("NF", "NG", "NH", "NJ", "NK", "OF", "OG"),  # 800-899km
    ("NA", "NB", "NC", "ND", "NE", "OA", "OB"),  # 900-999km
    ("HV", "HW", "HX", "HY", "HZ", "JV", "JW"),  # 1000-1099km
    ("HQ", "HR", "HS", "HT", "HU", "JQ", "JR"),  # 1100-1199km
    ("HL", "HM", "HN", "HO", "HP", "JL", "JM"),  # 1200-1299km
)

_GRID_INDEX: dict[str, tuple[int, int]] = {
    letters: (row, col)
    for row, band in enumerate(GRID_LETTERS)
    for col, letters in enumerate(band)
}

_SQUARE = 100000

# Pre-filter on WGS84, post-filter on grid metres
_MIN_LAT, _MAX_LAT = 49.5, 61.0
_MIN_LNG, _MAX_LNG = -8.5, 2.0
_MAX_EASTING, _MAX_NORTHING = 800000, 1300000

_SPACED_RE = re.compile(r"^([A-Z]{2})\s*(\d{3,5})\s+(\d{3,5})$", re.IGNORECASE)
_COMPACT_RE = re.compile(r"^([A-Z]{2})\s*(\d{6}|\d{8}|\d{10})$", re.IGNORECASE)


def encode(lat: float, lng: float) -> str:
    """
    Convert WGS84 *lat*/*lng* to a 1 m grid reference, e.g. 'TQ 30047 80418'.

    Raises InvalidCoordinates for a position outside WGS84 bounds, and
    CoordinateOutOfRange if the position is outside the grid.
    """
    if not validate(lat, lng):
        raise InvalidCoordinates(lat, lng)
    if lat < _MIN_LAT or lat > _MAX_LAT or lng < _MIN_LNG or lng > _MAX_LNG:
        raise CoordinateOutOfRange(lat, lng, NOTATION)

    grid = osgb.to_grid(lat, lng)
    easting = round(grid.easting)
    northing = round(grid.northing)

    if not (0 <= easting <= _MAX_EASTING and 0 <= northing <= _MAX_NORTHING):
        raise CoordinateOutOfRange(lat, lng, NOTATION)

    row, col = northing // _SQUARE, easting // _SQUARE
    # The pre-filter box reaches past the lettered squares in places
    if row >= len(GRID_LETTERS) or col >= len(GRID_LETTERS[row]):
        logger.debug("Grid cell (%d, %d) has no letters", row, col)
        raise CoordinateOutOfRange(lat, lng, NOTATION)

    return (
        f"{GRID_LETTERS[row][col]} "
        f"{easting % _SQUARE:05d} {northing % _SQUARE:05d}"
    )


def decode(text: str) -> Coordinate:
    """
    Convert a grid reference to WGS84.

    Accepts 'TQ 30500 81500', 'TQ3050081500' and shorter forms such as
    'TQ 305 815', where each short group is right-padded with zeros.

    Raises CoordinateParseError on bad grammar or an unknown square.
    """
    cleaned = " ".join(text.split())
    match = _SPACED_RE.match(cleaned)
    if match:
        letters, east_digits, north_digits = match.groups()
    else:
        match = _COMPACT_RE.match(cleaned)
        if not match:
            raise CoordinateParseError(text, NOTATION)
        letters, digits = match.groups()
        half = len(digits) // 2
        east_digits, north_digits = digits[:half], digits[half:]

    cell = _GRID_INDEX.get(letters.upper())
    if cell is None:
        raise CoordinateParseError(text, NOTATION, f"unknown square {letters.upper()}")
    row, col = cell

    easting = col * _SQUARE + int(east_digits.ljust(5, "0"))
    northing = row * _SQUARE + int(north_digits.ljust(5, "0"))
    return osgb.to_geographic(easting, northing)


def grid_square(lat: float, lng: float) -> Optional[str]:
    """Return just the two-letter 100 km square, or None outside the grid."""
    if not validate(lat, lng):
        return None
    try:
        return encode(lat, lng)[:2]
    except CoordinateOutOfRange:
        return None


def format_bng(lat: float, lng: float) -> str:
    """Like encode(), but returns FormatError.OUT_OF_RANGE instead of raising."""
    if not validate(lat, lng):
        return FormatError.INVALID_COORDINATES
    try:
        return encode(lat, lng)
    except CoordinateOutOfRange:
        return FormatError.OUT_OF_RANGE


def parse_bng(text: str) -> Optional[Coordinate]:
    """Like decode(), but returns None for anything that is not BNG."""
    try:
        return decode(text)
    except CoordinateParseError:
        return None
