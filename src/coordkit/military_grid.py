"""
Military Grid Reference System (e.g. ``30U XC 99652 10186``).

The UTM/UPS projection and 100 km square lettering come from the ``mgrs``
package (GEOTRANS). This module owns the textual grammar: spacing, case,
digit-block pairing and zone padding.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

import mgrs
from mgrs.core import MGRSError

from coordkit.degrees import validate
from coordkit.exceptions import (
    ConversionFailed,
    CoordinateParseError,
    InvalidCoordinates,
)
from coordkit.models import Coordinate, FormatError

logger = logging.getLogger(__name__)

NOTATION = "MGRS"
DEFAULT_PRECISION = 5

_converter = mgrs.MGRS()

# Zone, band, 100 km square, then any digit blocks
_INPUT_RE = re.compile(r"^(\d{1,2})?\s*([A-Z])\s*([A-Z]{2})((?:\s*\d+)*)$")
_OUTPUT_RE = re.compile(r"^(\d{1,2})?([A-Z])([A-Z]{2})(\d*)$")

_UTM_BANDS = set("CDEFGHJKLMNPQRSTUVWX")
_UPS_BANDS = set("ABYZ")
_SQUARE_LETTERS = set("ABCDEFGHJKLMNPQRSTUVWXYZ")

# Offsets across a cell, as fractions of its width, tried when decoding
_CELL_FRACTIONS = (
    (0.5, 0.5),
    (0.75, 0.75),
    (0.25, 0.25),
    (0.75, 0.25),
    (0.25, 0.75),
    (0.98, 0.98),
    (0.02, 0.02),
    (0.98, 0.02),
    (0.02, 0.98),
)


def _split(raw) -> tuple:
    """Break library output into (zone, band, square, digits)."""
    if isinstance(raw, bytes):
        raw = raw.decode("ascii")
    match = _OUTPUT_RE.match(raw.strip())
    if not match:
        raise ConversionFailed(NOTATION, f"unexpected reference '{raw}'")
    zone, band, square, digits = match.groups()
    return int(zone) if zone else None, band, square, digits


def encode(lat: float, lng: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Convert WGS84 *lat*/*lng* to a spaced MGRS reference.

    *precision* is the number of digits per easting/northing block
    (5 = 1 m, 4 = 10 m, ... 0 = 100 km square only).

    Raises InvalidCoordinates or ConversionFailed.
    """
    if not 0 <= precision <= 5:
        raise ValueError(f"precision must be between 0 and 5, got {precision}")
    if not validate(lat, lng):
        raise InvalidCoordinates(lat, lng)

    try:
        raw = _converter.toMGRS(lat, lng, MGRSPrecision=precision)
    except MGRSError as exc:
        raise ConversionFailed(NOTATION, str(exc)) from exc
    zone, band, square, digits = _split(raw)
    half = len(digits) // 2

    # GEOTRANS zero-pads the zone ("04Q"); print it as "4Q"
    parts = [f"{zone or ''}{band}", square]
    if digits:
        parts += [digits[:half], digits[half:]]
    return " ".join(parts)


# ── Decoding ──────────────────────────────────────────────────

def _wrap(degrees: float) -> float:
    return (degrees + 180) % 360 - 180


def _corner(prefix: str, east: int, north: int) -> tuple[float, float]:
    """South-west corner of the 1 m cell *east*, *north* metres into a square."""
    return _converter.toLatLon(f"{prefix}{east:05d}{north:05d}")


def _candidates(
    prefix: str, east: int, north: int, cell: int
) -> Iterator[tuple[float, float]]:
    """
    Yield positions inside the *cell* metre grid cell at (*east*, *north*),
    centre first.

    Coarse cells are sampled on the 1 m lattice. A 1 m cell is interpolated
    from its corner and the corners of its east and north neighbours.
    """
    if cell > 1:
        for fx, fy in _CELL_FRACTIONS:
            yield _corner(prefix, east + int(fx * cell), north + int(fy * cell))
        return

    lat, lng = _corner(prefix, east, north)
    step_e = 1 if east < 99999 else -1
    step_n = 1 if north < 99999 else -1
    lat_e, lng_e = _corner(prefix, east + step_e, north)
    lat_n, lng_n = _corner(prefix, east, north + step_n)
    for fx, fy in _CELL_FRACTIONS:
        dx, dy = fx * step_e, fy * step_n
        yield (
            max(-90.0, min(90.0, lat + dx * (lat_e - lat) + dy * (lat_n - lat))),
            _wrap(lng + dx * _wrap(lng_e - lng) + dy * _wrap(lng_n - lng)),
        )


def _reference_at(lat: float, lng: float, precision: int) -> Optional[tuple]:
    try:
        return _split(_converter.toMGRS(lat, lng, MGRSPrecision=precision))
    except (MGRSError, ConversionFailed):
        return None


def decode(text: str) -> Coordinate:
    """
    Convert an MGRS reference to WGS84.

    Accepts spaced ('30U XC 99652 10186') and compact ('30UXC9965210186')
    forms in any case, at any precision from 0 to 5 digits per block.

    The result lies inside the referenced cell, at its centre where that
    re-encodes to the same reference. A cell cut by a zone or band edge
    resolves to a point on the side the reference names.

    Raises CoordinateParseError if *text* is not a usable MGRS reference.
    """
    cleaned = " ".join(text.split()).upper()
    match = _INPUT_RE.match(cleaned)
    if not match:
        raise CoordinateParseError(text, NOTATION)
    zone, band, square, rest = match.groups()

    if zone:
        if not 1 <= int(zone) <= 60 or band not in _UTM_BANDS:
            raise CoordinateParseError(text, NOTATION, "bad zone or band")
    elif band not in _UPS_BANDS:
        raise CoordinateParseError(text, NOTATION, "missing zone")
    if not set(square) <= _SQUARE_LETTERS:
        raise CoordinateParseError(text, NOTATION, f"bad square {square}")

    blocks = rest.split()
    if len(blocks) == 2:
        if len(blocks[0]) != len(blocks[1]) or len(blocks[0]) > 5:
            raise CoordinateParseError(text, NOTATION, "unpaired digit blocks")
    elif len(blocks) == 1:
        if len(blocks[0]) % 2 or len(blocks[0]) > 10:
            raise CoordinateParseError(text, NOTATION, "odd digit count")
    elif blocks:
        raise CoordinateParseError(text, NOTATION, "too many digit blocks")

    digits = "".join(blocks)
    precision = len(digits) // 2
    east = int(digits[:precision].ljust(5, "0"))
    north = int(digits[precision:].ljust(5, "0"))
    prefix = f"{zone or ''}{band}{square}"
    wanted = (int(zone) if zone else None, band, square, digits)

    first = None
    try:
        for lat, lng in _candidates(prefix, east, north, 10 ** (5 - precision)):
            if first is None:
                first = (lat, lng)
            if _reference_at(lat, lng, precision) == wanted:
                return Coordinate(latitude=lat, longitude=lng)
    except MGRSError as exc:
        logger.debug("mgrs rejected %s%s: %s", prefix, digits, exc)
        raise CoordinateParseError(text, NOTATION, str(exc)) from exc

    logger.debug(
        "No point in %s%s re-encodes to it, using the centre", prefix, digits
    )
    return Coordinate(latitude=first[0], longitude=first[1])


def format_mgrs(lat: float, lng: float) -> str:
    """1 m MGRS reference, or FormatError.INVALID_COORDINATES."""
    try:
        return encode(lat, lng)
    except (InvalidCoordinates, ConversionFailed):
        return FormatError.INVALID_COORDINATES


def parse_mgrs(text: str) -> Optional[Coordinate]:
    """Decoded MGRS reference, or None if *text* is not one."""
    try:
        return decode(text)
    except CoordinateParseError:
        return None
