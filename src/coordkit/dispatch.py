"""
Recognise which notation a free-form string is written in.

Parsers are tried from the strictest grammar to the loosest. DD goes last:
a bare pair of numbers also turns up inside the digit groups of the other
notations.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from coordkit.degrees import parse_dd, parse_ddm, parse_dms
from coordkit.exceptions import NoCoordinateFound
from coordkit.military_grid import parse_mgrs
from coordkit.models import Coordinate, CoordinateFormat, ParseResult
from coordkit.national_grid import parse_bng

logger = logging.getLogger(__name__)

Parser = Callable[[str], Optional[Coordinate]]

PARSERS: tuple[tuple[CoordinateFormat, Parser], ...] = (
    (CoordinateFormat.MGRS, parse_mgrs),
    (CoordinateFormat.BNG, parse_bng),
    (CoordinateFormat.DMS, parse_dms),
    (CoordinateFormat.DDM, parse_ddm),
    (CoordinateFormat.DD, parse_dd),
)


def detect(text: str) -> Optional[ParseResult]:
    """
    Return the first notation that decodes *text*, with its coordinate.

    Returns None if no parser accepts it.
    """
    text = text.strip()
    if not text:
        return None

    for fmt, parser in PARSERS:
        coordinate = parser(text)
        if coordinate is not None:
            logger.debug(f"Parsed {fmt.value} coordinates: {coordinate}")
            return ParseResult(format=fmt, coordinate=coordinate)

    logger.info(f"No coordinates recognised in '{text}'")
    return None


def parse(text: str) -> Optional[Coordinate]:
    """Decode *text* in whichever notation it is written, or return None."""
    result = detect(text)
    return result.coordinate if result else None


def resolve(text: str) -> ParseResult:
    """
    Like detect(), for callers that expect a coordinate.

    Raises NoCoordinateFound if nothing matches.
    """
    result = detect(text)
    if result is None:
        raise NoCoordinateFound(text)
    return result
