"""Render one position in every notation."""

from __future__ import annotations

import re

from coordkit.degrees import format_dd, format_ddm, format_dms, validate
from coordkit.dispatch import resolve
from coordkit.exceptions import InvalidCoordinates
from coordkit.military_grid import format_mgrs
from coordkit.models import FormatError, FormattedCoordinates
from coordkit.national_grid import format_bng

_ERROR_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"out.*of.*range",
        r"invalid",
        r"error",
        r"failed",
        r"not.*valid",
        r"unable",
    )
)


def convert(lat: float, lng: float) -> FormattedCoordinates:
    """
    Format (*lat*, *lng*) as DD, DDM, DMS, BNG and MGRS.

    A notation that cannot represent the position holds a FormatError
    sentinel; the others are still filled in.

    Raises InvalidCoordinates if the position is outside WGS84 bounds.
    """
    if not validate(lat, lng):
        raise InvalidCoordinates(lat, lng)

    return FormattedCoordinates(
        dd=format_dd(lat, lng),
        ddm=format_ddm(lat, lng),
        dms=format_dms(lat, lng),
        bng=format_bng(lat, lng),
        mgrs=format_mgrs(lat, lng),
    )


def convert_text(text: str) -> FormattedCoordinates:
    """
    Parse *text* in any notation and format it in all of them.

    Raises NoCoordinateFound if *text* is not recognised.
    """
    coordinate = resolve(text).coordinate
    return convert(coordinate.latitude, coordinate.longitude)


def is_error_result(value: str) -> bool:
    """Return True if a formatted field holds an error rather than a value."""
    if isinstance(value, FormatError):
        return True
    return any(p.search(value) for p in _ERROR_PATTERNS)
