"""Decimal degrees, degrees-decimal-minutes and degrees-minutes-seconds."""

from __future__ import annotations

import re
from typing import Optional

from coordkit.models import Coordinate, FormatError

_DEGREE = r"(?:\s*[°º]\s*|\s+)"
_MINUTE = r"(?:\s*['′]\s*|\s+)"
_SECOND = r"\s*(?:[\"″]|'')?\s*"
_HEMISPHERE = r"([NSEW])"

_DD_RE = re.compile(
    r"^\s*([+-]?\d+(?:\.\d+)?)\s*,\s*([+-]?\d+(?:\.\d+)?)\s*$"
)

_DDM_AXIS = rf"(\d{{1,3}}){_DEGREE}(\d{{1,2}}(?:\.\d+)?)\s*['′]?\s*{_HEMISPHERE}"
_DMS_AXIS = (
    rf"(\d{{1,3}}){_DEGREE}(\d{{1,2}}){_MINUTE}"
    rf"(\d{{1,2}}(?:\.\d+)?){_SECOND}{_HEMISPHERE}"
)

_DDM_RE = re.compile(rf"^\s*{_DDM_AXIS}\s*,?\s*{_DDM_AXIS}\s*$", re.IGNORECASE)
_DMS_RE = re.compile(rf"^\s*{_DMS_AXIS}\s*,?\s*{_DMS_AXIS}\s*$", re.IGNORECASE)


def validate(lat: float, lng: float) -> bool:
    """Return True if (*lat*, *lng*) lies within the WGS84 bounds."""
    return -90 <= lat <= 90 and -180 <= lng <= 180


# ── Formatting ────────────────────────────────────────────────

def _hemisphere(value: float, is_latitude: bool) -> str:
    if is_latitude:
        return "N" if value >= 0 else "S"
    return "E" if value >= 0 else "W"


def _pad(degrees: int, is_latitude: bool) -> str:
    return f"{degrees:02d}" if is_latitude else f"{degrees:03d}"


def ddm_axis(value: float, is_latitude: bool) -> str:
    """Format one axis as e.g. ``50° 39.887' N``."""
    # Round on thousandths of a minute so 59.9996' carries into the degree
    total = round(abs(value) * 60000)
    degrees, rest = divmod(total, 60000)
    return (
        f"{_pad(degrees, is_latitude)}° {rest / 1000:.3f}' "
        f"{_hemisphere(value if total else 0.0, is_latitude)}"
    )


def dms_axis(value: float, is_latitude: bool) -> str:
    """Format one axis as e.g. ``50° 39' 53.2" N``."""
    total = round(abs(value) * 36000)
    degrees, rest = divmod(total, 36000)
    minutes, tenths = divmod(rest, 600)
    return (
        f"{_pad(degrees, is_latitude)}° {minutes:02d}' {tenths / 10:.1f}\" "
        f"{_hemisphere(value if total else 0.0, is_latitude)}"
    )


def format_dd(lat: float, lng: float) -> str:
    """Decimal degrees to six places, or FormatError.INVALID_COORDINATES."""
    if not validate(lat, lng):
        return FormatError.INVALID_COORDINATES
    return f"{lat:.6f}, {lng:.6f}"


def format_ddm(lat: float, lng: float) -> str:
    """Degrees and decimal minutes, or FormatError.INVALID_COORDINATES."""
    if not validate(lat, lng):
        return FormatError.INVALID_COORDINATES
    return f"{ddm_axis(lat, True)}, {ddm_axis(lng, False)}"


def format_dms(lat: float, lng: float) -> str:
    """Degrees, minutes and seconds, or FormatError.INVALID_COORDINATES."""
    if not validate(lat, lng):
        return FormatError.INVALID_COORDINATES
    return f"{dms_axis(lat, True)}, {dms_axis(lng, False)}"


# ── Parsing ───────────────────────────────────────────────────

def _axis(degrees: str, minutes: str, seconds: str, hemisphere: str) -> Optional[float]:
    """Combine one matched axis into signed decimal degrees."""
    mins = float(minutes)
    secs = float(seconds)
    if mins >= 60 or secs >= 60:
        return None
    value = int(degrees) + mins / 60 + secs / 3600
    if hemisphere.upper() in ("S", "W"):
        value = -value
    return value


def _pair(first: tuple, second: tuple) -> Optional[Coordinate]:
    """
    Assemble two ``(value, hemisphere)`` axes into a Coordinate.

    One axis must be N/S and the other E/W; either order is accepted.
    """
    (v1, h1), (v2, h2) = first, second
    if v1 is None or v2 is None:
        return None
    h1, h2 = h1.upper(), h2.upper()
    if h1 in "NS" and h2 in "EW":
        lat, lng = v1, v2
    elif h1 in "EW" and h2 in "NS":
        lat, lng = v2, v1
    else:
        return None
    if not validate(lat, lng):
        return None
    return Coordinate(latitude=lat, longitude=lng)


def parse_dd(text: str) -> Optional[Coordinate]:
    """Parse ``"<lat>, <lng>"`` signed decimal degrees."""
    match = _DD_RE.match(text)
    if not match:
        return None
    lat, lng = float(match.group(1)), float(match.group(2))
    if not validate(lat, lng):
        return None
    return Coordinate(latitude=lat, longitude=lng)


def parse_ddm(text: str) -> Optional[Coordinate]:
    """Parse e.g. ``50° 39.887' N, 3° 26.317' W`` or ``50 39.887 N 3 26.317 W``."""
    match = _DDM_RE.match(text)
    if not match:
        return None
    d1, m1, h1, d2, m2, h2 = match.groups()
    return _pair(
        (_axis(d1, m1, "0", h1), h1),
        (_axis(d2, m2, "0", h2), h2),
    )


def parse_dms(text: str) -> Optional[Coordinate]:
    """Parse e.g. ``50° 39' 53.2" N, 3° 26' 19.0" W`` or the plain-space form."""
    match = _DMS_RE.match(text)
    if not match:
        return None
    d1, m1, s1, h1, d2, m2, s2, h2 = match.groups()
    return _pair(
        (_axis(d1, m1, s1, h1), h1),
        (_axis(d2, m2, s2, h2), h2),
    )
