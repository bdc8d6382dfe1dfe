"""coordkit — Convert positions between DD, DDM, DMS, BNG and MGRS."""

from coordkit.converter import convert, convert_text, is_error_result
from coordkit.degrees import (
    format_dd,
    format_ddm,
    format_dms,
    parse_dd,
    parse_ddm,
    parse_dms,
)
from coordkit.dispatch import detect, parse, resolve
from coordkit.exceptions import (
    ConversionFailed,
    CoordinateOutOfRange,
    CoordinateParseError,
    CoordKitError,
    InvalidCoordinates,
    NoCoordinateFound,
)
from coordkit.military_grid import format_mgrs, parse_mgrs
from coordkit.models import (
    Coordinate,
    CoordinateFormat,
    FormatError,
    FormattedCoordinates,
    Leg,
    NavigationUrls,
    ParseResult,
)
from coordkit.national_grid import format_bng, parse_bng
from coordkit.navigation import distance, distance_and_bearing, navigation_urls

__all__ = [
    "convert",
    "convert_text",
    "is_error_result",
    "parse",
    "detect",
    "resolve",
    "format_dd",
    "format_ddm",
    "format_dms",
    "format_bng",
    "format_mgrs",
    "parse_dd",
    "parse_ddm",
    "parse_dms",
    "parse_bng",
    "parse_mgrs",
    "navigation_urls",
    "distance",
    "distance_and_bearing",
    "Coordinate",
    "CoordinateFormat",
    "FormatError",
    "FormattedCoordinates",
    "Leg",
    "NavigationUrls",
    "ParseResult",
    "CoordKitError",
    "InvalidCoordinates",
    "CoordinateOutOfRange",
    "CoordinateParseError",
    "ConversionFailed",
    "NoCoordinateFound",
]
