"""Typed value models for coordkit."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional

_METRES_PER_NM = 1852.0


class CoordinateFormat(str, Enum):
    """The five supported textual notations."""

    DD = "DD"
    DDM = "DDM"
    DMS = "DMS"
    BNG = "BNG"
    MGRS = "MGRS"

    def __str__(self) -> str:
        return self.value


class FormatError(str, Enum):
    """
    Sentinel placed in a formatted field when that notation cannot
    represent the position. Members compare equal to their text.
    """

    OUT_OF_RANGE = "Out of range"
    INVALID_COORDINATES = "Invalid coordinates"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in decimal degrees."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class GridCoordinate:
    """OSGB36 national grid position in metres from the false origin."""

    easting: float
    northing: float

    def to_dict(self) -> dict:
        return {"easting": self.easting, "northing": self.northing}


@dataclass(frozen=True)
class FormattedCoordinates:
    """One position rendered in every supported notation."""

    dd: str
    ddm: str
    dms: str
    bng: str
    mgrs: str

    def get(self, fmt: CoordinateFormat) -> str:
        """Return the field for *fmt*."""
        return getattr(self, CoordinateFormat(fmt).value.lower())

    def errors(self) -> dict[CoordinateFormat, FormatError]:
        """Fields that hold a sentinel rather than a formatted value."""
        return {
            CoordinateFormat(f.name.upper()): getattr(self, f.name)
            for f in fields(self)
            if isinstance(getattr(self, f.name), FormatError)
        }

    def to_dict(self) -> dict:
        """Plain ``{"DD": ..., "MGRS": ...}`` mapping of strings."""
        return {f.name.upper(): str(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class ParseResult:
    """A decoded coordinate and the notation it was recognised as."""

    format: CoordinateFormat
    coordinate: Coordinate

    def to_dict(self) -> dict:
        return {"format": self.format.value, **self.coordinate.to_dict()}


@dataclass(frozen=True)
class NavigationUrls:
    """Deep links into external map services."""

    map_url: str
    nav_url: str

    def to_dict(self) -> dict:
        return {"map_url": self.map_url, "nav_url": self.nav_url}


@dataclass(frozen=True)
class Leg:
    """Geodesic distance and bearings between two positions."""

    distance_m: float
    initial_bearing: float   # degrees true, [0, 360)
    final_bearing: float     # degrees true, [0, 360)
    start: Optional[Coordinate] = None
    end: Optional[Coordinate] = None

    @property
    def distance_km(self) -> float:
        return self.distance_m / 1000.0

    @property
    def distance_nm(self) -> float:
        return self.distance_m / _METRES_PER_NM

    def to_dict(self) -> dict:
        return {
            "distance_m": round(self.distance_m, 3),
            "distance_nm": round(self.distance_nm, 3),
            "initial_bearing": round(self.initial_bearing, 1),
            "final_bearing": round(self.final_bearing, 1),
        }
