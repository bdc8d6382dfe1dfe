"""Tests for coordkit.models module."""

from dataclasses import FrozenInstanceError

import pytest

from coordkit.models import (
    Coordinate,
    CoordinateFormat,
    FormatError,
    FormattedCoordinates,
    GridCoordinate,
    ParseResult,
)


@pytest.fixture()
def bundle() -> FormattedCoordinates:
    return FormattedCoordinates(
        dd="0.000000, 0.000000",
        ddm="00° 0.000' N, 000° 0.000' E",
        dms="00° 00' 0.0\" N, 000° 00' 0.0\" E",
        bng=FormatError.OUT_OF_RANGE,
        mgrs="31N AA 66021 00000",
    )


class TestCoordinate:
    def test_frozen(self):
        point = Coordinate(51.5, -0.1)
        with pytest.raises(FrozenInstanceError):
            point.latitude = 0.0

    def test_to_dict(self):
        assert Coordinate(51.5, -0.1).to_dict() == {"latitude": 51.5, "longitude": -0.1}

    def test_grid_to_dict(self):
        assert GridCoordinate(1.0, 2.0).to_dict() == {"easting": 1.0, "northing": 2.0}


class TestFormatError:
    def test_compares_as_text(self):
        assert FormatError.OUT_OF_RANGE == "Out of range"
        assert str(FormatError.INVALID_COORDINATES) == "Invalid coordinates"


class TestFormattedCoordinates:
    def test_get_by_format(self, bundle: FormattedCoordinates):
        assert bundle.get(CoordinateFormat.MGRS) == "31N AA 66021 00000"
        assert bundle.get("DD") == "0.000000, 0.000000"

    def test_errors(self, bundle: FormattedCoordinates):
        assert bundle.errors() == {CoordinateFormat.BNG: FormatError.OUT_OF_RANGE}

    def test_to_dict(self, bundle: FormattedCoordinates):
        d = bundle.to_dict()
        assert list(d) == ["DD", "DDM", "DMS", "BNG", "MGRS"]
        assert d["BNG"] == "Out of range"
        assert type(d["BNG"]) is str


class TestParseResult:
    def test_to_dict(self):
        result = ParseResult(CoordinateFormat.BNG, Coordinate(51.5, -0.1))
        assert result.to_dict() == {
            "format": "BNG",
            "latitude": 51.5,
            "longitude": -0.1,
        }
