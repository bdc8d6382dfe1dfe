"""Tests for coordkit.converter module."""

import pytest

from coordkit import convert, convert_text, is_error_result
from coordkit.exceptions import InvalidCoordinates, NoCoordinateFound
from coordkit.models import Coordinate, CoordinateFormat, FormatError, FormattedCoordinates


class TestConvert:
    def test_all_formats_for_london(self, london: Coordinate):
        result = convert(london.latitude, london.longitude)
        assert isinstance(result, FormattedCoordinates)
        assert result.dd == "51.507400, -0.127800"
        assert result.bng.startswith("TQ ")
        assert result.mgrs.startswith("30U ")
        assert result.errors() == {}

    def test_partial_success_outside_uk(self):
        result = convert(0, 0)
        assert result.bng is FormatError.OUT_OF_RANGE
        assert result.errors() == {CoordinateFormat.BNG: FormatError.OUT_OF_RANGE}
        assert result.dd == "0.000000, 0.000000"
        assert not is_error_result(result.mgrs)

    def test_hemispheres(self, sydney: Coordinate):
        result = convert(sydney.latitude, sydney.longitude)
        lat_part, lng_part = result.ddm.split(", ")
        assert lat_part.endswith("S")
        assert lng_part.endswith("E")

    @pytest.mark.parametrize(("lat", "lng"), [(90, 180), (-90, -180), (90, -180)])
    def test_inclusive_bounds(self, lat: float, lng: float):
        result = convert(lat, lng)
        assert result.dd == f"{lat:.6f}, {lng:.6f}"

    @pytest.mark.parametrize(
        ("lat", "lng"), [(90.0001, 0), (-90.0001, 0), (0, 180.0001), (0, -180.0001)]
    )
    def test_out_of_bounds_raises(self, lat: float, lng: float):
        with pytest.raises(InvalidCoordinates) as exc_info:
            convert(lat, lng)
        assert exc_info.value.latitude == lat
        assert exc_info.value.longitude == lng


class TestConvertText:
    def test_bng_round_trip(self):
        assert convert_text("TQ 30500 81500").bng == "TQ 30500 81500"

    def test_dd_input(self):
        result = convert_text("50.664782,-3.4386112")
        assert result.ddm == "50° 39.887' N, 003° 26.317' W"
        assert result.dms == "50° 39' 53.2\" N, 003° 26' 19.0\" W"
        assert result.bng.startswith("SX ")

    def test_unrecognised(self):
        with pytest.raises(NoCoordinateFound):
            convert_text("somewhere over the rainbow")

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [
            (51.5074, -0.1278),
            (-33.8688, 151.2093),
            (0.0, 0.0),
            (72.0, 179.99),
            (-89.9, -170.0),
        ],
    )
    @pytest.mark.parametrize("field", ["dd", "ddm", "dms", "mgrs"])
    def test_reparsing_a_field_reproduces_it(
        self, lat: float, lng: float, field: str
    ):
        text = getattr(convert(lat, lng), field)
        assert getattr(convert_text(text), field) == text


class TestIsErrorResult:
    @pytest.mark.parametrize(
        "value",
        [
            FormatError.OUT_OF_RANGE,
            FormatError.INVALID_COORDINATES,
            "Out of range",
            "OUT OF RANGE",
            "Invalid coordinates",
            "BNG conversion failed",
            "Error: something",
            "Not valid",
            "Unable to get location",
        ],
    )
    def test_errors(self, value: str):
        assert is_error_result(value) is True

    def test_valid_outputs(self, london: Coordinate, sydney: Coordinate):
        for point in (london, sydney):
            for value in convert(point.latitude, point.longitude).to_dict().values():
                if value != "Out of range":
                    assert is_error_result(value) is False
