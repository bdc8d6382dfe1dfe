"""Tests for coordkit.navigation module."""

import pytest

from coordkit.exceptions import InvalidCoordinates
from coordkit.models import Coordinate, Leg, NavigationUrls
from coordkit.navigation import distance, distance_and_bearing, navigation_urls


class TestNavigationUrls:
    def test_urls(self, london: Coordinate):
        urls = navigation_urls(london.latitude, london.longitude)
        assert isinstance(urls, NavigationUrls)
        assert urls.map_url == "https://www.google.com/maps?q=51.5074,-0.1278"
        assert urls.nav_url == "https://waze.com/ul?ll=51.5074,-0.1278&navigate=yes"

    def test_to_dict_keys(self, london: Coordinate):
        urls = navigation_urls(london.latitude, london.longitude)
        assert set(urls.to_dict()) == {"map_url", "nav_url"}


class TestDistanceAndBearing:
    def test_one_degree_along_equator(self):
        leg = distance_and_bearing(Coordinate(0, 0), Coordinate(0, 1))
        assert isinstance(leg, Leg)
        assert leg.distance_m == pytest.approx(111319.491, abs=0.01)
        assert leg.initial_bearing == pytest.approx(90.0)
        assert leg.final_bearing == pytest.approx(90.0)

    @pytest.mark.parametrize(
        ("end", "bearing"),
        [
            (Coordinate(1, 0), 0.0),
            (Coordinate(0, 1), 90.0),
            (Coordinate(-1, 0), 180.0),
            (Coordinate(0, -1), 270.0),
        ],
    )
    def test_cardinal_bearings(self, end: Coordinate, bearing: float):
        leg = distance_and_bearing(Coordinate(0, 0), end)
        assert leg.initial_bearing == pytest.approx(bearing, abs=1e-6)
        assert 0 <= leg.initial_bearing < 360

    def test_london_to_paris(self, london: Coordinate):
        paris = Coordinate(48.8566, 2.3522)
        leg = distance_and_bearing(london, paris)
        assert 340_000 < leg.distance_m < 347_000
        assert 90 < leg.initial_bearing < 180
        assert leg.distance_km == pytest.approx(leg.distance_m / 1000)

    def test_distance_shortcut(self, london: Coordinate):
        assert distance(london, london) == pytest.approx(0.0, abs=1e-9)

    def test_invalid_point_raises(self, london: Coordinate):
        with pytest.raises(InvalidCoordinates):
            distance_and_bearing(london, Coordinate(91, 0))


class TestLeg:
    def test_nautical_miles(self):
        leg = Leg(distance_m=1852.0, initial_bearing=0.0, final_bearing=0.0)
        assert leg.distance_nm == pytest.approx(1.0)

    def test_to_dict(self):
        leg = Leg(distance_m=3704.0, initial_bearing=45.04, final_bearing=45.06)
        assert leg.to_dict() == {
            "distance_m": 3704.0,
            "distance_nm": 2.0,
            "initial_bearing": 45.0,
            "final_bearing": 45.1,
        }
