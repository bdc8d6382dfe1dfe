"""Map-service deep links and geodesic distance/bearing between positions."""

from __future__ import annotations

from geographiclib.geodesic import Geodesic

from coordkit.degrees import validate
from coordkit.exceptions import InvalidCoordinates
from coordkit.models import Coordinate, Leg, NavigationUrls

MAP_URL = "https://www.google.com/maps?q={lat},{lng}"
NAV_URL = "https://waze.com/ul?ll={lat},{lng}&navigate=yes"


def navigation_urls(lat: float, lng: float) -> NavigationUrls:
    """Web-map and turn-by-turn links for (*lat*, *lng*)."""
    return NavigationUrls(
        map_url=MAP_URL.format(lat=lat, lng=lng),
        nav_url=NAV_URL.format(lat=lat, lng=lng),
    )


def _normalise(bearing: float) -> float:
    bearing %= 360
    return 0.0 if bearing >= 360 else bearing


def _check(point: Coordinate) -> None:
    if not validate(point.latitude, point.longitude):
        raise InvalidCoordinates(point.latitude, point.longitude)


def distance_and_bearing(start: Coordinate, end: Coordinate) -> Leg:
    """
    Solve the WGS84 geodesic from *start* to *end*.

    Bearings are degrees true in [0, 360). For coincident points both
    bearings are whatever the geodesic solver reports for a zero-length
    line.

    Raises InvalidCoordinates if either point is outside WGS84 bounds.
    """
    _check(start)
    _check(end)
    g = Geodesic.WGS84.Inverse(
        start.latitude, start.longitude, end.latitude, end.longitude
    )
    return Leg(
        distance_m=g["s12"],
        initial_bearing=_normalise(g["azi1"]),
        final_bearing=_normalise(g["azi2"]),
        start=start,
        end=end,
    )


def distance(start: Coordinate, end: Coordinate) -> float:
    """Geodesic distance in metres."""
    return distance_and_bearing(start, end).distance_m
