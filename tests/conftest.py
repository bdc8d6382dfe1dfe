"""Shared test fixtures — well-known positions."""

import pytest

from coordkit.models import Coordinate


@pytest.fixture()
def london() -> Coordinate:
    """Trafalgar Square area, well inside grid square TQ and MGRS 30U."""
    return Coordinate(latitude=51.5074, longitude=-0.1278)


@pytest.fixture()
def sydney() -> Coordinate:
    return Coordinate(latitude=-33.8688, longitude=151.2093)


@pytest.fixture()
def exeter() -> Coordinate:
    """The position used in the notation examples throughout the docs."""
    return Coordinate(latitude=50.664782, longitude=-3.4386112)


@pytest.fixture()
def uk_landmarks() -> dict[str, Coordinate]:
    """Positions spread across the National Grid, keyed by grid square."""
    return {
        "TQ": Coordinate(51.5074, -0.1278),     # London
        "NT": Coordinate(55.9486, -3.1999),     # Edinburgh Castle
        "ST": Coordinate(51.4816, -3.1791),     # Cardiff
        "NN": Coordinate(56.7969, -5.0036),     # Ben Nevis
        "HU": Coordinate(60.1550, -1.1450),     # Lerwick
        "SW": Coordinate(50.0660, -5.7150),     # Land's End
    }
