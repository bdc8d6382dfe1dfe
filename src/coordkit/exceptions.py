"""Custom exception hierarchy for coordkit."""


class CoordKitError(Exception):
    """Base exception for all coordkit errors."""


class InvalidCoordinates(CoordKitError):
    """Latitude or longitude lies outside the WGS84 bounds."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Invalid coordinates: ({latitude}, {longitude}) "
            "must be within [-90, 90] x [-180, 180]"
        )


class CoordinateOutOfRange(CoordKitError):
    """A valid position that falls outside a grid's coverage area."""

    def __init__(self, latitude: float, longitude: float, notation: str):
        self.latitude = latitude
        self.longitude = longitude
        self.notation = notation
        super().__init__(
            f"({latitude}, {longitude}) is out of range for {notation}"
        )


class CoordinateParseError(CoordKitError):
    """The provided string is not valid in the given notation."""

    def __init__(self, text: str, notation: str, detail: str = ""):
        self.text = text
        self.notation = notation
        self.detail = detail
        msg = f"Not a valid {notation} coordinate: '{text}'"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class ConversionFailed(CoordKitError):
    """An underlying grid library refused to convert a value."""

    def __init__(self, notation: str, detail: str):
        self.notation = notation
        self.detail = detail
        super().__init__(f"{notation} conversion failed: {detail}")


class NoCoordinateFound(CoordKitError):
    """No supported notation matched the input text."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"No coordinate recognised in '{text}'")
