"""
WGS84 <-> OSGB36 National Grid transform.

Forward: WGS84 lat/lng -> cartesian -> Helmert shift -> Airy 1830 lat/lng
-> transverse Mercator easting/northing. Inverse runs the same chain
backwards. Formulae follow the Ordnance Survey guide to coordinate systems
in Great Britain; agreement with the published transform is at the few
metre level inherent to a single 7-parameter Helmert shift.

No bounds checking happens here. Callers decide whether a position is
inside the national grid before trusting the result.
"""

from __future__ import annotations

import math

from coordkit.models import Coordinate, GridCoordinate

# Airy 1830 ellipsoid (OSGB36)
_AIRY_A = 6377563.396
_AIRY_B = 6356256.909

# WGS84 ellipsoid
_WGS84_A = 6378137.0
_WGS84_B = 6356752.314245

# National Grid projection
_F0 = 0.9996012717                  # scale factor on central meridian
_PHI0 = math.radians(49.0)          # latitude of true origin
_LAMBDA0 = math.radians(-2.0)       # longitude of true origin
_E0 = 400000.0                      # easting of true origin
_N0 = -100000.0                     # northing of true origin

# Helmert parameters WGS84 -> OSGB36 (negate all for the reverse shift)
_TX = -446.448
_TY = 125.157
_TZ = -542.060
_S = 20.4894e-6
_RX = math.radians(-0.1502 / 3600)
_RY = math.radians(-0.2470 / 3600)
_RZ = math.radians(-0.8421 / 3600)

_WGS84_TO_OSGB36 = (_TX, _TY, _TZ, _S, _RX, _RY, _RZ)
_OSGB36_TO_WGS84 = tuple(-p for p in _WGS84_TO_OSGB36)


# ── Public API ────────────────────────────────────────────────

def to_grid(lat: float, lng: float) -> GridCoordinate:
    """Project a WGS84 position onto the OSGB36 National Grid."""
    phi, lam = _shift_datum(
        math.radians(lat), math.radians(lng),
        _WGS84_TO_OSGB36,
        (_WGS84_A, _WGS84_B), (_AIRY_A, _AIRY_B),
    )
    easting, northing = _project(phi, lam)
    return GridCoordinate(easting=easting, northing=northing)


def to_geographic(easting: float, northing: float) -> Coordinate:
    """Convert National Grid easting/northing back to WGS84 degrees."""
    phi, lam = _unproject(easting, northing)
    phi, lam = _shift_datum(
        phi, lam,
        _OSGB36_TO_WGS84,
        (_AIRY_A, _AIRY_B), (_WGS84_A, _WGS84_B),
    )
    return Coordinate(latitude=math.degrees(phi), longitude=math.degrees(lam))


# ── Transverse Mercator ───────────────────────────────────────

def _meridional_arc(phi: float) -> float:
    """Distance along the central meridian from the true origin to *phi*."""
    a, b = _AIRY_A, _AIRY_B
    n = (a - b) / (a + b)
    n2 = n * n
    n3 = n2 * n

    dphi = phi - _PHI0
    sphi = phi + _PHI0

    ma = (1 + n + 1.25 * n2 + 1.25 * n3) * dphi
    mb = (3 * n + 3 * n2 + 2.625 * n3) * math.sin(dphi) * math.cos(sphi)
    mc = (1.875 * n2 + 1.875 * n3) * math.sin(2 * dphi) * math.cos(2 * sphi)
    md = (35.0 / 24.0) * n3 * math.sin(3 * dphi) * math.cos(3 * sphi)

    return b * _F0 * (ma - mb + mc - md)


def _radii(phi: float) -> tuple[float, float, float]:
    """Return (nu, rho, eta2) on the Airy ellipsoid at latitude *phi*."""
    a = _AIRY_A
    e2 = 1 - (_AIRY_B ** 2) / (a ** 2)
    s2 = math.sin(phi) ** 2
    nu = a * _F0 / math.sqrt(1 - e2 * s2)
    rho = a * _F0 * (1 - e2) / (1 - e2 * s2) ** 1.5
    return nu, rho, nu / rho - 1


def _project(phi: float, lam: float) -> tuple[float, float]:
    """OSGB36 latitude/longitude in radians -> (easting, northing)."""
    nu, rho, eta2 = _radii(phi)
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    tan2 = math.tan(phi) ** 2
    tan4 = tan2 * tan2

    I = _meridional_arc(phi) + _N0
    II = nu / 2 * sin_phi * cos_phi
    III = nu / 24 * sin_phi * cos_phi ** 3 * (5 - tan2 + 9 * eta2)
    IIIA = nu / 720 * sin_phi * cos_phi ** 5 * (61 - 58 * tan2 + tan4)
    IV = nu * cos_phi
    V = nu / 6 * cos_phi ** 3 * (nu / rho - tan2)
    VI = nu / 120 * cos_phi ** 5 * (
        5 - 18 * tan2 + tan4 + 14 * eta2 - 58 * tan2 * eta2
    )

    dl = lam - _LAMBDA0
    northing = I + II * dl ** 2 + III * dl ** 4 + IIIA * dl ** 6
    easting = _E0 + IV * dl + V * dl ** 3 + VI * dl ** 5
    return easting, northing


def _unproject(easting: float, northing: float) -> tuple[float, float]:
    """(easting, northing) -> OSGB36 latitude/longitude in radians."""
    phi = _PHI0
    m = 0.0
    # Iterate the footpoint latitude until the arc matches to 0.01 mm
    for _ in range(50):
        phi = (northing - _N0 - m) / (_AIRY_A * _F0) + phi
        m = _meridional_arc(phi)
        if abs(northing - _N0 - m) < 0.00001:
            break

    nu, rho, eta2 = _radii(phi)
    tan_phi = math.tan(phi)
    tan2 = tan_phi ** 2
    tan4 = tan2 * tan2
    tan6 = tan4 * tan2
    sec_phi = 1 / math.cos(phi)

    VII = tan_phi / (2 * rho * nu)
    VIII = tan_phi / (24 * rho * nu ** 3) * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
    IX = tan_phi / (720 * rho * nu ** 5) * (61 + 90 * tan2 + 45 * tan4)
    X = sec_phi / nu
    XI = sec_phi / (6 * nu ** 3) * (nu / rho + 2 * tan2)
    XII = sec_phi / (120 * nu ** 5) * (5 + 28 * tan2 + 24 * tan4)
    XIIA = sec_phi / (5040 * nu ** 7) * (61 + 662 * tan2 + 1320 * tan4 + 720 * tan6)

    de = easting - _E0
    lat = phi - VII * de ** 2 + VIII * de ** 4 - IX * de ** 6
    lon = _LAMBDA0 + X * de - XI * de ** 3 + XII * de ** 5 - XIIA * de ** 7
    return lat, lon


# ── Datum shift ───────────────────────────────────────────────

def _shift_datum(
    phi: float,
    lam: float,
    params: tuple,
    src: tuple[float, float],
    dst: tuple[float, float],
) -> tuple[float, float]:
    """Helmert-shift a geodetic position (radians) between two ellipsoids."""
    tx, ty, tz, s, rx, ry, rz = params

    a, b = src
    e2 = 1 - (b ** 2) / (a ** 2)
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    nu = a / math.sqrt(1 - e2 * sin_phi ** 2)

    # Cartesian, height 0
    x = nu * cos_phi * math.cos(lam)
    y = nu * cos_phi * math.sin(lam)
    z = nu * (1 - e2) * sin_phi

    x2 = tx + (1 + s) * x - rz * y + ry * z
    y2 = ty + rz * x + (1 + s) * y - rx * z
    z2 = tz - ry * x + rx * y + (1 + s) * z

    a2, b2 = dst
    e2_2 = 1 - (b2 ** 2) / (a2 ** 2)
    p = math.sqrt(x2 ** 2 + y2 ** 2)
    lat = math.atan2(z2, p * (1 - e2_2))
    for _ in range(10):
        nu2 = a2 / math.sqrt(1 - e2_2 * math.sin(lat) ** 2)
        lat = math.atan2(z2 + e2_2 * nu2 * math.sin(lat), p)

    return lat, math.atan2(y2, x2)
