"""
Coordinate Converter — Interactive CLI
======================================
Thin wrapper around the coordkit library.

Usage:
    coordkit                           # interactive mode
    coordkit "TQ 30500 81500"          # parse any notation
    coordkit 51.5074 -0.1278           # convert a lat/lng pair

Settings are read from environment variables:
    COORDKIT_LOG_LEVEL        Logging level (default WARNING)
    COORDKIT_MGRS_PRECISION   Digits per MGRS block, 0-5 (default 5)
"""

import logging
import os
import sys

from coordkit import military_grid
from coordkit.converter import convert, is_error_result
from coordkit.dispatch import resolve
from coordkit.exceptions import (
    CoordKitError,
    InvalidCoordinates,
    NoCoordinateFound,
)
from coordkit.models import FormattedCoordinates
from coordkit.navigation import navigation_urls

# ── Settings ──────────────────────────────────────────────────
_LOG_LEVEL = os.environ.get("COORDKIT_LOG_LEVEL", "WARNING").upper()
_MGRS_PRECISION = os.environ.get("COORDKIT_MGRS_PRECISION", "5")

_BANNER = """\
╔══════════════════════════════════════╗
║        Coordinate Converter          ║
║   DD · DDM · DMS · BNG · MGRS        ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _mgrs_precision() -> int:
    """Digits per MGRS block from the environment; ValueError if unusable."""
    precision = int(_MGRS_PRECISION)
    if not 0 <= precision <= 5:
        raise ValueError(f"must be between 0 and 5, got {precision}")
    return precision


def _with_precision(
    results: FormattedCoordinates, lat: float, lng: float
) -> dict:
    """Bundle as a dict, re-rendering MGRS if a coarser precision is set."""
    fields = results.to_dict()
    precision = _mgrs_precision()
    if precision != military_grid.DEFAULT_PRECISION and not is_error_result(
        results.mgrs
    ):
        fields["MGRS"] = military_grid.encode(lat, lng, precision)
    return fields


def _report(lat: float, lng: float, detected: str = "") -> None:
    results = convert(lat, lng)
    urls = navigation_urls(lat, lng)

    print()
    print(f"  ┌──────────────────────────────────────────────────────┐")
    if detected:
        print(f"  │  Detected          {detected:<34}│")
    for name, value in _with_precision(results, lat, lng).items():
        print(f"  │  {name:<18}{value:<34}│")
    print(f"  └──────────────────────────────────────────────────────┘")
    print(f"  Map:      {urls.map_url}")
    print(f"  Navigate: {urls.nav_url}")


def _run_interactive() -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nCoordinates:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ Enter a position in any supported format.")
            continue

        try:
            result = resolve(raw)
        except NoCoordinateFound:
            print(f"  ✗ Not a recognised coordinate: '{raw}'")
            continue

        coordinate = result.coordinate
        try:
            _report(coordinate.latitude, coordinate.longitude, result.format.value)
        except CoordKitError as exc:
            print(f"  ✗ Error: {exc}")


def _parse_pair(args: list) -> tuple:
    """Return (lat, lng) if *args* are two numbers, else None."""
    try:
        return float(args[0]), float(args[1])
    except ValueError:
        return None


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    logging.basicConfig(
        level=_LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        _mgrs_precision()
    except ValueError as exc:
        print(f"Error: COORDKIT_MGRS_PRECISION {exc}", file=sys.stderr)
        print("Set it to a whole number of digits from 0 to 5.", file=sys.stderr)
        sys.exit(1)
    args = sys.argv[1:]

    if not args:
        _run_interactive()
        return

    pair = _parse_pair(args) if len(args) == 2 else None
    if pair is not None:
        try:
            _report(*pair)
        except InvalidCoordinates as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        return

    text = " ".join(args)
    try:
        result = resolve(text)
    except NoCoordinateFound:
        print("No coordinate recognised.", file=sys.stderr)
        sys.exit(1)
    coordinate = result.coordinate
    _report(coordinate.latitude, coordinate.longitude, result.format.value)


if __name__ == "__main__":
    main()
