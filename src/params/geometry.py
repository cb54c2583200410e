"""Well Known Text (WKT) syntax check for geometry parameters.

Only single geometries are supported: POINT, LINESTRING, POLYGON and LINEARRING. Multi geometries
(e.g. MULTIPOLYGON) are rejected; callers pass several parameters instead.
"""

from __future__ import annotations

import re

_NUMBER = r"-?\d+(?:\.\d+)?"

_GEOMETRY_RE = re.compile(
    r"^\s*(?P<kind>POINT|LINESTRING|POLYGON|LINEARRING)\s*(?P<body>\(.*\))\s*$",
    flags=re.IGNORECASE | re.DOTALL,
)
_POSITION_RE = re.compile(rf"^\s*(?P<x>{_NUMBER})\s+(?P<y>{_NUMBER})\s*$", flags=re.ASCII)
_SIMPLE_BODY_RE = re.compile(r"^\(\s*(?P<positions>[^()]*)\)$")
_RING_LIST_RE = re.compile(r"^\(\s*\([^()]*\)\s*(?:,\s*\([^()]*\)\s*)*\)$")
_RING_RE = re.compile(r"\((?P<positions>[^()]*)\)")

Position = tuple[float, float]


class WKTError(ValueError):
    """Raised when a WKT string is malformed or describes an invalid shape."""


def _parse_positions(text: str) -> list[Position]:
    positions: list[Position] = []
    for item in text.split(","):
        match = _POSITION_RE.fullmatch(item)
        if not match:
            raise WKTError(f"invalid coordinate pair: {item.strip()!r}")
        positions.append((float(match.group("x")), float(match.group("y"))))
    return positions


def _check_ring(positions: list[Position]) -> None:
    if len(positions) < 4:
        raise WKTError("a ring needs at least 4 positions")
    if positions[0] != positions[-1]:
        raise WKTError("ring is not closed")


def parse_wkt(value: str) -> tuple[str, list[list[Position]]]:
    """Parse a WKT geometry.

    Returns:
        `(kind, rings)` with the upper-cased geometry keyword and its coordinate lists (a single
        list for everything but polygons).

    Raises:
        WKTError: If the value is not a supported, well-formed geometry.
    """

    match = _GEOMETRY_RE.fullmatch(value or "")
    if not match:
        raise WKTError("expected POINT, LINESTRING, POLYGON or LINEARRING")

    kind = match.group("kind").upper()
    body = match.group("body").strip()

    if kind == "POLYGON":
        if not _RING_LIST_RE.fullmatch(body):
            raise WKTError("malformed polygon ring list")
        rings = [_parse_positions(m.group("positions")) for m in _RING_RE.finditer(body)]
        for ring in rings:
            _check_ring(ring)
        return kind, rings

    simple = _SIMPLE_BODY_RE.fullmatch(body)
    if not simple:
        raise WKTError(f"malformed {kind} coordinates")
    positions = _parse_positions(simple.group("positions"))

    if kind == "POINT" and len(positions) != 1:
        raise WKTError("a point has exactly one position")
    if kind == "LINESTRING" and len(positions) < 2:
        raise WKTError("a linestring needs at least 2 positions")
    if kind == "LINEARRING":
        _check_ring(positions)
    return kind, [positions]


def validate_wkt(value: str) -> None:
    """Validate a WKT geometry, raising `WKTError` if it is not acceptable."""

    parse_wkt(value)
