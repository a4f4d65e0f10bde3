"""Geometry of the individual tile shapes used by the tiling generator."""

from __future__ import annotations

import math
from collections.abc import Iterable

Point = tuple[int, int]
Polygon = list[Point]

PHI = (1 + math.sqrt(5)) / 2
_HALF_ANGLE = math.radians(36)


def _round(value: float) -> int:
    """Round half away from zero, as integer polygon conversion does."""
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def _to_polygon(points: Iterable[tuple[float, float]]) -> Polygon:
    return [(_round(x), _round(y)) for x, y in points]


def _rotation(degrees: float) -> tuple[float, float]:
    """Return (sin, cos) for a rotation, exact for the quarter turns."""
    exact = {90.0: (1.0, 0.0), 180.0: (0.0, -1.0), 270.0: (-1.0, 0.0)}
    if degrees in exact:
        return exact[degrees]
    radians = math.radians(degrees)
    return math.sin(radians), math.cos(radians)


def _rotate(
    points: Iterable[tuple[float, float]], degrees: float
) -> list[tuple[float, float]]:
    if degrees == 0:
        return list(points)
    sin_a, cos_a = _rotation(float(degrees))
    return [(x * cos_a - y * sin_a, x * sin_a + y * cos_a) for x, y in points]


def _polar(radius: float, angle: float) -> tuple[float, float]:
    return radius * math.cos(angle), radius * math.sin(angle)


def generate_kite_tile(side_length: float, rotation_angle: float) -> Polygon:
    """Penrose kite centred on the origin, rotated by ``rotation_angle`` degrees."""
    angle = math.radians(rotation_angle)
    short = side_length / PHI
    return _to_polygon(
        [
            _polar(side_length, angle),
            _polar(side_length, angle + 2 * _HALF_ANGLE),
            _polar(short, angle + 3 * _HALF_ANGLE),
            _polar(short, angle - _HALF_ANGLE),
        ]
    )


def generate_dart_tile(side_length: float, rotation_angle: float) -> Polygon:
    """Penrose dart centred on the origin, rotated by ``rotation_angle`` degrees."""
    angle = math.radians(rotation_angle)
    short = side_length / PHI
    return _to_polygon(
        [
            _polar(short, angle),
            _polar(side_length, angle + _HALF_ANGLE),
            _polar(side_length, angle - _HALF_ANGLE),
            _polar(short, angle + math.pi),
        ]
    )


def generate_hat_tile(side_length: float, rotation_angle: float) -> Polygon:
    """Five-vertex hat outline, rotated by ``rotation_angle`` degrees."""
    a = side_length
    b = a * math.cos(math.radians(20))
    c = a * math.sin(math.radians(20))
    d = a * math.cos(math.radians(10))
    e = a * math.sin(math.radians(10))
    outline = [(0.0, -a), (b, -c), (d, e), (-d, e), (-b, -c)]
    return _to_polygon(_rotate(outline, rotation_angle))


def generate_ghost_tile(
    side_length: float, rotation_angle: float, is_left_handed: bool
) -> Polygon:
    """Hexagonal ghost outline; handedness flips the vertical offsets."""
    rise = side_length * math.sin(math.radians(30 if is_left_handed else -30))
    half = side_length / 2
    outline = [
        (side_length, 0.0),
        (half, rise),
        (-half, rise),
        (-side_length, 0.0),
        (-half, -rise),
        (half, -rise),
    ]
    return _to_polygon(_rotate(outline, rotation_angle))