from __future__ import annotations

import math

from pygame.math import Vector2


def distance_2d(a: Vector2, b: Vector2) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def rad2deg(rad: float) -> float:
    return math.degrees(rad)


def deg2rad(deg: float) -> float:
    return math.radians(deg)


def heading_vector(heading: float, length: float = 1.0) -> Vector2:
    """Unit-up vector scaled by ``length`` and turned clockwise (screen space) by ``heading`` degrees."""
    rad = deg2rad(heading)
    return Vector2(length * math.sin(rad), -length * math.cos(rad))


def bearing_to(origin: Vector2, target: Vector2) -> float:
    # atan2 convention: 0 deg along +X, not normalized.
    return rad2deg(math.atan2(target.y - origin.y, target.x - origin.x))
