from __future__ import annotations

from ..core.agent import Boid
from ..utils.math2d import heading_vector


def wrap_coordinate(value: float, bound: float) -> float:
    # A coordinate sitting exactly on the bound stays there.
    if value < 0:
        return bound
    if value > bound:
        return 0.0
    return value


def advance(boid: Boid, dt: float, bounds: tuple[float, float]) -> None:
    width, height = bounds
    step = boid.speed * dt
    if step:
        boid.position += heading_vector(boid.heading, step)
    boid.position.x = wrap_coordinate(boid.position.x, width)
    boid.position.y = wrap_coordinate(boid.position.y, height)
