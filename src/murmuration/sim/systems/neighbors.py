from __future__ import annotations

from typing import Iterable, List, Sequence

from pygame.math import Vector2

from ..core.agent import Boid
from ..utils.math2d import distance_2d


def classify(boid: Boid, candidates: Iterable[Boid], radius: float) -> List[Boid]:
    """
    Return the candidates strictly closer than ``radius`` to ``boid``, preserving order.

    ``boid`` itself is kept whenever it is among the candidates, since its own
    distance is 0. Feeding one call's output into the next with a smaller
    radius yields nested tiers.
    """

    position = boid.position
    return [other for other in candidates if distance_2d(position, other.position) < radius]


def center_of_mass(boids: Sequence[Boid]) -> Vector2:
    count = len(boids)
    if count == 0:
        raise ValueError("center_of_mass requires at least one boid")
    if count == 1:
        return Vector2(boids[0].position)
    sum_x = 0.0
    sum_y = 0.0
    for other in boids:
        sum_x += other.position.x
        sum_y += other.position.y
    return Vector2(sum_x / count, sum_y / count)
