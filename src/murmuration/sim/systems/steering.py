from __future__ import annotations

from enum import Enum
from typing import Sequence

from ..core.agent import Boid
from ..utils.math2d import bearing_to
from .neighbors import center_of_mass, classify

# atan2 measures from +X while headings measure from "up" (-Y).
_UP_CORRECTION = 90.0
_FLEE_TURN = 180.0


class SteeringDecision(str, Enum):
    ISOLATED = "Isolated"
    SEPARATION = "Separation"
    ALIGNMENT = "Alignment"
    COHESION = "Cohesion"


def average_heading(boids: Sequence[Boid]) -> float:
    # Linear mean, no wrap correction around +/-180.
    total = 0.0
    for other in boids:
        total += other.heading
    return total / len(boids)


def decide_heading(boid: Boid, population: Sequence[Boid]) -> tuple[float, SteeringDecision, int]:
    """
    Pick the next heading for ``boid`` from the flockmates found in ``population``.

    Tiers are narrowed progressively (cohesion, then alignment within it, then
    separation within that) and checked by priority: separation flees its
    center of mass, alignment copies the mean heading, cohesion seeks its
    center of mass. A boid with no flockmates besides itself keeps its heading.

    Returns the heading, the branch taken and the number of distance checks made.
    """

    cohesion_mates = classify(boid, population, boid.cohesion_radius)
    checks = len(population)
    if len(cohesion_mates) <= 1:
        return boid.heading, SteeringDecision.ISOLATED, checks

    alignment_mates = classify(boid, cohesion_mates, boid.alignment_radius)
    checks += len(cohesion_mates)
    separation_mates = classify(boid, alignment_mates, boid.separation_radius)
    checks += len(alignment_mates)

    if len(separation_mates) > 1:
        center = center_of_mass(separation_mates)
        heading = bearing_to(boid.position, center) + _UP_CORRECTION + _FLEE_TURN
        return heading, SteeringDecision.SEPARATION, checks
    if len(alignment_mates) > 1:
        return average_heading(alignment_mates), SteeringDecision.ALIGNMENT, checks
    center = center_of_mass(cohesion_mates)
    return bearing_to(boid.position, center) + _UP_CORRECTION, SteeringDecision.COHESION, checks


def steer(boid: Boid, population: Sequence[Boid]) -> tuple[SteeringDecision, int]:
    heading, decision, checks = decide_heading(boid, population)
    boid.heading = heading
    return decision, checks
