from __future__ import annotations

from typing import Dict, Sequence

from ..core.agent import Boid
from ..types.metrics import TickMetrics
from .steering import SteeringDecision


def create_metrics(
    tick: int,
    boids: Sequence[Boid],
    decisions: Dict[SteeringDecision, int],
    neighbor_checks: int,
    duration_ms: float,
) -> TickMetrics:
    population = len(boids)
    mean_heading = sum(boid.heading for boid in boids) / population if population else 0.0
    return TickMetrics(
        tick=tick,
        population=population,
        separating=decisions.get(SteeringDecision.SEPARATION, 0),
        aligning=decisions.get(SteeringDecision.ALIGNMENT, 0),
        cohering=decisions.get(SteeringDecision.COHESION, 0),
        isolated=decisions.get(SteeringDecision.ISOLATED, 0),
        neighbor_checks=neighbor_checks,
        mean_heading=mean_heading,
        tick_duration_ms=duration_ms,
    )
