from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    separating: int
    aligning: int
    cohering: int
    isolated: int
    neighbor_checks: int
    mean_heading: float
    tick_duration_ms: float = 0.0
