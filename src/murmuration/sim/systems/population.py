from __future__ import annotations

from typing import List

from pygame.math import Vector2

from ..core.agent import Boid
from ..core.config import BoidConfig, SpawnConfig
from ..core.rng import DeterministicRng


def spawn_boid(rng: DeterministicRng, bounds: tuple[float, float], boid: BoidConfig, spawn: SpawnConfig) -> Boid:
    width, height = bounds
    heading_low, heading_high = spawn.heading_range
    channel_low, channel_high = spawn.color_channel_range
    position = Vector2(rng.next_int(0, int(width)), rng.next_int(0, int(height)))
    heading = float(rng.next_int(heading_low, heading_high))
    color = (
        rng.next_int(channel_low, channel_high),
        rng.next_int(channel_low, channel_high),
        rng.next_int(channel_low, channel_high),
    )
    return Boid(
        position=position,
        heading=heading,
        color=color,
        size=boid.size,
        speed=boid.speed,
        cohesion_factor=boid.cohesion_factor,
        alignment_factor=boid.alignment_factor,
        separation_factor=boid.separation_factor,
    )


def generate_population(
    rng: DeterministicRng,
    count: int,
    bounds: tuple[float, float],
    boid: BoidConfig | None = None,
    spawn: SpawnConfig | None = None,
) -> List[Boid]:
    if count < 0:
        raise ValueError(f"Population size must be non-negative, got {count}")
    boid = BoidConfig() if boid is None else boid
    spawn = SpawnConfig() if spawn is None else spawn
    return [spawn_boid(rng, bounds, boid, spawn) for _ in range(count)]
