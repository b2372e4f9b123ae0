from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pygame.math import Vector2

Color = Tuple[int, int, int]


@dataclass(slots=True)
class Boid:
    position: Vector2
    heading: float
    color: Color = (255, 255, 255)
    size: int = 10
    speed: float = 200.0
    cohesion_factor: int = 14
    alignment_factor: int = 9
    separation_factor: int = 3

    @property
    def cohesion_radius(self) -> int:
        return self.size * self.cohesion_factor

    @property
    def alignment_radius(self) -> int:
        return self.size * self.alignment_factor

    @property
    def separation_radius(self) -> int:
        return self.size * self.separation_factor

    def copy(self) -> "Boid":
        return Boid(
            position=Vector2(self.position),
            heading=self.heading,
            color=self.color,
            size=self.size,
            speed=self.speed,
            cohesion_factor=self.cohesion_factor,
            alignment_factor=self.alignment_factor,
            separation_factor=self.separation_factor,
        )
