from __future__ import annotations

from typing import Iterable, List

import pygame
from pygame.math import Vector2

from ..sim.core.agent import Boid, Color
from ..sim.utils.math2d import heading_vector

COHESION_ALPHA = 32
ALIGNMENT_ALPHA = 48
SEPARATION_ALPHA = 48
_BODY_SIDES = 6


def draw_radius(surface: pygame.Surface, center: Vector2, radius: int, color: Color, alpha: int) -> None:
    if radius <= 0:
        return
    overlay = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    pygame.draw.circle(overlay, (*color, alpha), (radius, radius), radius)
    surface.blit(overlay, (center.x - radius, center.y - radius))


def body_points(boid: Boid) -> List[Vector2]:
    """Hexagon of radius ``size`` around the boid, first vertex along the heading."""
    step = 360.0 / _BODY_SIDES
    return [boid.position + heading_vector(boid.heading + step * i, boid.size) for i in range(_BODY_SIDES)]


def draw_boid(surface: pygame.Surface, boid: Boid, show_radii: bool = True) -> None:
    if show_radii:
        draw_radius(surface, boid.position, boid.cohesion_radius, boid.color, COHESION_ALPHA)
        draw_radius(surface, boid.position, boid.alignment_radius, boid.color, ALIGNMENT_ALPHA)
        draw_radius(surface, boid.position, boid.separation_radius, boid.color, SEPARATION_ALPHA)
    pygame.draw.polygon(surface, boid.color, body_points(boid))
    tip = boid.position + heading_vector(boid.heading, boid.size * 2)
    pygame.draw.line(surface, boid.color, boid.position, tip, max(1, boid.size // 4))


def draw_flock(surface: pygame.Surface, boids: Iterable[Boid], show_radii: bool = True) -> None:
    for boid in boids:
        draw_boid(surface, boid, show_radii)
