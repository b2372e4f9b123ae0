from __future__ import annotations

from pygame.math import Vector2

from murmuration.sim.core.agent import Boid


def test_boid_uses_slots_and_reference_defaults():
    boid = Boid(position=Vector2(1, 2), heading=15.0)

    assert not hasattr(boid, "__dict__")
    assert hasattr(Boid, "__slots__")
    assert boid.size == 10
    assert boid.speed == 200.0
    assert (boid.cohesion_radius, boid.alignment_radius, boid.separation_radius) == (140, 90, 30)


def test_radii_follow_size_and_factors():
    boid = Boid(position=Vector2(), heading=0.0, size=2, cohesion_factor=15, alignment_factor=10, separation_factor=4)

    assert boid.cohesion_radius == 30
    assert boid.alignment_radius == 20
    assert boid.separation_radius == 8
    assert boid.cohesion_radius >= boid.alignment_radius >= boid.separation_radius


def test_copy_does_not_share_position():
    boid = Boid(position=Vector2(5, 5), heading=42.0, color=(60, 70, 80), size=7)
    clone = boid.copy()

    clone.position.x = 99.0
    clone.heading = -1.0

    assert boid.position == Vector2(5, 5)
    assert boid.heading == 42.0
    assert clone.color == boid.color
    assert clone.size == 7
