from __future__ import annotations

import pytest
from pygame.math import Vector2
from pytest import approx

from murmuration.sim.core.agent import Boid
from murmuration.sim.systems.neighbors import center_of_mass, classify


def _boid(x: float, y: float, heading: float = 0.0) -> Boid:
    return Boid(position=Vector2(x, y), heading=heading)


def test_classify_keeps_self_and_uses_strict_radius():
    me = _boid(0, 0)
    on_edge = _boid(30, 0)
    inside = _boid(29.5, 0)
    outside = _boid(100, 100)

    result = classify(me, [me, on_edge, inside, outside], 30)

    assert result == [me, inside]
    assert result[0] is me


def test_classify_preserves_candidate_order():
    me = _boid(50, 50)
    others = [_boid(50 + i, 50) for i in range(5)]
    candidates = list(reversed(others)) + [me]

    result = classify(me, candidates, 10)

    assert result == candidates


def test_center_of_mass_single_boid_is_exact():
    boid = _boid(0.1 + 0.2, 1.0 / 3.0)

    center = center_of_mass([boid])

    assert center == boid.position
    assert center is not boid.position


def test_center_of_mass_of_two_is_midpoint():
    center = center_of_mass([_boid(10, 20), _boid(30, -40)])

    assert center.x == approx(20.0)
    assert center.y == approx(-10.0)


def test_center_of_mass_rejects_empty_set():
    with pytest.raises(ValueError):
        center_of_mass([])
