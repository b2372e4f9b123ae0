from __future__ import annotations

import math

from pygame.math import Vector2
from pytest import approx

from murmuration.sim.utils.math2d import bearing_to, deg2rad, distance_2d, heading_vector, rad2deg


def test_distance_is_zero_to_self_and_symmetric():
    a = Vector2(12.5, -3.0)
    b = Vector2(-7.0, 40.25)

    assert distance_2d(a, a) == 0.0
    assert distance_2d(a, Vector2(a)) == 0.0
    assert distance_2d(a, b) == distance_2d(b, a)
    assert distance_2d(Vector2(0, 0), Vector2(3, 4)) == approx(5.0)


def test_degree_conversions_round_trip_known_angles():
    assert rad2deg(math.pi) == approx(180.0)
    assert deg2rad(90.0) == approx(math.pi / 2)
    assert rad2deg(deg2rad(-135.0)) == approx(-135.0)


def test_heading_zero_points_up_and_turns_clockwise():
    up = heading_vector(0.0, 2.0)
    right = heading_vector(90.0, 2.0)
    down = heading_vector(180.0, 2.0)

    assert (up.x, up.y) == (approx(0.0), approx(-2.0))
    assert (right.x, right.y) == (approx(2.0, abs=1e-12), approx(0.0, abs=1e-12))
    assert (down.x, down.y) == (approx(0.0, abs=1e-12), approx(2.0))


def test_bearing_uses_atan2_convention():
    origin = Vector2(10, 10)

    assert bearing_to(origin, Vector2(20, 10)) == approx(0.0)
    assert bearing_to(origin, Vector2(10, 20)) == approx(90.0)
    assert bearing_to(origin, Vector2(0, 10)) == approx(180.0)
    assert bearing_to(origin, Vector2(10, 0)) == approx(-90.0)


def test_degree_conversions_match_math_module():
    for value in [-3.5, -1.0, 0.0, 0.25, 2.0]:
        assert rad2deg(value) == math.degrees(value)
        assert deg2rad(value * 90.0) == math.radians(value * 90.0)
