"""
Tests for the pairwise gravity force.

Covers:
- is_normal
- gravity_magnitude (G / d^3, non-normal results dropped)
- Particle.compute_force (direction, softening floor, Newton's third law)
"""

import math
import sys

import pytest

from nbody.Particle import Particle, gravity_magnitude, is_normal
from nbody.Vec2 import Vec2

G = 1000.0


class TestIsNormal:
    @pytest.mark.parametrize("value", [1.0, -3.5, sys.float_info.min, sys.float_info.max])
    def test_normal_values(self, value):
        assert is_normal(value)

    @pytest.mark.parametrize("value", [0.0, -0.0, 5e-324, sys.float_info.min / 2, math.inf, -math.inf, math.nan])
    def test_non_normal_values(self, value):
        assert not is_normal(value)


class TestGravityMagnitude:
    @pytest.mark.parametrize("d", [1.0, 2.0, 5.0, 37.5, 100.0])
    def test_inverse_cube(self, d):
        assert gravity_magnitude(d, G) == pytest.approx(G / d ** 3)

    def test_underflow_is_dropped(self):
        # 1e-300 / 1e15 is subnormal
        assert gravity_magnitude(1e5, 1e-300) == 0.0

    @pytest.mark.parametrize("g_const", [math.inf, math.nan, 0.0])
    def test_pathological_constant_gives_zero(self, g_const):
        assert gravity_magnitude(10.0, g_const) == 0.0


class TestComputeForce:
    def test_points_towards_other_particle(self):
        a = Particle(Vec2(10.0, 20.0))
        b = Particle(Vec2(13.0, 24.0))
        force = Particle.compute_force(a, b, G)
        # d = 5, coefficient G / 125 = 8
        assert force == Vec2(24.0, 32.0)
        assert force.x / force.length() == pytest.approx(0.6)
        assert force.y / force.length() == pytest.approx(0.8)

    def test_newtons_third_law(self):
        pairs = [
            (Vec2(10.0, 20.0), Vec2(13.0, 24.0)),
            (Vec2(0.0, 0.0), Vec2(100.0, 0.0)),
            (Vec2(512.25, 33.0), Vec2(7.5, 880.125)),
            (Vec2(1.0, 1.0), Vec2(1.25, 1.5)),
        ]
        for pa, pb in pairs:
            a = Particle(pa)
            b = Particle(pb)
            assert Particle.compute_force(a, b, G) == -Particle.compute_force(b, a, G)

    def test_distance_is_floored_at_one(self):
        a = Particle(Vec2(0.0, 0.0))
        b = Particle(Vec2(0.5, 0.0))
        # distance treated as 1, so coefficient is G itself
        assert Particle.compute_force(a, b, G) == Vec2(500.0, 0.0)

    def test_coincident_particles_give_zero_force(self):
        a = Particle(Vec2(42.0, 42.0))
        b = Particle(Vec2(42.0, 42.0))
        force = Particle.compute_force(a, b, G)
        assert force == Vec2.zero()
        assert math.isfinite(force.x) and math.isfinite(force.y)

    def test_self_pair_is_zero(self):
        a = Particle(Vec2(3.0, 4.0), Vec2(1.0, 1.0))
        assert Particle.compute_force(a, a, G) == Vec2.zero()

    def test_far_pair_with_tiny_constant_is_zero(self):
        a = Particle(Vec2(0.0, 0.0))
        b = Particle(Vec2(1e5, 0.0))
        assert Particle.compute_force(a, b, 1e-300) == Vec2.zero()


class TestParticle:
    def test_accepts_tuples_and_copies_vectors(self):
        pos = Vec2(1.0, 2.0)
        p = Particle(pos, (3, 4))
        pos.x = 99.0
        assert p.pos == Vec2(1.0, 2.0)
        assert p.vel == Vec2(3.0, 4.0)
        assert p.acc == Vec2.zero()

    def test_default_velocity_is_zero(self):
        assert Particle((5, 5)).vel == Vec2.zero()

    def test_repr_contains_state(self):
        p = Particle(Vec2(1.0, 2.0), Vec2(-1.0, 0.5))
        assert repr(p) == "Particle { pos: (1.000, 2.000), vel: (-1.000, 0.500), acc: (0.000, 0.000) }"
