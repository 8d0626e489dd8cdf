import math
import sys

from nbody.Vec2 import Vec2

# Separations below this are treated as this distance (softening).
MIN_DISTANCE = 1.0


def is_normal(value):
    """True for finite floats that are neither zero nor subnormal."""
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def gravity_magnitude(distance, g_const):
    """
    Scalar coefficient G / d^3 for a pair at `distance` (already softened).
    Returns 0.0 when the result is not a normal float, e.g. when it underflows
    for very distant pairs or the constants are pathological.
    """
    magnitude = g_const / (distance * distance * distance)
    if is_normal(magnitude):
        return magnitude
    return 0.0


class Particle:
    def __init__(self, pos, vel=None):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        if vel is None:
            self.vel = Vec2.zero()
        else:
            self.vel = vel.copy() if isinstance(vel, Vec2) else Vec2(vel[0], vel[1])
        # Scratch accumulator, only meaningful inside Simulation.step.
        self.acc = Vec2.zero()

    @staticmethod
    def compute_force(a, b, g_const):
        """
        Return the force on `a` due to `b` (Vec2). The force on `b` due to `a`
        is its negation. The self-pair gives a zero vector.
        """
        delta = b.pos - a.pos
        distance = max(delta.length(), MIN_DISTANCE)
        magnitude = gravity_magnitude(distance, g_const)
        if magnitude == 0.0:
            return Vec2.zero()
        return magnitude * delta

    def reset_acceleration(self):
        self.acc = Vec2.zero()

    def __eq__(self, other):
        if other is None or not isinstance(other, Particle):
            return False
        return self.pos == other.pos and self.vel == other.vel

    def __hash__(self):
        return hash((self.pos, self.vel))

    def __repr__(self):
        return f"Particle {{ pos: {self.pos!r}, vel: {self.vel!r}, acc: {self.acc!r} }}"

    def __str__(self):
        return self.__repr__()
