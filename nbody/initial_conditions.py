import numpy as np

from nbody.Vec2 import Vec2


def make_rng(rng=None):
    """Accept a Generator, an int seed or None and return a Generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_states(count, width, height, max_speed=5.0, rng=None):
    """
    Draw `count` (pos, vel) pairs: positions uniform over [0, width] x [0, height],
    velocity components uniform in [-max_speed, max_speed].
    """
    rng = make_rng(rng)
    unit = rng.random((count, 4))
    xs = unit[:, 0] * width
    ys = unit[:, 1] * height
    vxs = (unit[:, 2] - 0.5) * 2.0 * max_speed
    vys = (unit[:, 3] - 0.5) * 2.0 * max_speed
    return [
        (Vec2(x, y), Vec2(vx, vy))
        for x, y, vx, vy in zip(xs.tolist(), ys.tolist(), vxs.tolist(), vys.tolist())
    ]
