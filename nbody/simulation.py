import logging

from nbody.config import SimulationConfig
from nbody.initial_conditions import random_states
from nbody.Particle import Particle

logger = logging.getLogger("nbody.simulation")


class Simulation:
    def __init__(self, config, initial_states):
        """
        :param config: SimulationConfig with domain size and physics constants.
        :param initial_states: sequence of (pos, vel) pairs, one per particle.
        """
        self._config = config.validate()
        states = list(initial_states)
        if len(states) != config.particle_count:
            raise ValueError(
                f"expected {config.particle_count} initial states, got {len(states)}"
            )
        self._particles = [Particle(pos, vel) for pos, vel in states]
        logger.info(
            f"Simulation created with {len(self._particles)} particles "
            f"in a {config.width:g}x{config.height:g} domain."
        )

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, new_config):
        """Swap tunables between steps; the domain and particle count are fixed."""
        new_config.validate()
        old = self._config
        if (new_config.width, new_config.height, new_config.particle_count) != \
                (old.width, old.height, old.particle_count):
            raise ValueError("domain size and particle count cannot change after construction")
        self._config = new_config
        logger.info(
            f"Config updated: speed={new_config.speed}, iterations={new_config.iterations}, "
            f"wall_bounciness={new_config.wall_bounciness}"
        )

    @property
    def width(self):
        return self._config.width

    @property
    def height(self):
        return self._config.height

    @property
    def particles(self):
        return tuple(self._particles)

    def __len__(self):
        return len(self._particles)

    def positions(self):
        return tuple(p.pos.copy() for p in self._particles)

    def velocities(self):
        return tuple(p.vel.copy() for p in self._particles)

    def step(self, dt):
        """
        Advance every particle by `dt` of real time, split into
        `config.iterations` sub-steps scaled by `config.speed`.
        Semi-implicit Euler: velocity first, then position with the new velocity.
        """
        cfg = self._config
        h = dt * cfg.speed / cfg.iterations
        for _ in range(cfg.iterations):
            self._accumulate_forces(cfg.g_const)

            for p in self._particles:
                p.vel = p.vel + h * p.acc
                p.pos = p.pos + h * p.vel
                self._apply_boundary(p)

    def _accumulate_forces(self, g_const):
        particles = self._particles
        for p in particles:
            p.reset_acceleration()

        # Each unordered pair once; j == i contributes a zero vector.
        for i in range(len(particles)):
            pi = particles[i]
            for j in range(i + 1):
                pj = particles[j]
                force = Particle.compute_force(pi, pj, g_const)
                pi.acc = pi.acc + force
                pj.acc = pj.acc - force

    def _apply_boundary(self, particle):
        # Axes are independent, so a corner hit corrects both.
        bounce = self._config.wall_bounciness
        pos = particle.pos.copy()
        vel = particle.vel.copy()

        if pos.x < 0.0:
            pos.x = 0.0
            vel.x *= -bounce
        if pos.x > self.width:
            pos.x = self.width
            vel.x *= -bounce
        if pos.y < 0.0:
            pos.y = 0.0
            vel.y *= -bounce
        if pos.y > self.height:
            pos.y = self.height
            vel.y *= -bounce

        particle.pos = pos
        particle.vel = vel


def new_simulation(particle_count, width, height, initial_states=None, config=None, rng=None):
    """
    Build a Simulation of `particle_count` particles in a `width` x `height` domain.
    Without `initial_states`, positions and velocities are drawn at random
    (seeded from `rng`, or from `config.seed` when `rng` is None).
    """
    base = config if config is not None else SimulationConfig()
    cfg = SimulationConfig(**{
        **base.to_dict(),
        'width': float(width),
        'height': float(height),
        'particle_count': int(particle_count),
    }).validate()

    if initial_states is None:
        initial_states = random_states(
            cfg.particle_count, cfg.width, cfg.height,
            max_speed=cfg.max_initial_speed,
            rng=rng if rng is not None else cfg.seed,
        )
    return Simulation(cfg, initial_states)
