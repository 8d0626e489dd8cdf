from __future__ import annotations

import argparse
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Iterable, Optional


@dataclass(frozen=True)
class SimulationConfig:
    # Domain
    width: float = 1200.0
    height: float = 900.0
    particle_count: int = 60

    # Physics
    g_const: float = 1000.0
    wall_bounciness: float = 0.25

    # Integration
    iterations: int = 1
    speed: float = 1.0

    # Random initial conditions
    max_initial_speed: float = 5.0
    seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"domain must be positive, got {self.width}x{self.height}")
        if self.particle_count < 0:
            raise ValueError(f"particle_count must be >= 0, got {self.particle_count}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.speed < 0:
            raise ValueError(f"speed must be >= 0, got {self.speed}")
        if self.max_initial_speed < 0:
            raise ValueError(f"max_initial_speed must be >= 0, got {self.max_initial_speed}")
        return self

    @classmethod
    def add_cli_args(cls, parser: argparse.ArgumentParser, include: Optional[Iterable[str]] = None) -> None:
        include_set = set(include) if include is not None else None

        def want(key: str) -> bool:
            return include_set is None or key in include_set

        def add_arg(*args: Any, **kwargs: Any) -> None:
            for option in args:
                if option in parser._option_string_actions:
                    return
            parser.add_argument(*args, **kwargs)

        if want("domain"):
            add_arg("--width", type=float, default=cls.width, help="domain width in pixels")
            add_arg("--height", type=float, default=cls.height, help="domain height in pixels")
            add_arg("--particle-count", "-n", type=int, default=cls.particle_count, help="number of particles")

        if want("physics"):
            add_arg("--g-const", "-g", type=float, default=cls.g_const, help="gravitational constant")
            add_arg("--wall-bounciness", type=float, default=cls.wall_bounciness, help="velocity kept after a wall hit")

        if want("sim"):
            add_arg("--iterations", "-k", type=int, default=cls.iterations, help="sub-steps per update")
            add_arg("--speed", type=float, default=cls.speed, help="simulated time per real time")
            add_arg("--max-initial-speed", type=float, default=cls.max_initial_speed,
                    help="bound of random initial velocity per axis")
            add_arg("--seed", type=int, default=cls.seed, help="random seed for reproducible initial states")

    @classmethod
    def from_cli(
        cls,
        parser_or_args: argparse.ArgumentParser | argparse.Namespace,
        *,
        include: Optional[Iterable[str]] = None,
        argv: Optional[Iterable[str]] = None,
    ) -> "SimulationConfig":
        if isinstance(parser_or_args, argparse.ArgumentParser):
            parser = parser_or_args
            cls.add_cli_args(parser, include=include)
            args = parser.parse_args(argv)
        else:
            args = parser_or_args
        return cls.from_dict(vars(args))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        return cls(**kwargs).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
