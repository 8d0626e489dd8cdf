import argparse
import dataclasses
import logging

import pygame
from constants import BLACK, DT, FPS, MAX_FRAME_TIME, PARTICLE_RADIUS, TITLE, WHITE
from nbody.config import SimulationConfig
from nbody.initial_conditions import make_rng
from nbody.simulation import new_simulation

from multiprocessing import Process, Manager
import gui_controller as gui_ctrl

logger = logging.getLogger("nbody")


def build_parser():
    parser = argparse.ArgumentParser(description="Gravitational n-body simulation in a walled box.")
    SimulationConfig.add_cli_args(parser)
    parser.add_argument("--controls", action="store_true", help="open the DearPyGui control panel")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--dump", action="store_true", help="log every particle after each update (debug level)")
    return parser


def create_simulation(config, rng):
    return new_simulation(config.particle_count, config.width, config.height, config=config, rng=rng)


def draw(screen, positions):
    screen.fill(BLACK)
    for pos in positions:
        pygame.draw.circle(screen, WHITE, pos.as_tuple(), PARTICLE_RADIUS)


def dump_particles(sim):
    for p in sim.particles:
        logger.debug(repr(p))


def _apply_controls(shared, sim):
    # Push panel edits into the simulation; returns (pause_toggled, reset_requested).
    changes = {}
    for key, cast in (('speed', float), ('iterations', int), ('wall_bounciness', float)):
        value = shared.get(key)
        if value is not None and cast(value) != getattr(sim.config, key):
            changes[key] = cast(value)
    if changes:
        sim.config = dataclasses.replace(sim.config, **changes)

    toggled = bool(shared.get('toggle_pause', False))
    shared['toggle_pause'] = False
    reset = bool(shared.get('reset_simulation', False))
    shared['reset_simulation'] = False
    return toggled, reset


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = SimulationConfig.from_cli(args)
    rng = make_rng(config.seed)
    sim = create_simulation(config, rng)

    pygame.init()
    screen = pygame.display.set_mode((int(config.width), int(config.height)))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    # spawn DearPyGui controller process when requested
    _shared = None
    _gui_proc = None
    if args.controls:
        _mgr = Manager()
        _shared = _mgr.dict()
        _shared['speed'] = config.speed
        _shared['iterations'] = config.iterations
        _shared['wall_bounciness'] = config.wall_bounciness
        _shared['particle_count'] = len(sim)
        _shared['paused'] = False
        _shared['toggle_pause'] = False
        _shared['reset_simulation'] = False
        _shared['__exit__'] = False
        _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
        _gui_proc.start()

    running = True
    paused = False
    accumulator = 0.0

    while running:
        reset = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    reset = True

        # --- Handle GUI updates ---
        if _shared is not None:
            if _shared.get('__exit__', False):
                running = False
            toggled, gui_reset = _apply_controls(_shared, sim)
            if toggled:
                paused = not paused
            reset = reset or gui_reset
            _shared['paused'] = paused

        if reset:
            # fresh random states, same count and domain; keep tuned values
            sim = create_simulation(sim.config, rng)
            accumulator = 0.0

        # --- Update ---
        # cap catch-up after long frames (window drag, breakpoints)
        frame_time = min(clock.tick(FPS) / 1000.0, MAX_FRAME_TIME)
        if not paused:
            accumulator += frame_time
            while accumulator >= DT:
                sim.step(DT)
                accumulator -= DT
                if args.dump:
                    dump_particles(sim)

        # --- Draw ---
        draw(screen, sim.positions())
        pygame.display.flip()

    # cleanup: signal GUI to exit and join
    if _gui_proc is not None:
        _shared['__exit__'] = True
        _gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()
