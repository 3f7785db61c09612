import logging
from multiprocessing import Process, Manager

import pygame

import constants
import gui_controller as gui_ctrl
from logging_config import setup_logging
from renderer import Renderer
from topopt.config import SimulationConfig
from topopt.solver import Solver

logger = logging.getLogger("topopt.viewer")


def status_line(solver):
    return (f"Mass loss = {round(100 * solver.mass_loss())} %  "
            f"({solver.active_count()}/{solver.total_count()} links)")


def advance(solver, config, frame):
    """Run one frame: a solver step, then a prune every prune_interval frames.

    Returns the updated frame counter.
    """
    solver.step(config.bounds_min, config.bounds_max)
    frame += 1
    if frame > config.prune_interval:
        frame = 0
        solver.prune_low_strain(config.prune_threshold)
    return frame


def _sync_from_gui(shared, config, solver):
    config.relaxation_iterations = int(shared.get('relaxation_iterations', config.relaxation_iterations))
    config.prune_threshold = float(shared.get('prune_threshold', config.prune_threshold))
    config.prune_interval = int(shared.get('prune_interval', config.prune_interval))
    config.validate()
    solver.iterations = config.relaxation_iterations


def main():
    setup_logging()

    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
    pygame.display.set_caption("Strain Sculpt")
    clock = pygame.time.Clock()

    config = SimulationConfig().validate()
    # settle the block once before the first frame
    solver = Solver.from_config(config, settle=True)
    logger.info("Initial geometry: %r", solver)

    renderer = Renderer(screen)

    running = True
    paused = False
    frame = 0

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    _shared['relaxation_iterations'] = config.relaxation_iterations
    _shared['prune_threshold'] = config.prune_threshold
    _shared['prune_interval'] = config.prune_interval
    _shared['toggle_pause'] = False
    _shared['prune_now'] = False
    _shared['reset_world'] = False
    _shared['status'] = status_line(solver)
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()

    while running:
        prune_now = False
        reset = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_p:
                    prune_now = True
                elif event.key == pygame.K_r:
                    reset = True

        # --- Handle GUI updates ---
        if _shared.get('__exit__', False):
            running = False
        if _shared.get('toggle_pause', False):
            paused = not paused
            _shared['toggle_pause'] = False
        if _shared.get('prune_now', False):
            prune_now = True
            _shared['prune_now'] = False
        if _shared.get('reset_world', False):
            reset = True
            _shared['reset_world'] = False
        _sync_from_gui(_shared, config, solver)

        if reset:
            solver = Solver.from_config(config, settle=True)
            frame = 0
            logger.info("Block reset")
        if prune_now:
            solver.prune_low_strain(config.prune_threshold)

        # --- Update ---
        if not paused:
            frame = advance(solver, config, frame)

        # --- Draw ---
        screen.fill(constants.WHITE)
        renderer.draw_box(config.bounds_min, config.bounds_max)
        renderer.draw_solver(solver)
        status = status_line(solver)
        renderer.draw_status(status, paused)
        _shared['status'] = status

        pygame.display.flip()
        clock.tick(constants.FPS)

    # cleanup: signal GUI to exit and join
    _shared['__exit__'] = True
    _gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()
