import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_visualizer' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_visualizer.core import config

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def run_headless(args, logger):
    """Generates one maze and races every solver on it, no window."""
    from maze_visualizer.core.session import Session

    session = Session(size=args.size, generator=args.generator, solver=args.solver, seed=args.seed)
    t0 = time.time()
    session.start_generation()
    while not session.step_generation():
        pass
    logger.info(f"Generation complete in {time.time()-t0:.4f}s")

    print(f"\n{'ALGORITHM':<12} | {'STEPS':<8} | {'PATH LEN':<10} | {'VISITED':<10}")
    print("-" * 50)

    for kind in config.SOLVERS:
        session.set_solver(kind)
        session.clear_solve()
        while not session.step_solve():
            pass
        stats = session.stats
        print(f"{kind:<12} | {session.solver.step_count:<8} | {stats.path_length:<10} | {stats.visited:<10}")

def main():
    parser = argparse.ArgumentParser(description="Maze Visualizer: step-by-step maze generation and pathfinding")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--size", type=int, default=config.DEFAULT_SIZE,
                        help=f"Grid size, clamped to {config.MIN_SIZE}-{config.MAX_SIZE}")
    parser.add_argument("--generator", type=str, default=config.DEFAULT_GENERATOR,
                        choices=config.GENERATORS, help="Generation Algorithm")
    parser.add_argument("--solver", type=str, default=config.DEFAULT_SOLVER,
                        choices=config.SOLVERS, help="Solver algorithm")
    parser.add_argument("--solve-hz", type=float, default=config.SOLVE_STEPS_PER_SEC,
                        help="Solver steps per second while playing")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Render frame rate")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--headless", action="store_true", help="Generate and solve without a window")
    parser.add_argument("--record", action="store_true", help="Record the window to an mp4 file")
    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_visualizer")

    if args.solve_hz <= 0:
        parser.error("--solve-hz must be positive")

    if args.headless:
        run_headless(args, logger)
        return

    from maze_visualizer.core.session import Session
    from maze_visualizer.core.animation import AnimationDriver
    from maze_visualizer.viz.renderer import Renderer

    session = Session(size=args.size, generator=args.generator, solver=args.solver, seed=args.seed)
    driver = AnimationDriver(session, solve_rate=args.solve_hz)

    logger.info("Visual mode enabled - Opening window...")
    renderer = Renderer(session, driver=driver, fps=args.fps, record=args.record)
    renderer.init_window()
    renderer.run_loop()

if __name__ == "__main__":
    main()
