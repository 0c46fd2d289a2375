import logging
from typing import List, NamedTuple, Optional, Set
from maze_visualizer.core import config
from maze_visualizer.core.grid import Grid, Position
from maze_visualizer.algo.base import Generator, create_generator
from maze_visualizer.algo.solvers import Solver, create_solver, manhattan

logger = logging.getLogger(__name__)

class Stats(NamedTuple):
    visited: int
    path_length: int
    heuristic: int

class Session:
    """
    Owns everything one visualizer window works on: the grid, the active
    generator and solver, the algorithm selections and the play flags.
    Every UI command maps to one method here.
    """

    def __init__(self, size: int = config.DEFAULT_SIZE,
                 generator: str = config.DEFAULT_GENERATOR,
                 solver: str = config.DEFAULT_SOLVER,
                 seed: int = None):
        self._check_kind(generator, config.GENERATORS)
        self._check_kind(solver, config.SOLVERS)

        self.size = config.clamp_size(size)
        self.generator_kind = generator
        self.solver_kind = solver
        self.seed = seed

        self.grid = Grid(self.size)
        self.generator: Optional[Generator] = None
        self.solver: Optional[Solver] = None
        self.generated = False

        self.playing_gen = False
        self.playing_solve = False

    @staticmethod
    def _check_kind(kind: str, allowed):
        if kind not in allowed:
            raise ValueError(f"Unknown algorithm '{kind}', expected one of {', '.join(allowed)}")

    # Start top-left, goal bottom-right
    @property
    def start(self) -> Position:
        return (0, 0)

    @property
    def goal(self) -> Position:
        return (self.size - 1, self.size - 1)

    # --- Settings ---

    def set_size(self, n: int):
        self.size = config.clamp_size(n)
        logger.debug(f"Grid size set to {self.size}x{self.size}")
        self.grid = Grid(self.size)
        self.generator = None
        self.generated = False
        self.playing_gen = False
        self.clear_solve()

    def set_generator(self, kind: str):
        self._check_kind(kind, config.GENERATORS)
        logger.debug(f"Generator set to {kind}")
        self.generator_kind = kind
        self.generator = None
        self.generated = False
        self.playing_gen = False

    def set_solver(self, kind: str):
        self._check_kind(kind, config.SOLVERS)
        logger.debug(f"Solver set to {kind}")
        self.solver_kind = kind
        if self.solver is not None:
            # Switching algorithm restarts the search
            self._init_solver()

    # --- Generation ---

    def start_generation(self):
        self.grid = Grid(self.size)
        self.generator = create_generator(self.generator_kind, self.size, seed=self.seed)
        self.generated = False
        self.playing_gen = True
        self.clear_solve()
        logger.info(f"Generating {self.size}x{self.size} maze with {self.generator_kind}...")

    def step_generation(self) -> bool:
        if self.generator is None:
            return True

        done = self.generator.step(self.grid)
        if done:
            logger.info(f"Generation complete in {self.generator.step_count} steps")
            self.generated = True
            self.playing_gen = False
            self.generator = None
        return done

    def toggle_generation(self):
        if self.generator is not None:
            self.playing_gen = not self.playing_gen

    # --- Solving ---

    def _init_solver(self):
        self.solver = create_solver(self.solver_kind, self.grid, self.start, self.goal)
        logger.info(f"Solving with {self.solver_kind} from {self.start} to {self.goal}...")

    def step_solve(self) -> bool:
        if not self.generated:
            return True
        if self.solver is None:
            # First press only sets the search up
            self._init_solver()
            return False

        was_done = self.solver.done
        done = self.solver.step()
        if done and not was_done:
            if self.solver.succeeded:
                logger.info(f"Path found: {len(self.solver.path)} cells, {self.solver.visited_count} visited")
            else:
                logger.info(f"No path found after visiting {self.solver.visited_count} cells")
        return done

    def toggle_solve(self):
        if not self.generated:
            return
        if self.solver is None:
            self._init_solver()
        self.playing_solve = not self.playing_solve

    def clear_solve(self):
        self.solver = None
        self.playing_solve = False

    # --- Outputs for presentation ---

    @property
    def can_generate(self) -> bool:
        return not self.playing_gen

    @property
    def can_solve(self) -> bool:
        return self.generated and not self.playing_gen

    @property
    def visited(self) -> Set[int]:
        return self.solver.visited if self.solver else set()

    @property
    def frontier(self) -> List[Position]:
        return self.solver.frontier if self.solver else []

    @property
    def path(self) -> List[int]:
        return self.solver.path if self.solver else []

    @property
    def current_cell(self) -> Optional[Position]:
        return self.generator.current if self.generator else None

    @property
    def stats(self) -> Stats:
        if self.solver is None or self.solver.last is None:
            return Stats(self.solver.visited_count if self.solver else 0, 0,
                         manhattan(self.start, self.goal))
        return Stats(self.solver.visited_count, len(self.solver.path),
                     manhattan(self.solver.last, self.goal))
