import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from maze_visualizer.core.grid import Grid, Position

class Generator(ABC):
    """
    Incremental maze generator. The constructor builds the resumable state,
    step() advances it by exactly one unit of work on the grid.
    """
    name = ""

    def __init__(self, n: int, seed: int = None, rng: random.Random = None):
        self.n = n
        self.seed = seed
        # Unseeded by default, so every maze is different
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        self.current: Optional[Position] = None
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def step(self, grid: Grid) -> bool:
        """Performs one step. Returns True once the maze is complete."""
        if self._done:
            return True
        self._done = self._step(grid)
        self.step_count += 1
        return self._done

    @abstractmethod
    def _step(self, grid: Grid) -> bool:
        pass

    def run(self, grid: Grid) -> Iterator[str]:
        """
        Yields a status string after every step.
        The actual grid modifications happen in-place on grid.
        """
        while not self.step(grid):
            yield self.status()
        yield "Done"

    def run_all(self, grid: Grid):
        """Helper to run the generator to completion."""
        for _ in self.run(grid):
            pass

    def status(self) -> str:
        return f"Step {self.step_count}"


def create_generator(kind: str, n: int, seed: int = None) -> Generator:
    from maze_visualizer.algo.dfs import RecursiveBacktracker
    from maze_visualizer.algo.prim import PrimsAlgorithm
    from maze_visualizer.algo.kruskal import KruskalsAlgorithm

    classes = {cls.name: cls for cls in (RecursiveBacktracker, PrimsAlgorithm, KruskalsAlgorithm)}
    if kind not in classes:
        raise ValueError(f"Unknown generator: {kind}")
    return classes[kind](n, seed=seed)
