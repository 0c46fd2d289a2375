from array import array
from typing import List
from maze_visualizer.core.grid import Grid, Position
from maze_visualizer.algo.base import Generator

class RecursiveBacktracker(Generator):
    name = "recursive-backtracker"

    def __init__(self, n: int, seed: int = None, rng=None):
        super().__init__(n, seed=seed, rng=rng)

        # Start at (0,0)
        self.visited = array('B', [0] * (n * n))
        self.visited[0] = 1

        self.stack: List[Position] = [(0, 0)]
        self.current = (0, 0)

    def _step(self, grid: Grid) -> bool:
        stack = self.stack
        if not stack:
            return True

        current = stack[-1]

        # Find unvisited neighbours
        candidates = [p for p in grid.neighbors(current) if not self.visited[p[0] * self.n + p[1]]]

        if candidates:
            nxt = self.rng.choice(candidates)

            # Carve
            grid.remove_wall(current, nxt)
            self.visited[nxt[0] * self.n + nxt[1]] = 1
            stack.append(nxt)
            self.current = nxt
        else:
            # Backtrack
            stack.pop()
            self.current = stack[-1] if stack else None

        return not stack

    def status(self) -> str:
        return f"Carving... Stack: {len(self.stack)}"
