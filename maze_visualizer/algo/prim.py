from array import array
from typing import List, Tuple
from maze_visualizer.core.grid import Grid, Position, neighbors_in
from maze_visualizer.algo.base import Generator

class PrimsAlgorithm(Generator):
    name = "prims"

    def __init__(self, n: int, seed: int = None, rng=None):
        super().__init__(n, seed=seed, rng=rng)

        self.in_maze = array('B', [0] * (n * n))
        self.in_maze[0] = 1
        self.current = (0, 0)

        # Frontier: list of (from, to) edges leaving the maze.
        # Duplicate "to" cells are allowed, stale ones are skipped when picked.
        self.edges: List[Tuple[Position, Position]] = [((0, 0), q) for q in neighbors_in(n, (0, 0))]

    def _step(self, grid: Grid) -> bool:
        if not self.edges:
            # Only complete once every cell has joined
            return all(self.in_maze)

        # Pick random edge, swap remove for O(1)
        i = self.rng.randrange(len(self.edges))
        frm, to = self.edges[i]
        self.edges[i] = self.edges[-1]
        self.edges.pop()

        to_idx = to[0] * self.n + to[1]
        if not self.in_maze[to_idx] and self.in_maze[frm[0] * self.n + frm[1]]:
            grid.remove_wall(frm, to)
            self.in_maze[to_idx] = 1
            self.current = to

            for nxt in grid.neighbors(to):
                if not self.in_maze[nxt[0] * self.n + nxt[1]]:
                    self.edges.append((to, nxt))

        return False

    def status(self) -> str:
        return f"Frontier: {len(self.edges)}"
