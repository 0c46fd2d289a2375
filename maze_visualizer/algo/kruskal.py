from typing import List, Tuple
from maze_visualizer.core.grid import Grid, Position
from maze_visualizer.core.dsu import DisjointSet
from maze_visualizer.algo.base import Generator

class KruskalsAlgorithm(Generator):
    name = "kruskals"

    def __init__(self, n: int, seed: int = None, rng=None):
        super().__init__(n, seed=seed, rng=rng)

        # Every vertical and horizontal pair of adjacent cells: 2 * n * (n - 1) edges
        self.edges: List[Tuple[Position, Position]] = []
        for r in range(n):
            for c in range(n):
                if r + 1 < n:
                    self.edges.append(((r, c), (r + 1, c)))
                if c + 1 < n:
                    self.edges.append(((r, c), (r, c + 1)))

        # Shuffled once, then walked in order
        self.rng.shuffle(self.edges)

        self.sets = DisjointSet(n * n)
        self.cursor = 0
        self.current = self.edges[0][0] if self.edges else None

    def _step(self, grid: Grid) -> bool:
        if self.cursor >= len(self.edges):
            return True

        a, b = self.edges[self.cursor]
        self.cursor += 1

        if self.sets.union(a[0] * self.n + a[1], b[0] * self.n + b[1]):
            grid.remove_wall(a, b)
            self.current = b

        return self.cursor >= len(self.edges)

    def status(self) -> str:
        return f"Edges: {self.cursor}/{len(self.edges)}"
