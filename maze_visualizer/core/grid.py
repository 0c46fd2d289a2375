from array import array
from typing import Iterator, Tuple

Position = Tuple[int, int]  # (row, col)

def neighbors_in(n: int, p: Position) -> Iterator[Position]:
    """In-bounds neighbours of p on an n x n board: up, right, down, left."""
    r, c = p
    if r > 0:
        yield (r - 1, c)
    if c < n - 1:
        yield (r, c + 1)
    if r < n - 1:
        yield (r + 1, c)
    if c > 0:
        yield (r, c - 1)

class Grid:
    # Bitmask Constants
    NORTH = 0b0001  # top
    EAST  = 0b0010  # right
    SOUTH = 0b0100  # bottom
    WEST  = 0b1000  # left

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers (row, col deltas)
    DR = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    DC = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    # up, right, down, left
    ORDER = (NORTH, EAST, SOUTH, WEST)

    __slots__ = ('n', 'cells')

    def __init__(self, n: int):
        self.n = n
        # 'B' (unsigned char) -> 1 byte per cell, row-major
        self.cells = array('B', [self.ALL_WALLS] * (n * n))

    @classmethod
    def create(cls, n: int) -> "Grid":
        return cls(n)

    def get_index(self, r: int, c: int) -> int:
        if 0 <= r < self.n and 0 <= c < self.n:
            return r * self.n + c
        raise IndexError(f"Cell ({r}, {c}) out of bounds")

    def position(self, idx: int) -> Position:
        return divmod(idx, self.n)

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.n and 0 <= c < self.n

    def carve_path(self, r: int, c: int, dir_bit: int):
        """
        Removes the wall between cell (r, c) and its neighbour in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbour.
        """
        r2 = r + self.DR[dir_bit]
        c2 = c + self.DC[dir_bit]
        if not self.in_bounds(r2, c2):
            return # Cannot carve into void

        self.cells[r * self.n + c] &= ~dir_bit
        self.cells[r2 * self.n + c2] &= ~self.OPPOSITE[dir_bit]

    def has_wall(self, r: int, c: int, dir_bit: int) -> bool:
        return (self.cells[r * self.n + c] & dir_bit) != 0

    @classmethod
    def direction(cls, a: Position, b: Position) -> int:
        """Direction bit leading from a to b, or 0 if they are not 4-adjacent."""
        dr = b[0] - a[0]
        dc = b[1] - a[1]
        if dr == 0 and dc == 1:
            return cls.EAST
        if dr == 0 and dc == -1:
            return cls.WEST
        if dc == 0 and dr == 1:
            return cls.SOUTH
        if dc == 0 and dr == -1:
            return cls.NORTH
        return 0

    def remove_wall(self, a: Position, b: Position):
        dir_bit = self.direction(a, b)
        if dir_bit and self.in_bounds(*a) and self.in_bounds(*b):
            self.carve_path(a[0], a[1], dir_bit)

    def has_wall_between(self, a: Position, b: Position) -> bool:
        # Either side reporting a wall blocks the passage
        dir_bit = self.direction(a, b)
        if not dir_bit or not (self.in_bounds(*a) and self.in_bounds(*b)):
            return True
        return self.has_wall(a[0], a[1], dir_bit) or self.has_wall(b[0], b[1], self.OPPOSITE[dir_bit])

    def neighbors(self, p: Position) -> Iterator[Position]:
        """
        Yields in-bounds neighbours of p in the order up, right, down, left.
        Does NOT check walls (that's for pathfinding).
        """
        return neighbors_in(self.n, p)

    def open_neighbors(self, p: Position) -> Iterator[Position]:
        """
        Yields neighbours of p that are NOT blocked by a wall.
        """
        for q in self.neighbors(p):
            if not self.has_wall_between(p, q):
                yield q

    def is_carved(self, r: int, c: int) -> bool:
        return (self.cells[r * self.n + c] & self.ALL_WALLS) != self.ALL_WALLS

    def removed_walls(self) -> int:
        """Number of interior wall pairs that have been removed."""
        count = 0
        n = self.n
        for r in range(n):
            for c in range(n):
                val = self.cells[r * n + c]
                if c < n - 1 and not (val & self.EAST):
                    count += 1
                if r < n - 1 and not (val & self.SOUTH):
                    count += 1
        return count
