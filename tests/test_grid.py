import unittest
import sys
import os

# Add project root to path so we can import maze_visualizer
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_visualizer.core.grid import Grid, neighbors_in

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        n = 10
        grid = Grid.create(n)
        self.assertEqual(len(grid.cells), n * n, f"Grid initialization size mismatch. Expected {n*n}, got {len(grid.cells)}")
        # All cells should have all walls (value 15)
        for val in grid.cells:
            self.assertEqual(val & Grid.ALL_WALLS, Grid.ALL_WALLS)
        self.assertEqual(grid.removed_walls(), 0)

    def test_coordinates(self):
        grid = Grid(5)
        idx = grid.get_index(2, 3)
        self.assertEqual(idx, 13) # 2 * 5 + 3
        self.assertEqual(grid.position(13), (2, 3))

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

    def test_remove_wall(self):
        grid = Grid(2)
        # (0,0) (0,1)
        # (1,0) (1,1)
        grid.remove_wall((0, 0), (0, 1))

        self.assertFalse(grid.has_wall(0, 0, Grid.EAST))
        self.assertFalse(grid.has_wall(0, 1, Grid.WEST))
        self.assertFalse(grid.has_wall_between((0, 0), (0, 1)))
        self.assertFalse(grid.has_wall_between((0, 1), (0, 0)))

        # Others remain
        self.assertTrue(grid.has_wall(0, 0, Grid.NORTH))
        self.assertTrue(grid.has_wall(0, 1, Grid.EAST))
        self.assertTrue(grid.has_wall_between((0, 0), (1, 0)))
        self.assertEqual(grid.removed_walls(), 1)

    def test_remove_wall_vertical(self):
        grid = Grid(3)
        grid.remove_wall((2, 1), (1, 1))
        self.assertFalse(grid.has_wall(2, 1, Grid.NORTH))
        self.assertFalse(grid.has_wall(1, 1, Grid.SOUTH))

    def test_remove_wall_not_adjacent(self):
        grid = Grid(3)
        grid.remove_wall((0, 0), (2, 2))
        grid.remove_wall((0, 0), (0, 2))
        self.assertEqual(grid.removed_walls(), 0)

    def test_wall_between_not_adjacent_is_blocked(self):
        grid = Grid(3)
        for r in range(3):
            for c in range(3):
                for d in Grid.ORDER:
                    grid.carve_path(r, c, d)
        self.assertTrue(grid.has_wall_between((0, 0), (1, 1)))
        self.assertTrue(grid.has_wall_between((0, 0), (0, 0)))
        self.assertTrue(grid.has_wall_between((0, 0), (0, 2)))
        self.assertFalse(grid.has_wall_between((0, 0), (1, 0)))

    def test_wall_between_either_side(self):
        grid = Grid(2)
        # Only one side cleared, passage still blocked
        grid.cells[0] &= ~Grid.EAST
        self.assertTrue(grid.has_wall_between((0, 0), (0, 1)))
        self.assertTrue(grid.has_wall_between((0, 1), (0, 0)))

    def test_remove_wall_out_of_bounds(self):
        grid = Grid(3)
        # (-1, 0) is "above" (0, 0); must not wrap around to another row
        grid.remove_wall((-1, 0), (0, 0))
        grid.remove_wall((0, 0), (-1, 0))
        grid.remove_wall((2, 2), (2, 3))
        self.assertTrue(grid.has_wall(2, 0, Grid.SOUTH))
        self.assertTrue(grid.has_wall(0, 0, Grid.NORTH))
        self.assertEqual(grid.removed_walls(), 0)
        self.assertTrue(all(val == Grid.ALL_WALLS for val in grid.cells))

    def test_carve_into_void(self):
        grid = Grid(2)
        grid.carve_path(0, 0, Grid.NORTH)
        self.assertTrue(grid.has_wall(0, 0, Grid.NORTH))

    def test_neighbors_in_matches_grid(self):
        grid = Grid(4)
        for p in [(0, 0), (0, 3), (3, 0), (2, 1)]:
            self.assertEqual(list(neighbors_in(4, p)), list(grid.neighbors(p)))
        self.assertEqual(list(neighbors_in(1, (0, 0))), [])

    def test_neighbors(self):
        grid = Grid(3)
        # Centre cell (1,1): up, right, down, left
        self.assertEqual(list(grid.neighbors((1, 1))), [(0, 1), (1, 2), (2, 1), (1, 0)])

        # Corner cells have 2 neighbours
        self.assertEqual(list(grid.neighbors((0, 0))), [(0, 1), (1, 0)])
        self.assertEqual(list(grid.neighbors((2, 2))), [(1, 2), (2, 1)])

        # Edge cell
        self.assertEqual(len(list(grid.neighbors((0, 1)))), 3)

    def test_open_neighbors(self):
        grid = Grid(3)
        self.assertEqual(list(grid.open_neighbors((1, 1))), [])
        grid.remove_wall((1, 1), (2, 1))
        grid.remove_wall((1, 1), (1, 0))
        self.assertEqual(list(grid.open_neighbors((1, 1))), [(2, 1), (1, 0)])

    def test_is_carved(self):
        grid = Grid(3)
        self.assertFalse(grid.is_carved(0, 0))
        grid.remove_wall((0, 0), (0, 1))
        self.assertTrue(grid.is_carved(0, 0))
        self.assertTrue(grid.is_carved(0, 1))
        self.assertFalse(grid.is_carved(1, 1))

if __name__ == '__main__':
    unittest.main()
