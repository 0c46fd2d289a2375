import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_visualizer.core.dsu import DisjointSet

class TestDisjointSet(unittest.TestCase):
    def test_singletons(self):
        dsu = DisjointSet(5)
        for i in range(5):
            self.assertEqual(dsu.find(i), i)
        self.assertFalse(dsu.connected(0, 1))

    def test_union(self):
        dsu = DisjointSet(6)
        self.assertTrue(dsu.union(0, 1))
        self.assertTrue(dsu.union(2, 3))
        self.assertTrue(dsu.union(1, 3))
        self.assertTrue(dsu.connected(0, 2))
        self.assertFalse(dsu.connected(0, 4))

        # Already joined
        self.assertFalse(dsu.union(0, 3))

    def test_union_by_rank(self):
        dsu = DisjointSet(4)
        dsu.union(0, 1)
        root = dsu.find(0)
        self.assertEqual(dsu.rank[root], 1)

        # Smaller tree hangs under the larger one
        dsu.union(2, root)
        self.assertEqual(dsu.find(2), root)
        self.assertEqual(dsu.rank[root], 1)

    def test_long_chain(self):
        n = 1000
        dsu = DisjointSet(n)
        for i in range(n - 1):
            dsu.union(i, i + 1)
        root = dsu.find(0)
        for i in range(n):
            self.assertEqual(dsu.find(i), root)

if __name__ == '__main__':
    unittest.main()
