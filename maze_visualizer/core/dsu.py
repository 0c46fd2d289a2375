from array import array

class DisjointSet:
    """
    Union-find forest over the integers 0..size-1.
    find() uses path halving, union() uses union by rank.
    """
    __slots__ = ('parent', 'rank')

    def __init__(self, size: int):
        self.parent = array('i', range(size))
        self.rank = array('B', [0] * size)

    def find(self, x: int) -> int:
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """Merges the sets holding x and y. Returns False if already joined."""
        rx = self.find(x)
        ry = self.find(y)
        if rx == ry:
            return False

        if self.rank[rx] < self.rank[ry]:
            self.parent[rx] = ry
        elif self.rank[rx] > self.rank[ry]:
            self.parent[ry] = rx
        else:
            self.parent[ry] = rx
            self.rank[rx] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
