from typing import Iterator, List, Dict, Set, Optional
from maze_visualizer.core.grid import Grid, Position

def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

class Solver:
    """
    Incremental best-first search over the open passages of a grid.

    All three searches share the same state: a frontier list with a mirror
    set for O(1) membership, best known distances (g_score), parent pointers
    (came_from) and the set of expanded cells. They only differ in which
    frontier entry select() takes next.
    """
    name = ""

    def __init__(self, grid: Grid, start: Position, goal: Position):
        self.grid = grid
        self.start = start
        self.goal = goal

        start_id = grid.get_index(*start)
        self.frontier: List[Position] = [start]
        self.in_frontier: Set[int] = {start_id}
        self.g_score: Dict[int, int] = {start_id: 0}
        self.came_from: Dict[int, int] = {}
        self.visited: Set[int] = set()

        self.path: List[int] = []
        # Most recently expanded cell
        self.last: Optional[Position] = None
        self.step_count = 0
        self.succeeded = False
        self.failed = False

    @property
    def done(self) -> bool:
        return self.succeeded or self.failed

    @property
    def visited_count(self) -> int:
        return len(self.visited)

    def select(self) -> int:
        """Index into self.frontier of the entry to expand next."""
        return 0

    def step(self) -> bool:
        if self.done:
            return True

        if not self.frontier:
            # Nothing left to explore, the goal is unreachable
            self.failed = True
            return True

        self.step_count += 1
        grid = self.grid
        current = self.frontier.pop(self.select())
        current_id = grid.get_index(*current)
        self.in_frontier.discard(current_id)
        self.visited.add(current_id)
        self.last = current

        if current == self.goal:
            self.path = self.reconstruct_path(current_id)
            self.succeeded = True
            return True

        # Every passage costs exactly 1
        tentative = self.g_score[current_id] + 1
        for nb in grid.open_neighbors(current):
            nb_id = grid.get_index(*nb)
            if nb_id in self.visited:
                continue

            old = self.g_score.get(nb_id)
            if old is None or tentative < old:
                self.g_score[nb_id] = tentative
                self.came_from[nb_id] = current_id
                if nb_id not in self.in_frontier:
                    self.frontier.append(nb)
                    self.in_frontier.add(nb_id)

        return False

    def reconstruct_path(self, end_id: int) -> List[int]:
        path = [end_id]
        curr = end_id
        while curr in self.came_from:
            curr = self.came_from[curr]
            path.append(curr)
        path.reverse()
        return path

    def path_positions(self) -> List[Position]:
        return [self.grid.position(i) for i in self.path]

    def run(self) -> Iterator[str]:
        while not self.step():
            yield f"Visited: {self.visited_count}"
        yield "Solved" if self.succeeded else "No path"

    def run_all(self):
        for _ in self.run():
            pass

class BFS(Solver):
    """ First in, first out. Cells enter the queue in non-decreasing distance order. """
    name = "bfs"

class AStar(Solver):
    name = "a-star"

    def select(self) -> int:
        # Linear scan, first found wins ties
        best = 0
        best_score = None
        for i, p in enumerate(self.frontier):
            g = self.g_score[self.grid.get_index(*p)]
            f = g + self.heuristic(p, self.goal)
            if best_score is None or f < best_score:
                best_score = f
                best = i
        return best

    def heuristic(self, a, b):
        return manhattan(a, b)

class Dijkstra(AStar):
    """ Dijkstra is just A* with h(n) = 0. """
    name = "dijkstra"

    def heuristic(self, a, b):
        return 0

SOLVER_CLASSES = {cls.name: cls for cls in (BFS, Dijkstra, AStar)}

def create_solver(kind: str, grid: Grid, start: Position, goal: Position) -> Solver:
    if kind not in SOLVER_CLASSES:
        raise ValueError(f"Unknown solver: {kind}")
    return SOLVER_CLASSES[kind](grid, start, goal)
