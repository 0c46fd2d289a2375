# ==========================================
# GLOBAL CONFIGURATION
# Defaults for a session; main.py overrides them per run.
# ==========================================

MIN_SIZE = 20
MAX_SIZE = 100
DEFAULT_SIZE = 30

# Generation is capped at this many steps per second, solving runs at its own rate
GEN_STEPS_PER_SEC = 120
SOLVE_STEPS_PER_SEC = 10

# Render rate of the pygame loop
FPS = 60

GENERATORS = ("recursive-backtracker", "prims", "kruskals")
SOLVERS = ("a-star", "bfs", "dijkstra")

DEFAULT_GENERATOR = "recursive-backtracker"
DEFAULT_SOLVER = "a-star"

def clamp_size(n: int) -> int:
    return max(MIN_SIZE, min(MAX_SIZE, int(n)))
