import logging
import pygame
from maze_visualizer.core import config
from maze_visualizer.core.grid import Grid
from maze_visualizer.core.animation import AnimationDriver

logger = logging.getLogger(__name__)

class Renderer:
    COLOR_BG = (255, 255, 255)
    COLOR_WALL = (17, 24, 39)          # gray-900
    COLOR_CARVED = (243, 244, 246)     # gray-100
    COLOR_VISITED = (209, 213, 219)    # gray-300
    COLOR_FRONTIER = (6, 182, 212)     # cyan-500
    COLOR_PATH = (250, 204, 21)        # yellow-400
    COLOR_START = (134, 239, 172)      # green-300
    COLOR_GOAL = (253, 164, 175)       # rose-300
    COLOR_CURSOR = (129, 140, 248)     # indigo-400
    COLOR_TEXT = (17, 24, 39)

    PADDING = 16
    HUD_WIDTH = 300

    GENERATOR_KEYS = {
        pygame.K_1: "recursive-backtracker",
        pygame.K_2: "prims",
        pygame.K_3: "kruskals",
    }
    SOLVER_KEYS = {
        pygame.K_a: "a-star",
        pygame.K_b: "bfs",
        pygame.K_d: "dijkstra",
    }

    def __init__(self, session, driver: AnimationDriver = None, width=1280, height=720,
                 fps=config.FPS, record=False):
        self.session = session
        self.driver = driver if driver is not None else AnimationDriver(session)
        self.screen_width = width
        self.screen_height = height
        self.fps = fps

        # Layout, recomputed on resize
        self.cell_size = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0

        from maze_visualizer.viz.recorder import VideoRecorder, default_clip_name
        clip = default_clip_name(f"maze_{session.generator_kind}_{session.size}x{session.size}") if record else None
        # One video frame per rendered frame
        self.recorder = VideoRecorder(active=record, output_file=clip, fps=fps)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def fit_to_screen(self):
        """Square fit of the maze into the area left of the HUD, with padding."""
        area_w = max(1, self.screen_width - self.HUD_WIDTH)
        size_px = max(1, min(area_w, self.screen_height) - self.PADDING * 2)

        self.cell_size = size_px / self.session.size
        self.offset_x = (area_w - size_px) / 2
        self.offset_y = (self.screen_height - size_px) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption("Maze Generator & Algorithm Visualizer")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height),
                                               pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def handle_input(self):
        session = self.session
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.KEYDOWN:
                key = event.key
                if key == pygame.K_ESCAPE:
                    self.running = False
                elif key == pygame.K_g and session.can_generate:
                    session.start_generation()
                elif key == pygame.K_s:
                    session.step_generation()
                elif key == pygame.K_SPACE:
                    session.toggle_generation()
                elif key in self.GENERATOR_KEYS:
                    session.set_generator(self.GENERATOR_KEYS[key])
                elif key in self.SOLVER_KEYS and session.can_solve:
                    session.set_solver(self.SOLVER_KEYS[key])
                elif key == pygame.K_n and session.can_solve:
                    session.step_solve()
                elif key == pygame.K_p and session.can_solve:
                    session.toggle_solve()
                elif key == pygame.K_c and session.generated:
                    session.clear_solve()
                elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    session.set_size(session.size + 5)
                    self.fit_to_screen()
                elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    session.set_size(session.size - 5)
                    self.fit_to_screen()

    def cell_rect(self, r, c):
        x = self.offset_x + c * self.cell_size
        y = self.offset_y + r * self.cell_size
        return pygame.Rect(int(x), int(y), int(self.cell_size) + 1, int(self.cell_size) + 1)

    def fill_ids(self, ids, color):
        n = self.session.size
        for i in ids:
            r, c = divmod(i, n)
            pygame.draw.rect(self.surface, color, self.cell_rect(r, c))

    def draw_grid(self):
        session = self.session
        grid = session.grid
        n = grid.n
        self.surface.fill(self.COLOR_BG)

        # 1. Overlays (Pass 1 - Backgrounds)
        for r in range(n):
            for c in range(n):
                if grid.is_carved(r, c):
                    pygame.draw.rect(self.surface, self.COLOR_CARVED, self.cell_rect(r, c))

        self.fill_ids(session.visited, self.COLOR_VISITED)
        for r, c in session.frontier:
            pygame.draw.rect(self.surface, self.COLOR_FRONTIER, self.cell_rect(r, c))
        self.fill_ids(session.path, self.COLOR_PATH)

        pygame.draw.rect(self.surface, self.COLOR_START, self.cell_rect(*session.start))
        pygame.draw.rect(self.surface, self.COLOR_GOAL, self.cell_rect(*session.goal))

        cursor = session.current_cell
        if cursor is not None:
            pygame.draw.rect(self.surface, self.COLOR_CURSOR, self.cell_rect(*cursor))

        # 2. Walls (Pass 2 - Foreground)
        size = self.cell_size
        line_w = max(1, int(size * 0.08))
        wall_color = self.COLOR_WALL
        for r in range(n):
            for c in range(n):
                cell = grid.cells[r * n + c]
                x = self.offset_x + c * size
                y = self.offset_y + r * size

                # Shared walls are drawn once, from the cell above / to the left
                if r == 0 and (cell & Grid.NORTH):
                    pygame.draw.line(self.surface, wall_color, (x, y), (x + size, y), line_w)
                if c == 0 and (cell & Grid.WEST):
                    pygame.draw.line(self.surface, wall_color, (x, y), (x, y + size), line_w)
                if cell & Grid.SOUTH:
                    pygame.draw.line(self.surface, wall_color, (x, y + size), (x + size, y + size), line_w)
                if cell & Grid.EAST:
                    pygame.draw.line(self.surface, wall_color, (x + size, y), (x + size, y + size), line_w)

    def draw_hud(self):
        session = self.session
        stats = session.stats
        fps = int(self.clock.get_fps())

        if session.generator is not None:
            status = "Generating" if session.playing_gen else "Generation paused"
        elif session.solver is not None and session.solver.failed:
            status = "No path"
        elif session.solver is not None and session.solver.succeeded:
            status = "Solved"
        elif session.playing_solve:
            status = "Solving"
        elif session.generated:
            status = "Ready"
        else:
            status = "Press G to generate"

        rec_status = "REC" if self.recorder.active else ""
        info = [
            f"FPS: {fps}",
            f"Size: {session.size}x{session.size}",
            f"Generator: {session.generator_kind}",
            f"Solver: {session.solver_kind}",
            f"Status: {status}",
            "",
            f"Visited: {stats.visited}",
            f"Current Path Length: {stats.path_length}",
            f"Heuristic (Manhattan): {stats.heuristic}",
            "",
            "G generate  S step  SPACE play",
            "1/2/3 backtracker/prims/kruskals",
            "A/B/D a-star/bfs/dijkstra",
            "N step  P play  C clear",
            "+/- size  ESC quit",
            rec_status,
        ]

        x = self.screen_width - self.HUD_WIDTH + 10
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (x, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()

            # Logic steps are gated by their own clocks, drawing happens every frame
            self.driver.tick(pygame.time.get_ticks())

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(self.fps)

        self.recorder.stop()
        pygame.quit()
