from typing import NamedTuple
from maze_visualizer.core import config

class TickGate:
    """
    Fires at most once per interval. Time is passed in (milliseconds) so the
    same gate works with pygame ticks or a fake clock in tests.
    """
    __slots__ = ('interval_ms', 'last_ms')

    def __init__(self, rate_hz: float):
        if rate_hz <= 0:
            raise ValueError(f"Tick rate must be positive, got {rate_hz}")
        self.interval_ms = 1000.0 / rate_hz
        self.last_ms = 0.0

    def ready(self, now_ms: float) -> bool:
        if now_ms - self.last_ms >= self.interval_ms:
            self.last_ms = now_ms
            return True
        return False

class TickResult(NamedTuple):
    generated: bool
    solved: bool

class AnimationDriver:
    """
    Advances a Session from the render loop. Generation and solving each
    have their own clock; a frame performs at most one step of each.
    Rendering stays with the caller and happens every frame.
    """

    def __init__(self, session, gen_rate: float = config.GEN_STEPS_PER_SEC,
                 solve_rate: float = config.SOLVE_STEPS_PER_SEC):
        self.session = session
        self.gen_gate = TickGate(gen_rate)
        self.solve_gate = TickGate(solve_rate)

    def set_solve_rate(self, rate_hz: float):
        self.solve_gate = TickGate(rate_hz)

    def tick(self, now_ms: float) -> TickResult:
        session = self.session
        gen_fired = False
        solve_fired = False

        if session.playing_gen and self.gen_gate.ready(now_ms):
            gen_fired = True
            if session.step_generation():
                session.playing_gen = False

        if session.playing_solve and self.solve_gate.ready(now_ms):
            solve_fired = True
            if session.step_solve():
                session.playing_solve = False

        return TickResult(gen_fired, solve_fired)
