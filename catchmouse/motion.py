import logging
import math
import random
from dataclasses import dataclass

from .config import ANIMATION_DURATION, TELEPORT_DURATION
from .model import Board, SessionState, Target, generate_coordinate

log = logging.getLogger(__name__)


@dataclass
class Transition:
    """Straight-line move from ``start`` to ``end`` over ``duration`` ms."""

    start: tuple[float, float]
    end: tuple[float, float]
    duration: float
    elapsed: float = 0.0
    stopped: bool = False

    @property
    def finished(self):
        return not self.stopped and self.elapsed >= self.duration

    @property
    def running(self):
        return not self.stopped and not self.finished

    @property
    def progress(self):
        if self.duration <= 0.0:
            return 1.0
        return max(0.0, min(1.0, self.elapsed / self.duration))

    @property
    def position(self):
        t = self.progress
        x0, y0 = self.start
        x1, y1 = self.end
        return x0 + (x1 - x0) * t, y0 + (y1 - y0) * t

    @property
    def heading(self):
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        if dx == 0.0 and dy == 0.0:
            return None
        return math.degrees(math.atan2(dy, dx))

    def advance(self, dt):
        if self.running:
            self.elapsed = min(self.duration, self.elapsed + dt)
        return self.position

    def stop(self):
        self.stopped = True


class MotionController:
    """Keeps the target moving between random points on the board.

    Each move is a ``Transition``. ``update`` advances the current one and,
    once it completes, starts the next with the standard duration. A catch
    stops the move, scores, and teleports the target.
    """

    def __init__(
        self,
        board: Board,
        target: Target,
        session: SessionState,
        rng: random.Random | None = None,
        duration: float = ANIMATION_DURATION,
        teleport_duration: float = TELEPORT_DURATION,
    ):
        self.board = board
        self.target = target
        self.session = session
        self.rng = rng or random.Random()
        self.duration = duration
        self.teleport_duration = teleport_duration
        self.transition: Transition | None = None
        self.moves = 0

    def generate_x(self):
        return generate_coordinate(self.board.width, self.target.width, self.rng)

    def generate_y(self):
        return generate_coordinate(self.board.height, self.target.height, self.rng)

    def retarget(self, duration: float) -> Transition:
        start = (self.target.x, self.target.y)
        end = (self.generate_x(), self.generate_y())
        self.transition = Transition(start=start, end=end, duration=duration)
        heading = self.transition.heading
        if heading is not None:
            self.target.heading = heading
        self.moves += 1
        log.debug("retarget %.0fms (%.1f, %.1f) -> (%.1f, %.1f)", duration, *start, *end)
        return self.transition

    def start(self):
        return self.retarget(self.duration)

    def update(self, dt: float):
        """Advance the running move by ``dt`` ms and chain the next one."""
        if self.session.ended or self.transition is None:
            return
        x, y = self.transition.advance(dt)
        self.target.move_to(x, y)
        if self.transition.finished:
            self.retarget(self.duration)

    def on_target_clicked(self) -> bool:
        if self.session.ended:
            return False

        if self.transition is not None:
            self.transition.stop()
            self.target.move_to(*self.transition.position)

        if not self.session.increment():
            return False
        log.debug("caught at (%.1f, %.1f), score %d", self.target.x, self.target.y, self.session.snapshot())

        self.retarget(self.teleport_duration)
        return True

    def freeze(self):
        if self.transition is not None:
            self.transition.stop()
