import math
import random
import threading
import time
from dataclasses import dataclass, field

from .config import MOUSE_HEIGHT, MOUSE_WIDTH


@dataclass
class Board:
    width: float = 0.0
    height: float = 0.0


@dataclass
class Target:
    x: float = MOUSE_WIDTH / 2
    y: float = MOUSE_HEIGHT / 2
    width: float = MOUSE_WIDTH
    height: float = MOUSE_HEIGHT
    heading: float = 0.0

    @property
    def half_width(self):
        return self.width / 2

    @property
    def half_height(self):
        return self.height / 2

    def move_to(self, x: float, y: float):
        self.x, self.y = x, y

    def contains(self, x: float, y: float) -> bool:
        """Hit test in board coordinates against the rotated sprite box."""
        a = math.radians(self.heading)
        dx, dy = x - self.x, y - self.y
        local_x = dx * math.cos(a) + dy * math.sin(a)
        local_y = -dx * math.sin(a) + dy * math.cos(a)
        return abs(local_x) <= self.half_width and abs(local_y) <= self.half_height


def generate_coordinate(dimension: float, extent: float, rng: random.Random) -> float:
    """Pick a centre coordinate along one board axis.

    Samples an integer in ``[0, floor(dimension)]`` and clamps it so a sprite
    of size ``extent`` stays fully on the board. Boards that have not been laid
    out yet (zero size) collapse to ``extent / 2``.
    """
    dimension = max(0.0, float(dimension))
    half = extent / 2
    sample = rng.randint(0, int(math.floor(dimension)))
    value = min(sample, dimension - half)
    return float(max(value, half))


@dataclass
class SessionState:
    """Score and timing for one play session.

    The frame loop writes the score; the session timer thread reads it, so
    ``score`` and ``ended`` are only touched under ``_lock``.
    """

    started_at: float = field(default_factory=time.monotonic)
    _score: int = 0
    _ended: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def score(self) -> int:
        return self.snapshot()

    @property
    def ended(self) -> bool:
        with self._lock:
            return self._ended

    def elapsed(self, now: float | None = None) -> float:
        """Milliseconds since the session started."""
        if now is None:
            now = time.monotonic()
        return (now - self.started_at) * 1000.0

    def increment(self) -> bool:
        with self._lock:
            if self._ended:
                return False
            self._score += 1
            return True

    def snapshot(self) -> int:
        with self._lock:
            return self._score

    def end(self) -> int:
        """Freeze the session and return the final score."""
        with self._lock:
            self._ended = True
            return self._score
