import logging
import threading
import time
from typing import Callable

from .config import POLL_INTERVAL, SESSION_LENGTH
from .model import SessionState

log = logging.getLogger(__name__)


class SessionTimer:
    """Background ticker that ends the session once its time is up.

    Polls the elapsed time every ``poll_interval`` seconds. When
    ``length`` ms have passed it reads the score, prints the final line,
    freezes the session and calls ``on_expire(score, elapsed_ms)``. This
    happens once; ``stop()`` makes the thread exit without reporting.
    """

    def __init__(
        self,
        session: SessionState,
        on_expire: Callable[[int, float], None] | None = None,
        length: float = SESSION_LENGTH,
        poll_interval: float = POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.session = session
        self.on_expire = on_expire
        self.length = length
        self.poll_interval = poll_interval
        self.clock = clock
        self.expired = False
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="session-timer", daemon=True)

    def start(self):
        log.info("session started, %.0f seconds on the clock", self.length / 1000.0)
        self._thread.start()

    def stop(self):
        self._stop.set()

    def join(self, timeout: float | None = None):
        self._thread.join(timeout)

    @property
    def alive(self):
        return self._thread.is_alive()

    def _run(self):
        while not self._stop.is_set():
            elapsed = self.session.elapsed(self.clock())
            if elapsed >= self.length:
                self._expire(elapsed)
                return
            if self._stop.wait(self.poll_interval):
                break
        log.debug("session timer interrupted")

    def _expire(self, elapsed: float):
        score = self.session.end()
        self.expired = True
        print(f"You got a score of {score} in {elapsed / 1000.0:.0f} seconds!")
        log.info("session ended after %.2fs with score %d", elapsed / 1000.0, score)
        if self.on_expire is not None:
            self.on_expire(score, elapsed)
