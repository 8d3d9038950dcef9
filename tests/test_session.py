import random
import time

import pytest

from catchmouse.model import Board, SessionState, Target
from catchmouse.motion import MotionController
from catchmouse.session import SessionTimer


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def reports():
    return []


def make_timer(session, clock, reports):
    return SessionTimer(
        session,
        on_expire=lambda score, elapsed: reports.append((score, elapsed)),
        poll_interval=0.001,
        clock=clock,
    )


def test_session_ends_at_thirty_seconds(clock, reports, capsys):
    session = SessionState(started_at=0.0)
    timer = make_timer(session, clock, reports)
    timer.start()

    clock.now = 29.9
    time.sleep(0.05)
    assert not timer.expired
    assert not session.ended

    clock.now = 30.0
    timer.join(timeout=2.0)

    assert not timer.alive
    assert timer.expired
    assert session.ended
    assert reports == [(0, 30000.0)]
    assert capsys.readouterr().out == "You got a score of 0 in 30 seconds!\n"


def test_reports_score_once_and_only_once(clock, reports):
    session = SessionState(started_at=0.0)
    session.increment()
    session.increment()
    session.increment()
    timer = make_timer(session, clock, reports)
    timer.start()

    clock.now = 31.0
    timer.join(timeout=2.0)
    clock.now = 60.0
    time.sleep(0.02)

    assert reports == [(3, 31000.0)]
    assert not session.increment()
    assert session.score == 3


def test_stop_exits_silently(clock, reports, capsys):
    session = SessionState(started_at=0.0)
    timer = make_timer(session, clock, reports)
    timer.start()
    assert wait_for(lambda: timer.alive)

    timer.stop()
    timer.join(timeout=2.0)

    assert not timer.alive
    assert not timer.expired
    assert not session.ended
    assert reports == []
    assert capsys.readouterr().out == ""


def test_click_then_timeout(clock, reports, capsys):
    session = SessionState(started_at=0.0)
    motion = MotionController(Board(600.0, 600.0), Target(), session, rng=random.Random(8))
    timer = make_timer(session, clock, reports)
    motion.start()
    timer.start()

    clock.now = 2.0
    motion.update(2000.0)
    assert motion.on_target_clicked()
    assert session.score == 1
    assert motion.transition.duration < 1.0 + 1e-9

    clock.now = 30.05
    timer.join(timeout=2.0)
    position = (motion.target.x, motion.target.y)

    assert not motion.on_target_clicked()
    motion.update(500.0)
    assert session.score == 1
    assert (motion.target.x, motion.target.y) == position
    assert reports == [(1, pytest.approx(30050.0))]
    assert "You got a score of 1 in 30 seconds!" in capsys.readouterr().out


def test_two_sessions_are_independent(clock):
    first_reports, second_reports = [], []

    first = SessionState(started_at=0.0)
    first.increment()
    first_timer = make_timer(first, clock, first_reports)

    second = SessionState(started_at=0.0)
    second_timer = make_timer(second, clock, second_reports)

    clock.now = 30.0
    first_timer.start()
    second_timer.start()
    first_timer.join(timeout=2.0)
    second_timer.join(timeout=2.0)

    assert first_reports == [(1, 30000.0)]
    assert second_reports == [(0, 30000.0)]
