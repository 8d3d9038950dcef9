import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class ScriptedRandom:
    """Returns queued values from randint, clamped to the requested range."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        return max(a, min(b, value))


@pytest.fixture
def scripted():
    return ScriptedRandom
