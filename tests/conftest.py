"""Shared fixtures for the flappy test suite."""
import pytest

from flappy.canvas import RecordingCanvas
from flappy.high_score import HighScore
from flappy.session import GameSession


class FixedRng:
    """Stand-in random source: always returns the low end of the range."""

    def __init__(self):
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return start

    def getrandbits(self, k):
        return 0


@pytest.fixture
def rng():
    return FixedRng()


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def high_score():
    return HighScore()


@pytest.fixture
def session(high_score, rng):
    """A session in the menu whose generator thread is never started."""
    s = GameSession(high_score, rng=rng, threaded=False)
    yield s
    s.close()


@pytest.fixture
def playing_session(session):
    session.restart()
    return session
