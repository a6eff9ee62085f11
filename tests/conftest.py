import random

import pytest

from helpers import FakeStore
from termsnake.session import GameSession


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def cues():
    return []


@pytest.fixture
def session(store, cues):
    return GameSession(store=store, cues=cues.append, rng=random.Random(7))
