import random

import pytest

from pombo.config import GameConfig
from pombo.data_models import Obstacle
from pombo.game_engine import GameEngine
from pombo.obstacle_stream import ObstacleStream
from pombo.physics_core import PhysicsCore


class ScriptedRandom:
    """Stands in for random.Random; hands out queued gap positions."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def config():
    return GameConfig(width=600, height=600)


@pytest.fixture
def floating_config():
    """No gravity, so the bird holds its height while pipes scroll by."""
    return GameConfig(width=600, height=600, gravity=0.0)


@pytest.fixture
def physics(config):
    return PhysicsCore(config)


@pytest.fixture
def stream(config):
    return ObstacleStream(config=config, rng=random.Random(1234))


@pytest.fixture
def engine(config):
    return GameEngine(config, rng=random.Random(1234))


@pytest.fixture
def floating_engine(floating_config):
    engine = GameEngine(floating_config, rng=random.Random(1234))
    engine.on_activate()
    return engine


def make_pipe(x, gap_top, pipe_id=0, passed=False):
    return Obstacle(id=pipe_id, x=float(x), gap_top=float(gap_top), passed=passed)
