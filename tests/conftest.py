import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from swipe_snake.config import Config, RIGHT
from swipe_snake.game import GameState, RunState
from swipe_snake.grid import Grid
from swipe_snake.session import Session
from swipe_snake.storage import HighScoreStore


def make_state(snake, direction=RIGHT, food=(0, 0), grid=None, score=0):
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        score=score,
        run_state=RunState.RUNNING,
        grid=grid or Grid(),
        rng=random.Random(7),
    )


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "storage.json")


@pytest.fixture
def session(tmp_path, store):
    cfg = Config(seed=3, tick_ms=500, storage_path=tmp_path / "storage.json")
    return Session(cfg, store)
