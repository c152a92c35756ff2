import os

# pygame must never open a real window or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from snake.game import GameState, Phase, new_game_state
from snake.config import RIGHT


@pytest.fixture
def running_state():
    """Factory for a running game with a chosen snake, food and heading."""
    def make(snake, food=(10, 10), direction=RIGHT, score=0):
        return GameState(
            snake=tuple(snake),
            direction=direction,
            pending=direction,
            food=food,
            score=score,
            phase=Phase.RUNNING,
        )
    return make


@pytest.fixture
def fresh_state():
    return new_game_state()
