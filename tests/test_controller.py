import random

import pygame
import pytest

from gridsnake.config import STATE_PAUSED, STATE_RUNNING
from gridsnake.controller import (
    CMD_DIFFICULTY, CMD_DIRECTION, CMD_PAUSE, CMD_QUIT, CMD_RESTART,
    GameController, command_for_key,
)
from gridsnake.history import ScoreHistoryStore
from gridsnake.model import GameModel
from gridsnake.state import Direction


@pytest.mark.parametrize("key, expected", [
    (pygame.K_UP, (CMD_DIRECTION, Direction.UP)),
    (pygame.K_DOWN, (CMD_DIRECTION, Direction.DOWN)),
    (pygame.K_LEFT, (CMD_DIRECTION, Direction.LEFT)),
    (pygame.K_RIGHT, (CMD_DIRECTION, Direction.RIGHT)),
    (pygame.K_SPACE, (CMD_PAUSE, None)),
    (pygame.K_r, (CMD_RESTART, None)),
    (pygame.K_1, (CMD_DIFFICULTY, "easy")),
    (pygame.K_2, (CMD_DIFFICULTY, "normal")),
    (pygame.K_3, (CMD_DIFFICULTY, "hard")),
    (pygame.K_ESCAPE, (CMD_QUIT, None)),
    (pygame.K_x, None),
])
def test_key_mapping(key, expected):
    assert command_for_key(key) == expected


@pytest.fixture
def controller():
    # Skip pygame window setup; only the dispatch logic is under test.
    ctrl = GameController.__new__(GameController)
    ctrl.model = GameModel(history=ScoreHistoryStore(None), rng=random.Random(1))
    return ctrl


def test_dispatch_drives_the_model(controller):
    controller._dispatch(CMD_PAUSE, None)
    assert controller.model.status == STATE_RUNNING
    controller._dispatch(CMD_DIRECTION, Direction.UP)
    assert controller.model.state.pending_direction == Direction.UP
    controller._dispatch(CMD_DIFFICULTY, "hard")
    assert controller.model.period == 70
    controller._dispatch(CMD_PAUSE, None)
    assert controller.model.status == STATE_PAUSED
    controller._dispatch(CMD_RESTART, None)
    assert controller.model.status == STATE_RUNNING
    assert controller.model.state.pending_direction == Direction.RIGHT
