"""
controller.py - Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard events into model commands.
  - Drive the game loop: feed frame time to the model, ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys

import pygame

from .config import WIDTH, HEIGHT, FPS
from .history import ScoreHistoryStore
from .model import GameModel
from .state import Direction
from .view import GameView

logger = logging.getLogger(__name__)

# Commands understood by GameController._dispatch
CMD_DIRECTION  = "direction"
CMD_PAUSE      = "toggle_pause"
CMD_RESTART    = "restart"
CMD_DIFFICULTY = "difficulty"
CMD_QUIT       = "quit"

_DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

_DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "normal",
    pygame.K_3: "hard",
}


def command_for_key(key: int) -> tuple[str, object] | None:
    """Map a pygame key code to a (command, argument) pair, or None."""
    if key in _DIRECTION_KEYS:
        return CMD_DIRECTION, _DIRECTION_KEYS[key]
    if key in _DIFFICULTY_KEYS:
        return CMD_DIFFICULTY, _DIFFICULTY_KEYS[key]
    if key == pygame.K_SPACE:
        return CMD_PAUSE, None
    if key == pygame.K_r:
        return CMD_RESTART, None
    if key in (pygame.K_q, pygame.K_ESCAPE):
        return CMD_QUIT, None
    return None


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, difficulty: str | None = None, history_path: str | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()

        history = ScoreHistoryStore(history_path) if history_path else ScoreHistoryStore()
        self.model = GameModel(history=history)
        if difficulty:
            self.model.set_difficulty(difficulty)
        self.view = GameView(self.screen)
        self.model.add_render_listener(self.view.on_snapshot)
        self.model.add_game_over_listener(self.view.on_game_over)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info("Window open, %d past games on record", len(self.model.history))
        while True:
            dt = self.clock.tick(FPS)
            self._handle_events()
            self.model.update(dt)
            self.view.render(self.model)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                command = command_for_key(event.key)
                if command is not None:
                    self._dispatch(*command)

    def _dispatch(self, command: str, arg) -> None:
        if command == CMD_QUIT:
            self._quit()
        elif command == CMD_RESTART:
            self.model.restart()
        elif command == CMD_PAUSE:
            self.model.toggle_pause()
        elif command == CMD_DIRECTION:
            self.model.request_direction(arg)
        elif command == CMD_DIFFICULTY:
            self.model.set_difficulty(arg)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
