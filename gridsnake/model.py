"""
model.py - Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

GameModel is the state machine around one GameState:

    idle --start--> running <--pause/resume--> paused
                       |
                   collision
                       v
                     over
    restart: any state --> running (fresh game)

The model never looks at a clock. The controller calls update(dt) every
frame and the TickScheduler decides when the snake moves.
"""

import logging
import random
from typing import Callable

from .config import (
    DIFFICULTIES, DEFAULT_DIFFICULTY, START_CELL,
    STATE_IDLE, STATE_RUNNING, STATE_PAUSED, STATE_OVER,
)
from .engine import Collision, advance
from .food import NoSpaceAvailable
from .grid import Grid
from .history import ScoreHistoryStore
from .scheduler import TickScheduler
from .state import Direction, GameState, Snapshot

logger = logging.getLogger(__name__)


class GameModel:
    """
    Top-level model.  Owns the game state, the tick schedule and the
    score history.
    """

    def __init__(
        self,
        grid: Grid | None = None,
        history: ScoreHistoryStore | None = None,
        difficulty: str = DEFAULT_DIFFICULTY,
        rng=None,
        start: tuple[int, int] = START_CELL,
    ):
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty {difficulty!r}")
        self.grid: Grid = grid or Grid()
        self.history: ScoreHistoryStore = history if history is not None else ScoreHistoryStore(None)
        self.difficulty: str = difficulty
        self.status: str = STATE_IDLE
        self.ticks: int = 0
        self.end_reason: str | None = None
        self._rng = rng or random.Random()
        self._start = start
        self._scheduler = TickScheduler(self._tick)
        self._render_listeners: list[Callable[[Snapshot], None]] = []
        self._game_over_listeners: list[Callable[[int], None]] = []
        self.state: GameState = GameState.fresh(self.grid, start, rng=self._rng)

    # ── Listeners ────────────────────────────────────────────────
    def add_render_listener(self, fn: Callable[[Snapshot], None]) -> None:
        self._render_listeners.append(fn)

    def add_game_over_listener(self, fn: Callable[[int], None]) -> None:
        self._game_over_listeners.append(fn)

    # ── Public API ───────────────────────────────────────────────
    @property
    def period(self) -> int:
        return DIFFICULTIES[self.difficulty]["period"]

    @property
    def scheduled(self) -> bool:
        return self._scheduler.active

    @property
    def score(self) -> int:
        return self.state.score

    def snapshot(self) -> Snapshot:
        return self.state.snapshot(self.status)

    def set_difficulty(self, level: str) -> None:
        if level not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty {level!r}")
        self.difficulty = level
        logger.info("Difficulty set to %s (%d ms per tick)", level, self.period)
        if self.status == STATE_RUNNING:
            self._scheduler.reschedule(self.period)

    def start(self) -> None:
        if self.status != STATE_IDLE:
            return
        self._reset()
        self._run()
        logger.info("Game started on %s", self.difficulty)

    def pause(self) -> None:
        if self.status == STATE_RUNNING:
            self._scheduler.cancel()
            self.status = STATE_PAUSED

    def resume(self) -> None:
        if self.status == STATE_PAUSED:
            self._run()

    def toggle_pause(self) -> None:
        if self.status == STATE_IDLE:
            self.start()
        elif self.status == STATE_RUNNING:
            self.pause()
        elif self.status == STATE_PAUSED:
            self.resume()

    def restart(self) -> None:
        self._scheduler.cancel()
        self._reset()
        self._run()
        logger.info("Game restarted on %s", self.difficulty)

    def request_direction(self, direction: Direction) -> bool:
        if self.status == STATE_OVER:
            return False
        return self.state.request_direction(direction)

    def update(self, dt: float) -> bool:
        """Advance the tick clock by dt milliseconds. Called every frame."""
        return self._scheduler.update(dt)

    # ── Private helpers ──────────────────────────────────────────
    def _run(self) -> None:
        self.status = STATE_RUNNING
        self._scheduler.start(self.period)

    def _reset(self) -> None:
        self.state = GameState.fresh(self.grid, self._start, rng=self._rng)
        self.ticks = 0
        self.end_reason = None
        self._notify_render()

    def _tick(self) -> None:
        if self.status != STATE_RUNNING:
            return
        try:
            advance(self.state, self.grid, self._rng)
        except Collision as exc:
            self._game_over(exc.reason)
            return
        except NoSpaceAvailable:
            logger.warning("Board is full, ending game with score %d", self.state.score)
            self._game_over("board full")
            return
        except Exception:
            logger.exception("Unexpected error during tick %d, ending game", self.ticks)
            self._game_over("internal error")
            return
        self.ticks += 1
        self._notify_render()

    def _game_over(self, reason: str) -> None:
        self._scheduler.cancel()
        self.status = STATE_OVER
        self.end_reason = reason
        score = self.state.score
        logger.info("Game over (%s) after %d ticks, score %d", reason, self.ticks, score)
        try:
            self.history.append(score)
        except Exception:
            logger.exception("Could not record score %d", score)
        self._notify_render()
        for fn in self._game_over_listeners:
            self._call_listener(fn, score)

    def _notify_render(self) -> None:
        snap = self.snapshot()
        for fn in self._render_listeners:
            self._call_listener(fn, snap)

    @staticmethod
    def _call_listener(fn: Callable, arg) -> None:
        try:
            fn(arg)
        except Exception:
            logger.exception("Listener %r failed", fn)
