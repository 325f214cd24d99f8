"""
state.py - Entity state.

Owns the data of one game: the snake body, the food cell, the committed and
pending directions and the score. No rules beyond the direction latch live
here; movement is done by engine.advance().

Classes:
    Direction   - immutable (dx, dy) value object
    GameState   - mutable state of the current game
    Snapshot    - read-only copy handed to renderers
"""

import random
from collections import deque
from typing import NamedTuple

from .config import START_CELL
from .food import place_food
from .grid import Grid


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, name: str, x: int, y: int):
        self.name = name
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def step(self, cell: tuple[int, int], size: int) -> tuple[int, int]:
        """The cell one grid step away from `cell` in this direction."""
        return (cell[0] + self.x * size, cell[1] + self.y * size)

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name}"


Direction.LEFT  = Direction("LEFT",  -1,  0)
Direction.RIGHT = Direction("RIGHT",  1,  0)
Direction.UP    = Direction("UP",     0, -1)
Direction.DOWN  = Direction("DOWN",   0,  1)
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


# ─────────────────────────── Snapshot ────────────────────────────
class Snapshot(NamedTuple):
    snake: tuple
    food: tuple
    score: int
    direction: Direction
    status: str


# ─────────────────────────── GameState ───────────────────────────
class GameState:
    """
    Pure game data for one game.
    No rendering. No input handling. No scheduling.
    """

    def __init__(self, snake, food: tuple[int, int],
                 direction: Direction = Direction.RIGHT, score: int = 0):
        if not snake:
            raise ValueError("a snake needs at least one cell")
        self.snake: deque[tuple[int, int]] = deque(snake)
        self.food: tuple[int, int] = food
        self.direction: Direction = direction
        self.pending_direction: Direction = direction
        self.score: int = score

    @classmethod
    def fresh(cls, grid: Grid, start: tuple[int, int] = START_CELL,
              direction: Direction = Direction.RIGHT, rng=random) -> "GameState":
        """State at the start of a game: one-cell snake, score 0, food placed."""
        if not grid.contains(start):
            raise ValueError(f"start cell {start} is not on {grid!r}")
        return cls([start], place_food([start], grid, rng), direction)

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    def __len__(self) -> int:
        return len(self.snake)

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """
        Latch a direction for the next tick.

        Checked against the committed direction, not the pending one.
        Returns False when the request is ignored.
        """
        if new_dir.is_opposite(self.direction):
            return False
        self.pending_direction = new_dir
        return True

    def commit_direction(self) -> Direction:
        self.direction = self.pending_direction
        return self.direction

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, cell: tuple[int, int]) -> bool:
        return cell in self.snake

    def snapshot(self, status: str) -> Snapshot:
        return Snapshot(tuple(self.snake), self.food, self.score, self.direction, status)
